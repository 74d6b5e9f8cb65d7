"""Strict parser for resource URLs of the form ``<prefix>/<id>/``."""

import re
from functools import lru_cache

from pokedex_browser.config import POKEMON_RESOURCE_PREFIX
from pokedex_browser.core.errors import DecodeError


@lru_cache(maxsize=8)
def _pattern(prefix: str) -> re.Pattern[str]:
    # ASCII digits only; \d would also accept other Unicode decimals.
    return re.compile(re.escape(prefix.rstrip("/")) + r"/([0-9]+)/")


def extract_resource_id(url: str, prefix: str = POKEMON_RESOURCE_PREFIX) -> int:
    """Parse the numeric id out of a resource URL.

    The whole string must match: the literal prefix, a slash, one or more
    decimal digits, a trailing slash, and nothing else. URLs that merely
    contain a number somewhere are rejected.

    Args:
        url: Resource URL, e.g. ``https://pokeapi.co/api/v2/pokemon/25/``.
        prefix: Expected URL before the id segment.

    Returns:
        The parsed non-negative integer.

    Raises:
        DecodeError: If ``url`` does not match exactly.
    """
    match = _pattern(prefix).fullmatch(url)
    if match is None:
        msg = f"expected a resource URL of the form {prefix.rstrip('/')}/<id>/, got {url!r}"
        raise DecodeError(msg)
    return int(match.group(1))
