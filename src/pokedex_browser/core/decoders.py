"""Decode untrusted PokeAPI JSON into domain models.

Decoders are plain callables taking a parsed JSON value and returning a typed
value, or raising :class:`DecodeError` for the first mismatch found. They are
built by composing the small combinators below, so a record is either decoded
completely or not at all.
"""

import copy
from collections.abc import Callable
from typing import Any, TypeVar

from pokedex_browser.config import POKEMON_RESOURCE_PREFIX
from pokedex_browser.core.errors import DecodeError
from pokedex_browser.core.resource_id import extract_resource_id
from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail

T = TypeVar("T")
U = TypeVar("U")

Decoder = Callable[[Any], T]


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, dict):
        return "an object"
    if isinstance(value, list):
        return "an array"
    return f"{type(value).__name__} {value!r}"


# --- Primitive decoders ---


def string(value: Any) -> str:
    if not isinstance(value, str):
        msg = f"expected a string, got {_describe(value)}"
        raise DecodeError(msg)
    return value


def integer(value: Any) -> int:
    # bool is a subclass of int, but true/false is not a number in JSON.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected an integer, got {_describe(value)}"
        raise DecodeError(msg)
    return value


# --- Combinators ---


def field(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the member ``name`` of a JSON object with ``decoder``."""

    def decode(value: Any) -> T:
        if not isinstance(value, dict):
            msg = f"expected an object with field {name!r}, got {_describe(value)}"
            raise DecodeError(msg)
        if name not in value:
            msg = f"missing field {name!r}"
            raise DecodeError(msg)
        try:
            return decoder(value[name])
        except DecodeError as e:
            raise e.within(name) from None

    return decode


def at(path: tuple[str, ...], decoder: Decoder[T]) -> Decoder[T]:
    """Decode a value nested below a chain of object fields."""
    for name in reversed(path):
        decoder = field(name, decoder)
    return decoder


def array(decoder: Decoder[T]) -> Decoder[tuple[T, ...]]:
    """Decode every element of a JSON array, stopping at the first failure."""

    def decode(value: Any) -> tuple[T, ...]:
        if not isinstance(value, list):
            msg = f"expected an array, got {_describe(value)}"
            raise DecodeError(msg)
        items: list[T] = []
        for index, item in enumerate(value):
            try:
                items.append(decoder(item))
            except DecodeError as e:
                raise e.within(index) from None
        return tuple(items)

    return decode


def map_(fn: Callable[[T], U], decoder: Decoder[T]) -> Decoder[U]:
    """Decode with ``decoder`` then transform; ``fn`` may raise DecodeError."""

    def decode(value: Any) -> U:
        return fn(decoder(value))

    return decode


def refine(decoder: Decoder[T], predicate: Callable[[T], bool], message: str) -> Decoder[T]:
    """Decode with ``decoder`` and reject results failing ``predicate``."""

    def decode(value: Any) -> T:
        result = decoder(value)
        if not predicate(result):
            msg = f"{message}, got {result!r}"
            raise DecodeError(msg)
        return result

    return decode


non_empty_string = refine(string, lambda s: s != "", "expected a non-empty string")
positive_integer = refine(integer, lambda n: n > 0, "expected a positive integer")
non_negative_integer = refine(integer, lambda n: n >= 0, "expected a non-negative integer")


def _catalog_id(prefix: str) -> Decoder[int]:
    return refine(
        map_(lambda url: extract_resource_id(url, prefix), string),
        lambda n: n > 0,
        "expected a positive resource id",
    )


_type_name = at(("type", "name"), string)


# --- Record decoders ---


def decode_list_item(value: Any, prefix: str = POKEMON_RESOURCE_PREFIX) -> CatalogEntry:
    """Decode one ``{"name": ..., "url": ...}`` entry of the list endpoint.

    ``prefix`` is the URL the entry's ``url`` must start with, before the id.
    """
    return CatalogEntry(
        id=field("url", _catalog_id(prefix))(value),
        name=field("name", non_empty_string)(value),
    )


def decode_list_response(
    value: Any, prefix: str = POKEMON_RESOURCE_PREFIX
) -> tuple[CatalogEntry, ...]:
    """Decode the list endpoint body; any bad entry fails the whole list."""
    return field("results", array(lambda item: decode_list_item(item, prefix)))(value)


def decode_detail_record(value: Any) -> PokemonDetail:
    """Decode the detail endpoint body, keeping a copy of it as ``raw``."""
    return PokemonDetail(
        id=field("id", positive_integer)(value),
        name=field("name", non_empty_string)(value),
        base_experience=field("base_experience", non_negative_integer)(value),
        types=field("types", array(_type_name))(value),
        raw=copy.deepcopy(value),
    )
