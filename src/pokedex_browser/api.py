"""PokeAPI client: the two read operations the browser needs."""

from typing import Any

import requests
from loguru import logger

from pokedex_browser.config import API_BASE_URL, CATALOG_LIMIT, REQUEST_TIMEOUT
from pokedex_browser.core.decoders import decode_detail_record, decode_list_response
from pokedex_browser.core.errors import DecodeError, TransportError
from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail


class PokeApi:
    """Read-only PokeAPI gateway.

    Every failure (network, HTTP status, invalid JSON, unexpected shape) is
    raised as a TransportError; callers cannot and need not tell them apart.
    """

    def __init__(self, *, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` below the base URL, return the parsed JSON body."""
        url = f"{self.base_url}/{path}"
        logger.debug("Making request: GET {} {}", url, params or {})
        try:
            r = self.sess.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Request failed: GET {}: {}", url, e)
            msg = f"GET {path!r} failed"
            raise TransportError(msg) from e

    def fetch_catalog(self) -> tuple[CatalogEntry, ...]:
        """Fetch and decode the fixed-size Pokémon list."""
        body = self.get("pokemon", {"limit": CATALOG_LIMIT})
        try:
            entries = decode_list_response(body, prefix=f"{self.base_url}/pokemon")
        except DecodeError as e:
            logger.warning("Undecodable catalog response: {}", e)
            msg = "catalog response could not be decoded"
            raise TransportError(msg) from e
        logger.debug("Catalog loaded: {} entries", len(entries))
        return entries

    def fetch_detail(self, pokemon_id: int) -> PokemonDetail:
        """Fetch and decode one Pokémon's details."""
        body = self.get(f"pokemon/{pokemon_id}")
        try:
            return decode_detail_record(body)
        except DecodeError as e:
            logger.warning("Undecodable detail response for {}: {}", pokemon_id, e)
            msg = f"detail response for {pokemon_id} could not be decoded"
            raise TransportError(msg) from e
