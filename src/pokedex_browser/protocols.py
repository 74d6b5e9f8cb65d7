"""Protocols for dependency injection in the browser."""

from typing import Protocol, runtime_checkable

from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail


@runtime_checkable
class GatewayProtocol(Protocol):
    """Protocol for the remote-fetch gateway.

    Both operations raise TransportError on any failure.
    """

    def fetch_catalog(self) -> tuple[CatalogEntry, ...]:
        """Fetch the catalog list."""
        ...

    def fetch_detail(self, pokemon_id: int) -> PokemonDetail:
        """Fetch one Pokémon's details."""
        ...
