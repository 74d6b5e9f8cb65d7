"""Browse, filter and inspect the PokeAPI Pokédex."""

from pokedex_browser.api import PokeApi
from pokedex_browser.protocols import GatewayProtocol
from pokedex_browser.store import Store

__all__ = ["GatewayProtocol", "PokeApi", "Store"]
