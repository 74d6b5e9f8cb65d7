"""Domain models for the Pokédex."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogEntry:
    """A single Pokémon in the catalog list."""

    id: int
    name: str


@dataclass(frozen=True)
class PokemonDetail:
    """Full information about one Pokémon.

    ``raw`` holds the response body exactly as decoded, for the inspector.
    """

    id: int
    name: str
    base_experience: int
    types: tuple[str, ...]
    raw: Any = field(default=None, compare=False, repr=False)
