"""Application state: top-level mode plus the browsing session."""

from dataclasses import dataclass, field

from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail
from pokedex_browser.models.remote import NotRequested, RemoteStatus

# A location in the inspector tree: object keys and array indices, as strings.
TreePath = tuple[str, ...]


@dataclass(frozen=True)
class InspectorState:
    """View-state of the JSON inspector: the set of collapsed node paths."""

    collapsed: frozenset[TreePath] = frozenset()

    def is_collapsed(self, path: TreePath) -> bool:
        return path in self.collapsed


@dataclass(frozen=True)
class Session:
    """Everything the user can interact with once the catalog is loaded."""

    catalog: tuple[CatalogEntry, ...]
    selection: RemoteStatus[PokemonDetail] = field(default_factory=NotRequested)
    inspector: InspectorState = field(default_factory=InspectorState)
    filter_text: str = ""


@dataclass(frozen=True)
class Loading:
    """Catalog fetch has been issued at startup."""


@dataclass(frozen=True)
class Loaded:
    session: Session


@dataclass(frozen=True)
class Errored:
    """Catalog fetch failed. Terminal."""

    message: str


AppState = Loading | Loaded | Errored
