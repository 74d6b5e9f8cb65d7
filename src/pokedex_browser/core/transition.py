"""Pure state transitions for the Pokédex browser.

``transition(event, state)`` maps an event and the current state to the next
state plus an optional effect for the store to run. Nothing here performs I/O.
"""

from dataclasses import dataclass, replace
from typing import assert_never

from pokedex_browser.core.inspector import initial_inspector_state
from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail
from pokedex_browser.models.remote import Err, Failed, InFlight, Ok, Ready, Result
from pokedex_browser.models.state import (
    AppState,
    Errored,
    InspectorState,
    Loaded,
    Loading,
    Session,
)

# --- Events ---


@dataclass(frozen=True)
class CatalogLoaded:
    result: Result[tuple[CatalogEntry, ...]]


@dataclass(frozen=True)
class EntitySelected:
    pokemon_id: int


@dataclass(frozen=True)
class DetailLoaded:
    """Outcome of a detail fetch, tagged with the id it was requested for."""

    pokemon_id: int
    result: Result[PokemonDetail]


@dataclass(frozen=True)
class InspectorStateChanged:
    inspector: InspectorState


@dataclass(frozen=True)
class FilterTextChanged:
    text: str


Event = CatalogLoaded | EntitySelected | DetailLoaded | InspectorStateChanged | FilterTextChanged


# --- Effects ---


@dataclass(frozen=True)
class FetchCatalog:
    pass


@dataclass(frozen=True)
class FetchDetail:
    pokemon_id: int


Effect = FetchCatalog | FetchDetail


def init() -> tuple[AppState, Effect]:
    """Starting state and the catalog fetch that goes with it."""
    return Loading(), FetchCatalog()


def transition(event: Event, state: AppState) -> tuple[AppState, Effect | None]:
    """Compute the next state for ``event``.

    Only ``CatalogLoaded`` is meaningful while loading; every other event
    needs a loaded session. Errored is terminal. Events that do not apply to
    the current state leave it untouched.
    """
    match state:
        case Loading():
            if isinstance(event, CatalogLoaded):
                return _catalog_loaded(event), None
            return state, None
        case Loaded(session=session):
            new_session, effect = _update_session(event, session)
            if new_session is session:
                return state, effect
            return Loaded(new_session), effect
        case Errored():
            return state, None
        case _:
            assert_never(state)


def _catalog_loaded(event: CatalogLoaded) -> AppState:
    match event.result:
        case Ok(value=entries):
            return Loaded(Session(catalog=tuple(entries)))
        case Err(message=message):
            return Errored(message)
        case _:
            assert_never(event.result)


def _update_session(event: Event, session: Session) -> tuple[Session, Effect | None]:
    match event:
        case CatalogLoaded():
            # The catalog is populated exactly once.
            return session, None
        case EntitySelected(pokemon_id=pokemon_id):
            return replace(session, selection=InFlight(pokemon_id)), FetchDetail(pokemon_id)
        case DetailLoaded():
            return _detail_loaded(event, session), None
        case InspectorStateChanged(inspector=inspector):
            return replace(session, inspector=inspector), None
        case FilterTextChanged(text=text):
            return replace(session, filter_text=text), None
        case _:
            assert_never(event)


def _detail_loaded(event: DetailLoaded, session: Session) -> Session:
    if not _awaiting(session, event.pokemon_id):
        # Stale: the user moved on to another selection before this arrived.
        return session
    match event.result:
        case Ok(value=detail):
            return replace(
                session,
                selection=Ready(detail),
                inspector=initial_inspector_state(detail.raw),
            )
        case Err(message=message):
            return replace(session, selection=Failed(message))
        case _:
            assert_never(event.result)


def is_stale(event: Event, state: AppState) -> bool:
    """True for a detail result that no longer matches the current selection."""
    return (
        isinstance(event, DetailLoaded)
        and isinstance(state, Loaded)
        and not _awaiting(state.session, event.pokemon_id)
    )


def _awaiting(session: Session, pokemon_id: int) -> bool:
    return session.selection == InFlight(pokemon_id)


def filter_catalog(entries: tuple[CatalogEntry, ...], text: str) -> tuple[CatalogEntry, ...]:
    """Entries whose name contains ``text``, ignoring case; order is kept."""
    needle = text.casefold()
    if not needle:
        return entries
    return tuple(entry for entry in entries if needle in entry.name.casefold())


def visible_catalog(session: Session) -> tuple[CatalogEntry, ...]:
    return filter_catalog(session.catalog, session.filter_text)
