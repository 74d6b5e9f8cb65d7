"""Terminal front end for the Pokédex browser."""

import asyncio
import json
from typing import Annotated

import typer
from loguru import logger

from pokedex_browser.api import PokeApi
from pokedex_browser.core.inspector import parse_path, toggle
from pokedex_browser.core.transition import (
    EntitySelected,
    Event,
    FilterTextChanged,
    InspectorStateChanged,
    visible_catalog,
)
from pokedex_browser.logging_config import configure_logging
from pokedex_browser.models.remote import Ready
from pokedex_browser.models.state import AppState, Errored, Loaded
from pokedex_browser.protocols import GatewayProtocol
from pokedex_browser.render import (
    catalog_as_json,
    detail_as_json,
    render_catalog,
    render_detail,
    render_state,
)
from pokedex_browser.store import Store

app = typer.Typer(help="Pokédex browser: list, filter and inspect the first 151 Pokémon.")

BROWSE_HELP = """Commands:
  list               show the (filtered) catalog
  filter <text>      filter the catalog by name; 'filter' alone clears it
  select <id>        load a Pokémon's details
  toggle <path>      expand/collapse a raw-data node, e.g. 'toggle types.0'
                     (write a literal dot in a key as '\\.')
  show               show the detail pane
  quit               leave"""


def make_gateway() -> GatewayProtocol:
    return PokeApi()


def _settle(store: Store, *events: Event) -> AppState:
    """Submit ``events`` and process until no fetch is outstanding."""
    for event in events:
        store.submit(event)
    return asyncio.run(store.run_until_idle())


def _bootstrap() -> Store:
    """Load the catalog, or render the error screen and exit."""
    store = Store(make_gateway())
    state = _settle(store)
    if isinstance(state, Errored):
        typer.echo(render_state(state))
        raise typer.Exit(1)
    return store


def _session(state: AppState) -> Loaded:
    if not isinstance(state, Loaded):
        msg = f"expected a loaded session, got {type(state).__name__}"
        raise RuntimeError(msg)
    return state


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@app.command()
def catalog(
    filter_text: Annotated[
        str,
        typer.Option("--filter", "-f", help="Only show Pokémon whose name contains this"),
    ] = "",
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List the catalog, optionally filtered by name."""
    store = _bootstrap()
    loaded = _session(_settle(store, FilterTextChanged(filter_text)))
    entries = visible_catalog(loaded.session)

    if output_json:
        typer.echo(json.dumps(catalog_as_json(entries), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_catalog(entries))


@app.command()
def show(
    pokemon_id: int = typer.Argument(..., help="Pokédex number"),
    expand: Annotated[
        list[str] | None,
        typer.Option("--expand", "-e", help="Toggle a raw-data node (dotted path); repeatable"),
    ] = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show one Pokémon's details and its raw data."""
    store = _bootstrap()
    loaded = _session(_settle(store, EntitySelected(pokemon_id)))
    session = loaded.session

    for dotted in expand or []:
        inspector = toggle(session.inspector, parse_path(dotted))
        session = _session(_settle(store, InspectorStateChanged(inspector))).session

    selection = session.selection
    if output_json and isinstance(selection, Ready):
        typer.echo(json.dumps(detail_as_json(selection.value), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_detail(selection, session.inspector))
    if not isinstance(selection, Ready):
        raise typer.Exit(1)


@app.command()
def browse() -> None:
    """Interactive session: filter, select and inspect."""
    store = _bootstrap()
    typer.echo(render_state(store.state))
    typer.echo()
    typer.echo(BROWSE_HELP)

    while True:
        try:
            line = typer.prompt("pokedex", default="", show_default=False, prompt_suffix="> ")
        except typer.Abort:
            break
        command, _, arg = line.strip().partition(" ")
        arg = arg.strip()
        session = _session(store.state).session

        if command in ("quit", "exit", "q"):
            break
        if command == "":
            continue
        if command == "list":
            typer.echo(render_catalog(visible_catalog(session)))
        elif command == "filter":
            session = _session(_settle(store, FilterTextChanged(arg))).session
            typer.echo(render_catalog(visible_catalog(session)))
        elif command == "select":
            if not arg.isdecimal():
                typer.echo("Usage: select <id>")
                continue
            session = _session(_settle(store, EntitySelected(int(arg)))).session
            typer.echo(render_detail(session.selection, session.inspector))
        elif command == "toggle":
            inspector = toggle(session.inspector, parse_path(arg))
            session = _session(_settle(store, InspectorStateChanged(inspector))).session
            typer.echo(render_detail(session.selection, session.inspector))
        elif command == "show":
            typer.echo(render_detail(session.selection, session.inspector))
        else:
            logger.debug("Unknown browse command: {!r}", command)
            typer.echo(BROWSE_HELP)
