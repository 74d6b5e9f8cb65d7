"""Render application state as plain text."""

import json
from typing import Any, assert_never

from pokedex_browser.core.errors import TreeParseError
from pokedex_browser.core.inspector import JsonNode, format_path, parse_tree
from pokedex_browser.core.transition import visible_catalog
from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail
from pokedex_browser.models.remote import Failed, InFlight, NotRequested, Ready, RemoteStatus
from pokedex_browser.models.state import AppState, Errored, InspectorState, Loaded, Loading

TREE_PARSE_FAILED = "(failed to parse raw data)"


def render_state(state: AppState) -> str:
    """Full view: catalog on top, detail pane below."""
    match state:
        case Loading():
            return "Loading Pokédex..."
        case Errored(message=message):
            return f"Error: {message}"
        case Loaded(session=session):
            parts = []
            if session.filter_text:
                parts.append(f"Filter: {session.filter_text!r}")
            parts.append(render_catalog(visible_catalog(session)))
            parts.append(render_detail(session.selection, session.inspector))
            return "\n\n".join(parts)
        case _:
            assert_never(state)


def render_catalog(entries: tuple[CatalogEntry, ...]) -> str:
    if not entries:
        return "No Pokémon match."
    return "\n".join(f"  #{entry.id:<4} {entry.name}" for entry in entries)


def render_detail(selection: RemoteStatus[PokemonDetail], inspector: InspectorState) -> str:
    """Detail pane for the current selection.

    A failed selection only replaces this pane; the catalog stays usable.
    """
    match selection:
        case NotRequested():
            return "Select a Pokémon to see its details."
        case InFlight(pokemon_id=pokemon_id):
            return f"Loading #{pokemon_id}..."
        case Failed(message=message):
            return f"Error: {message}"
        case Ready(value=detail):
            header = "\n".join(
                [
                    f"#{detail.id} {detail.name}",
                    f"Base experience: {detail.base_experience}",
                    f"Types: {', '.join(detail.types) or '-'}",
                ]
            )
            return f"{header}\n\nRaw data:\n{render_raw(detail.raw, inspector)}"
        case _:
            assert_never(selection)


def render_raw(raw: Any, inspector: InspectorState) -> str:
    """Inspector tree for ``raw``, or an inline notice if it is not a JSON tree."""
    try:
        tree = parse_tree(raw)
    except TreeParseError:
        return TREE_PARSE_FAILED
    return "\n".join(render_tree(tree, inspector))


def render_tree(node: JsonNode, inspector: InspectorState, label: str = "") -> list[str]:
    """Lines of an indented tree; collapsed containers show a summary only."""
    indent = "  " * node.depth
    prefix = f"{indent}{label}: " if label else indent
    if not node.is_container:
        return [f"{prefix}{json.dumps(node.value, ensure_ascii=False)}"]

    opener, closer = ("{", "}") if node.kind == "object" else ("[", "]")
    if inspector.is_collapsed(node.path):
        noun = "key" if node.kind == "object" else "item"
        count = len(node.children)
        plural = "" if count == 1 else "s"
        return [f"{prefix}{opener}...{closer} ({count} {noun}{plural}) [{format_path(node.path)}]"]

    lines = [f"{prefix}{opener}"]
    for key, child in node.children:
        lines.extend(render_tree(child, inspector, key))
    lines.append(f"{indent}{closer}")
    return lines


def catalog_as_json(entries: tuple[CatalogEntry, ...]) -> dict[str, Any]:
    return {
        "count": len(entries),
        "results": [{"id": entry.id, "name": entry.name} for entry in entries],
    }


def detail_as_json(detail: PokemonDetail) -> dict[str, Any]:
    return {
        "id": detail.id,
        "name": detail.name,
        "base_experience": detail.base_experience,
        "types": list(detail.types),
    }
