"""JSON tree model and view-state for the raw-data inspector."""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from loguru import logger

from pokedex_browser.config import INSPECTOR_INITIAL_DEPTH
from pokedex_browser.core.errors import TreeParseError
from pokedex_browser.models.state import InspectorState, TreePath


@dataclass(frozen=True)
class JsonNode:
    """One node of a parsed JSON tree.

    Containers (``kind`` "object" or "array") have ``children`` keyed by
    member name or index; scalars carry ``value``.
    """

    kind: str
    path: TreePath
    children: tuple[tuple[str, "JsonNode"], ...] = ()
    value: Any = None

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def is_container(self) -> bool:
        return self.kind in ("object", "array")


def parse_tree(value: Any, path: TreePath = ()) -> JsonNode:
    """Build a JsonNode tree from a parsed JSON value.

    Raises:
        TreeParseError: If ``value`` contains anything JSON cannot represent
            (non-string keys, NaN/infinity, arbitrary Python objects).
    """
    if isinstance(value, dict):
        children = []
        for key, child in value.items():
            if not isinstance(key, str):
                msg = f"non-string object key {key!r} at {'.'.join(path) or '<root>'}"
                raise TreeParseError(msg)
            children.append((key, parse_tree(child, (*path, key))))
        return JsonNode(kind="object", path=path, children=tuple(children))
    if isinstance(value, list):
        return JsonNode(
            kind="array",
            path=path,
            children=tuple(
                (str(i), parse_tree(child, (*path, str(i)))) for i, child in enumerate(value)
            ),
        )
    if value is None:
        return JsonNode(kind="null", path=path)
    if isinstance(value, bool):
        return JsonNode(kind="boolean", path=path, value=value)
    if isinstance(value, int):
        return JsonNode(kind="number", path=path, value=value)
    if isinstance(value, float):
        if not math.isfinite(value):
            msg = f"non-finite number at {'.'.join(path) or '<root>'}"
            raise TreeParseError(msg)
        return JsonNode(kind="number", path=path, value=value)
    if isinstance(value, str):
        return JsonNode(kind="string", path=path, value=value)
    msg = f"unsupported value of type {type(value).__name__} at {'.'.join(path) or '<root>'}"
    raise TreeParseError(msg)


def iter_containers(node: JsonNode) -> Iterator[JsonNode]:
    """Yield every object/array node in pre-order."""
    if node.is_container:
        yield node
        for _key, child in node.children:
            yield from iter_containers(child)


def collapse_below(node: JsonNode, depth: int) -> InspectorState:
    """View-state with every container at ``depth`` or deeper collapsed."""
    return InspectorState(
        collapsed=frozenset(n.path for n in iter_containers(node) if n.depth >= depth)
    )


def initial_inspector_state(raw: Any) -> InspectorState:
    """Initial view-state for a freshly loaded payload.

    Falls back to the default (nothing collapsed) when the payload cannot
    be parsed as a tree; the renderer reports the failure separately.
    """
    try:
        tree = parse_tree(raw)
    except TreeParseError as e:
        logger.debug("Inspector fallback to default view-state: {}", e)
        return InspectorState()
    return collapse_below(tree, INSPECTOR_INITIAL_DEPTH)


def toggle(state: InspectorState, path: TreePath) -> InspectorState:
    """Flip the collapsed flag of ``path``."""
    if path in state.collapsed:
        return InspectorState(collapsed=state.collapsed - {path})
    return InspectorState(collapsed=state.collapsed | {path})


def parse_path(dotted: str) -> TreePath:
    """Turn ``"types.0.type"`` into ``("types", "0", "type")``; ``""`` is the root.

    A backslash escapes the next character, so ``"a\\.b"`` is the single key
    ``"a.b"``. Empty segments are dropped, which means empty object keys
    cannot be addressed.
    """
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for char in dotted:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return tuple(part for part in parts if part)


def format_path(path: TreePath) -> str:
    """Inverse of :func:`parse_path` for paths without empty keys."""
    return ".".join(part.replace("\\", "\\\\").replace(".", "\\.") for part in path)
