"""
Tree Builder.

Walks a parsed JSON value depth-first and synthesizes one node per location
and one edge per parent/child relation, assigning each node a fixed layout
coordinate on the way down.

Ids are path expressions: the root is ``$``, object children append
``.key`` and array children append ``[index]``. Children sit one row below
their parent, spaced horizontally by ``(i - 1) * spacing``; this centers rows
of three exactly and leans right for longer rows.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, Optional, Tuple

from ..config import ROOT_ID, TreeSettings
from ..core.graph import TreeGraph
from ..core.types import (
    JSONValue,
    NodeKind,
    NodeStyle,
    Position,
    TreeEdge,
    TreeNode,
    classify,
)

logger = logging.getLogger(__name__)

# JavaScript switches to exponent notation at this magnitude
_EXPONENT_THRESHOLD = 1e21


def _format_float(value: float) -> str:
    """
    Shortest round-trip text with JavaScript's exponent rules: positional
    between 1e-7 and 1e21, otherwise ``<mantissa>e<sign><exponent>``.
    """
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def format_primitive(value: JSONValue) -> str:
    """Natural JSON text of a primitive, without quotes for strings."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def child_id(parent_id: str, parent_kind: NodeKind, key: Any) -> str:
    if parent_kind is NodeKind.ARRAY:
        return f"{parent_id}[{key}]"
    return f"{parent_id}.{key}"


def last_segment(node_id: str) -> str:
    """Text after the final '.', so array items keep their index suffix."""
    return node_id.split(".")[-1]


def _iter_children(value: JSONValue, kind: NodeKind) -> Iterator[Tuple[int, Any, JSONValue]]:
    if kind is NodeKind.OBJECT:
        for i, (key, child) in enumerate(value.items()):
            yield i, key, child
    elif kind is NodeKind.ARRAY:
        for i, child in enumerate(value):
            yield i, i, child


@dataclass
class _Frame:
    """A container whose children are still being enumerated."""
    node_id: str
    idx: int
    kind: NodeKind
    position: Position
    children: Iterator[Tuple[int, Any, JSONValue]]
    parent: Optional[Tuple[str, int]] = None


class TreeBuilder:
    """
    Converts JSON values into TreeGraphs.

    The walk uses an explicit stack instead of recursion, so document depth
    is bounded only by the parser.
    """

    def __init__(self, settings: TreeSettings | None = None):
        self.settings = settings or TreeSettings()

    def build(self, value: JSONValue) -> TreeGraph:
        graph = TreeGraph(palette=self.settings.palette)
        spacing_x = self.settings.layout.horizontal_spacing
        spacing_y = self.settings.layout.vertical_spacing

        root_kind = classify(value)
        root_position = Position(x=0, y=0)
        root_idx = graph.add_node(self._make_node(ROOT_ID, root_kind, value, root_position))

        stack = []
        if root_kind is not NodeKind.PRIMITIVE:
            stack.append(_Frame(ROOT_ID, root_idx, root_kind, root_position, _iter_children(value, root_kind)))

        while stack:
            frame = stack[-1]
            entry = next(frame.children, None)

            if entry is None:
                stack.pop()
                # A container's edge follows its whole subtree
                if frame.parent is not None:
                    parent_id, parent_idx = frame.parent
                    graph.add_edge(TreeEdge(source=parent_id, target=frame.node_id), parent_idx, frame.idx)
                continue

            i, key, child = entry
            kind = classify(child)
            node_id = child_id(frame.node_id, frame.kind, key)
            position = Position(
                x=frame.position.x + (i - 1) * spacing_x,
                y=frame.position.y + spacing_y,
            )
            idx = graph.add_node(self._make_node(node_id, kind, child, position))

            if kind is NodeKind.PRIMITIVE:
                graph.add_edge(TreeEdge(source=frame.node_id, target=node_id), frame.idx, idx)
            else:
                stack.append(_Frame(
                    node_id, idx, kind, position,
                    _iter_children(child, kind),
                    parent=(frame.node_id, frame.idx),
                ))

        logger.debug(f"Built tree: {graph.node_count} nodes, {graph.edge_count} edges")
        return graph

    def _make_node(self, node_id: str, kind: NodeKind, value: JSONValue, position: Position) -> TreeNode:
        palette = self.settings.palette
        if kind is NodeKind.PRIMITIVE:
            label = f"{last_segment(node_id)} : {format_primitive(value)}"
        else:
            label = node_id

        return TreeNode(
            id=node_id,
            kind=kind,
            label=label,
            position=position,
            style=NodeStyle(
                background=palette.background_for(kind),
                color=palette.text,
                border=palette.idle_border,
            ),
        )


def build_tree(value: JSONValue, settings: TreeSettings | None = None) -> TreeGraph:
    """Build the graph for a parsed JSON value."""
    return TreeBuilder(settings).build(value)
