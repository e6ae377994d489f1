"""
Tree Graph implementation backed by rustworkx.

It manages:
- The mapping between path ids and rustworkx integer indices.
- Node and edge payloads in construction order.
- The single highlighted node, recomputed wholesale on every change.
- Path id collisions (keys containing '.', '[' or ']').
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from ..config import PaletteSettings
from .types import GraphStats, NodeKind, TreeEdge, TreeNode

logger = logging.getLogger(__name__)


class TreeGraph:
    """
    Node/edge structure produced from one JSON document.

    Features:
    - Nodes iterate in insertion order (pre-order of the build)
    - O(1) node lookup by path id
    - Child/descendant queries via the rustworkx backend
    """

    def __init__(self, palette: PaletteSettings | None = None):
        self._graph = rx.PyDiGraph(multigraph=False)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._edges: List[TreeEdge] = []
        self._kind_counts: Dict[NodeKind, int] = defaultdict(int)
        self._collisions: List[str] = []
        self._highlighted_id: Optional[str] = None
        self.palette = palette or PaletteSettings()

    def add_node(self, node: TreeNode) -> int:
        """
        Append a node.

        A node whose id is already present is still appended so the
        document's structure is preserved, but the id is recorded as a
        collision and lookups keep resolving to the first occurrence.
        """
        idx = self._graph.add_node(node)
        if node.id in self._id_to_idx:
            logger.warning(f"Path id collision: {node.id!r} already names another node")
            self._collisions.append(node.id)
        else:
            self._id_to_idx[node.id] = idx
        self._idx_to_id[idx] = node.id
        self._kind_counts[node.kind] += 1
        return idx

    def add_edge(self, edge: TreeEdge, source_idx: int | None = None, target_idx: int | None = None) -> None:
        """
        Add a parent -> child edge.

        Indices may be passed explicitly when ids collide; otherwise they
        are resolved from the edge's ids. Edges to unknown ids are ignored.
        """
        if source_idx is None:
            source_idx = self._id_to_idx.get(edge.source)
        if target_idx is None:
            target_idx = self._id_to_idx.get(edge.target)
        if source_idx is None or target_idx is None:
            logger.debug(f"Skipping edge with unknown endpoint: {edge.id}")
            return

        self._graph.add_edge(source_idx, target_idx, edge)
        self._edges.append(edge)

    def get_node(self, node_id: str) -> Optional[TreeNode]:
        """Retrieve a node by path id."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def has_edge(self, source_id: str, target_id: str) -> bool:
        if source_id not in self._id_to_idx or target_id not in self._id_to_idx:
            return False
        return self._graph.has_edge(self._id_to_idx[source_id], self._id_to_idx[target_id])

    def get_nodes_by_kind(self, kind: NodeKind) -> List[TreeNode]:
        """Nodes of one kind, in insertion order."""
        return [n for n in self.iter_nodes() if n.kind is kind]

    def index_of(self, node_id: str) -> Optional[int]:
        """Index of the first node with this id."""
        return self._id_to_idx.get(node_id)

    def node_at(self, idx: int) -> TreeNode:
        return self._graph[idx]

    def child_indices(self, idx: int) -> List[int]:
        """
        Indices of a node's direct children, in enumeration order.

        Walking by index reaches every node, including those whose id
        collides with an earlier one.
        """
        # successor_indices follows adjacency order, which is not insertion order
        return sorted(self._graph.successor_indices(idx))

    def descendant_count(self, idx: int) -> int:
        return len(rx.descendants(self._graph, idx))

    def get_children(self, node_id: str) -> List[TreeNode]:
        """Direct children, in enumeration order."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return []
        return [self._graph[i] for i in self.child_indices(idx)]

    def get_descendants(self, node_id: str) -> Set[str]:
        """All path ids strictly below node_id."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return set()
        return {self._idx_to_id[i] for i in rx.descendants(self._graph, idx)}

    def find_nodes(self, pattern: str) -> List[str]:
        """
        Find node ids containing a substring, case-insensitively.

        Results keep insertion order, so the first entry is the
        first match of a pre-order walk.
        """
        pattern_lower = pattern.lower()
        return [node.id for node in self.iter_nodes() if pattern_lower in node.id.lower()]

    # =========================================================================
    # Highlight
    # =========================================================================

    @property
    def highlighted_node_id(self) -> Optional[str]:
        return self._highlighted_id

    def highlight(self, node_id: Optional[str]) -> None:
        """
        Mark exactly one node as highlighted, or none when node_id is None.

        Every node is reset and re-marked in a single pass.
        """
        if node_id is not None and node_id not in self._id_to_idx:
            raise KeyError(node_id)

        target_idx = self._id_to_idx.get(node_id) if node_id is not None else None
        for idx in self._graph.node_indices():
            node: TreeNode = self._graph[idx]
            node.highlighted = idx == target_idx
            node.style.border = (
                self.palette.highlight_border if node.highlighted else self.palette.idle_border
            )
        self._highlighted_id = node_id

    def clear_highlight(self) -> None:
        self.highlight(None)

    # =========================================================================
    # Iteration & Export
    # =========================================================================

    def iter_nodes(self) -> Iterator[TreeNode]:
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[TreeEdge]:
        return iter(self._edges)

    @property
    def root(self) -> Optional[TreeNode]:
        if self._graph.num_nodes() == 0:
            return None
        return self._graph[0]

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def collisions(self) -> List[str]:
        return list(self._collisions)

    def get_stats(self) -> GraphStats:
        leaves = sum(1 for idx in self._graph.node_indices() if self._graph.out_degree(idx) == 0)
        max_depth = 0
        if self.node_count:
            # Edges point downward, so the longest path from the root is the depth
            max_depth = rx.dag_longest_path_length(self._graph)

        return GraphStats(
            total_nodes=self.node_count,
            total_edges=self.edge_count,
            nodes_by_kind={kind.value: count for kind, count in self._kind_counts.items()},
            leaves=leaves,
            max_depth=max_depth,
            collisions=self.collisions,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Payload for the rendering surface."""
        return {
            "nodes": [node.model_dump(mode="json", by_alias=True) for node in self.iter_nodes()],
            "edges": [edge.to_dict() for edge in self.iter_edges()],
            "highlighted": self._highlighted_id,
        }
