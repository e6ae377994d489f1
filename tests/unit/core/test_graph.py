"""Unit tests for the TreeGraph container."""

import pytest

from jsontree.config import PaletteSettings
from jsontree.core.graph import TreeGraph
from jsontree.core.types import NodeKind, NodeStyle, Position, TreeEdge, TreeNode


def make_node(node_id: str, kind: NodeKind = NodeKind.PRIMITIVE) -> TreeNode:
    return TreeNode(
        id=node_id,
        kind=kind,
        label=node_id,
        position=Position(),
        style=NodeStyle(background="#000"),
    )


@pytest.fixture
def graph():
    """$ -> {$.a -> [$.a[0], $.a[1]], $.b}"""
    g = TreeGraph()
    g.add_node(make_node("$", NodeKind.OBJECT))
    g.add_node(make_node("$.a", NodeKind.ARRAY))
    g.add_node(make_node("$.a[0]"))
    g.add_node(make_node("$.a[1]"))
    g.add_node(make_node("$.b"))
    g.add_edge(TreeEdge(source="$.a", target="$.a[0]"))
    g.add_edge(TreeEdge(source="$.a", target="$.a[1]"))
    g.add_edge(TreeEdge(source="$", target="$.a"))
    g.add_edge(TreeEdge(source="$", target="$.b"))
    return g


class TestTreeGraph:
    def test_counts(self, graph):
        assert graph.node_count == 5
        assert graph.edge_count == 4

    def test_insertion_order(self, graph):
        assert [n.id for n in graph.iter_nodes()] == ["$", "$.a", "$.a[0]", "$.a[1]", "$.b"]
        assert [e.id for e in graph.iter_edges()] == [
            "$.a->$.a[0]", "$.a->$.a[1]", "$->$.a", "$->$.b",
        ]

    def test_lookup(self, graph):
        assert graph.get_node("$.b").id == "$.b"
        assert graph.get_node("$.missing") is None
        assert graph.has_node("$.a[1]")
        assert graph.has_edge("$", "$.a")
        assert not graph.has_edge("$.a", "$")
        assert graph.root.id == "$"

    def test_edge_to_unknown_node_is_ignored(self, graph):
        graph.add_edge(TreeEdge(source="$", target="$.ghost"))
        assert graph.edge_count == 4

    def test_children_in_order(self, graph):
        assert [n.id for n in graph.get_children("$")] == ["$.a", "$.b"]
        assert [n.id for n in graph.get_children("$.a")] == ["$.a[0]", "$.a[1]"]
        assert graph.get_children("$.b") == []
        assert graph.get_children("$.missing") == []

    def test_descendants(self, graph):
        assert graph.get_descendants("$.a") == {"$.a[0]", "$.a[1]"}
        assert graph.get_descendants("$") == {"$.a", "$.a[0]", "$.a[1]", "$.b"}
        assert graph.get_descendants("$.b") == set()

    def test_nodes_by_kind(self, graph):
        assert [n.id for n in graph.get_nodes_by_kind(NodeKind.PRIMITIVE)] == ["$.a[0]", "$.a[1]", "$.b"]

    def test_find_nodes_case_insensitive(self, graph):
        assert graph.find_nodes("A[") == ["$.a[0]", "$.a[1]"]
        assert graph.find_nodes("$") == ["$", "$.a", "$.a[0]", "$.a[1]", "$.b"]
        assert graph.find_nodes("zzz") == []

    def test_stats(self, graph):
        stats = graph.get_stats()
        assert stats.total_nodes == 5
        assert stats.total_edges == 4
        assert stats.nodes_by_kind == {"object": 1, "array": 1, "primitive": 3}
        assert stats.leaves == 3
        assert stats.max_depth == 2
        assert stats.collisions == []

    def test_empty_graph(self):
        g = TreeGraph()
        assert g.root is None
        assert g.node_count == 0
        assert g.get_stats().max_depth == 0
        assert g.to_dict() == {"nodes": [], "edges": [], "highlighted": None}


class TestHighlight:
    def test_highlight_marks_exactly_one(self, graph):
        graph.highlight("$.a[1]")

        highlighted = [n.id for n in graph.iter_nodes() if n.highlighted]
        assert highlighted == ["$.a[1]"]
        assert graph.highlighted_node_id == "$.a[1]"
        assert graph.get_node("$.a[1]").style.border == PaletteSettings().highlight_border
        assert graph.get_node("$").style.border == PaletteSettings().idle_border

    def test_highlight_replaces_previous(self, graph):
        graph.highlight("$.a")
        graph.highlight("$.b")
        assert [n.id for n in graph.iter_nodes() if n.highlighted] == ["$.b"]

    def test_clear_highlight(self, graph):
        graph.highlight("$.a")
        graph.clear_highlight()
        assert not any(n.highlighted for n in graph.iter_nodes())
        assert graph.highlighted_node_id is None

    def test_highlight_unknown_id_raises(self, graph):
        graph.highlight("$.a")
        with pytest.raises(KeyError):
            graph.highlight("$.ghost")
        # State untouched by the failed call
        assert graph.highlighted_node_id == "$.a"

    def test_custom_palette_border(self):
        palette = PaletteSettings(highlight_border="4px dashed blue")
        g = TreeGraph(palette=palette)
        g.add_node(make_node("$"))
        g.highlight("$")
        assert g.get_node("$").style.border == "4px dashed blue"

    def test_to_dict_reports_highlight(self, graph):
        graph.highlight("$.b")
        data = graph.to_dict()
        assert data["highlighted"] == "$.b"
        assert [n["id"] for n in data["nodes"] if n["highlighted"]] == ["$.b"]


class TestCollisions:
    def test_duplicate_id_is_recorded(self):
        g = TreeGraph()
        first = make_node("$.a.b")
        first.label = "first"
        second = make_node("$.a.b")
        second.label = "second"

        g.add_node(make_node("$", NodeKind.OBJECT))
        g.add_node(first)
        g.add_node(second)

        assert g.node_count == 3
        assert g.collisions == ["$.a.b"]
        assert g.get_node("$.a.b").label == "first"
        assert g.find_nodes("a.b") == ["$.a.b", "$.a.b"]
        assert g.get_stats().collisions == ["$.a.b"]

    def test_index_walk_reaches_colliding_subtree(self):
        g = TreeGraph()
        root = g.add_node(make_node("$", NodeKind.OBJECT))
        first = g.add_node(make_node("$.a.b", NodeKind.OBJECT))
        x = g.add_node(make_node("$.a.b.x"))
        second = g.add_node(make_node("$.a.b", NodeKind.OBJECT))
        y = g.add_node(make_node("$.a.b.y"))
        g.add_edge(TreeEdge(source="$.a.b", target="$.a.b.x"), first, x)
        g.add_edge(TreeEdge(source="$.a.b", target="$.a.b.y"), second, y)
        g.add_edge(TreeEdge(source="$", target="$.a.b"), root, first)
        g.add_edge(TreeEdge(source="$", target="$.a.b"), root, second)

        assert g.index_of("$.a.b") == first
        assert g.child_indices(root) == [first, second]
        assert [g.node_at(i).id for i in g.child_indices(second)] == ["$.a.b.y"]
        assert g.descendant_count(second) == 1
        assert g.descendant_count(root) == 4


class TestRenderPayload:
    def test_style_keys_are_camel_case(self, graph):
        style = graph.to_dict()["nodes"][0]["style"]
        assert style["borderRadius"] == 6
        assert style["fontSize"] == 12
        assert "border_radius" not in style
