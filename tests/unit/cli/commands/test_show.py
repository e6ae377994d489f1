"""
Unit tests for the 'show' command.
"""

import pytest
from click.testing import CliRunner

from jsontree.cli.commands.show import render_tree, show
from jsontree.core.graph import TreeGraph
from jsontree.graph.builder import build_tree


class TestShowCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_prints_whole_tree(self, runner):
        result = runner.invoke(show, [])

        assert result.exit_code == 0
        assert "$.user" in result.output
        assert "name : Alice" in result.output
        assert "hobbies[1] : reading" in result.output
        assert "active : true" in result.output

    def test_max_depth_collapses(self, runner):
        result = runner.invoke(show, ["--max-depth", "1"])

        assert result.exit_code == 0
        assert "$.user" in result.output
        assert "... 4 hidden" in result.output
        assert "name : Alice" not in result.output

    def test_find_reports_match(self, runner):
        result = runner.invoke(show, ["--find", "zip"])

        assert result.exit_code == 0
        assert "Match found: $.user.address.zip" in result.output

    def test_find_without_match(self, runner):
        result = runner.invoke(show, ["--find", "nothing"])

        assert result.exit_code == 0
        assert "No match found" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(show, ["-"], input="[1, 2")

        assert result.exit_code == 2
        assert "Invalid JSON" in result.output


class TestRenderTree:
    def test_empty_graph(self):
        assert render_tree(TreeGraph()) is None

    def test_children_in_document_order(self):
        tree = render_tree(build_tree({"b": 1, "a": 2}))
        labels = [child.label.plain for child in tree.children]
        assert labels == ["b : 1", "a : 2"]

    def test_container_label_shows_kind(self):
        tree = render_tree(build_tree({"list": []}))
        assert tree.label.plain == "$  (object)"
        assert tree.children[0].label.plain == "$.list  (array)"

    def test_nested_children_in_document_order(self):
        tree = render_tree(build_tree({"user": {"name": "Alice", "age": 25}, "active": True}))
        assert [c.label.plain for c in tree.children] == ["$.user  (object)", "active : true"]
        assert [c.label.plain for c in tree.children[0].children] == ["name : Alice", "age : 25"]

    def test_colliding_containers_keep_their_own_children(self):
        tree = render_tree(build_tree({"a.b": {"x": 1}, "a": {"b": {"y": 2}}}))

        first, second = tree.children
        assert first.label.plain == "$.a.b  (object)"
        assert [c.label.plain for c in first.children] == ["x : 1"]

        nested = second.children[0]
        assert nested.label.plain == "$.a.b  (object)"
        assert [c.label.plain for c in nested.children] == ["y : 2"]

    def test_command_prints_siblings_in_order(self):
        result = CliRunner().invoke(show, [])

        assert result.exit_code == 0
        out = result.output
        assert out.index("$.user") < out.index("active : true")
        assert out.index("name : Alice") < out.index("age : 25")
