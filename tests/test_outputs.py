"""
Tests for Graphviz DOT output and random-walk persistence.
"""

import pytest

from wordgraph.graph import GraphBuilder, build_graph
from wordgraph.output import GraphRenderer, format_walk, graph_to_dot, save_walk


class TestGraphToDot:
    """Test suite for the DOT description."""

    def test_format(self):
        dot = graph_to_dot(build_graph("a b a b c"))
        assert dot == (
            'digraph g {\n'
            '    "a" -> "b" [label="2"];\n'
            '    "b" -> "a" [label="1"];\n'
            '    "b" -> "c" [label="1"];\n'
            '}'
        )

    def test_dangling_nodes_have_no_lines(self):
        dot = graph_to_dot(build_graph("hello"))
        assert dot == "digraph g {\n}"

    def test_empty_graph(self):
        assert graph_to_dot(GraphBuilder().build([])) == "digraph g {\n}"

    def test_deterministic(self):
        text = "the quick brown fox jumps over the lazy dog the end"
        assert graph_to_dot(build_graph(text)) == graph_to_dot(build_graph(text))


class TestGraphRenderer:
    """Test suite for GraphRenderer file output."""

    def test_write_dot(self, tmp_path):
        graph = build_graph("a b")
        result = GraphRenderer().write_dot(graph, tmp_path / "graph.dot")

        assert result.is_success
        assert result.value.read_text(encoding="utf-8") == graph_to_dot(graph)

    def test_missing_graphviz_is_reported_not_raised(self, tmp_path):
        renderer = GraphRenderer(dot_executable="wordgraph-no-such-dot-binary")
        result = renderer.render(build_graph("a b"), tmp_path / "graph.dot", tmp_path / "graph.png")

        assert result.is_failure
        assert isinstance(result.error, FileNotFoundError)
        assert (tmp_path / "graph.dot").exists()
        assert not (tmp_path / "graph.png").exists()

    def test_unwritable_dot_path(self, tmp_path):
        result = GraphRenderer().render(
            build_graph("a b"), tmp_path / "missing" / "graph.dot", tmp_path / "graph.png"
        )
        assert result.is_failure


class TestSaveWalk:
    """Test suite for walk persistence."""

    def test_format_walk(self):
        assert format_walk(["a", "b", "c"]) == "a b c"
        assert format_walk([]) == ""

    def test_save_walk(self, tmp_path):
        target = tmp_path / "random_walk.txt"
        result = save_walk(["the", "data", "the"], target)

        assert result.is_success
        assert result.value == target
        assert target.read_text(encoding="utf-8") == "the data the"

    def test_save_overwrites(self, tmp_path):
        target = tmp_path / "random_walk.txt"
        save_walk(["first", "walk"], target)
        save_walk(["second"], target)
        assert target.read_text(encoding="utf-8") == "second"

    def test_save_into_missing_directory_fails(self, tmp_path):
        result = save_walk(["a"], tmp_path / "missing" / "walk.txt")
        assert result.is_failure
        assert isinstance(result.error, FileNotFoundError)
