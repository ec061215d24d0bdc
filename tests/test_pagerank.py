"""
Tests for PageRank ranking, including dangling-node mass redistribution.
"""

import pytest

from wordgraph.analysis.pagerank import RankEngine, RankScores, validate_damping_factor
from wordgraph.graph import GraphBuilder, build_graph

SAMPLE_TEXT = (
    "The scientist carefully analyzed the data\n"
    "The scientist shared the report and shared the findings"
)


class TestPageRank:
    """Test suite for RankEngine."""

    @pytest.fixture
    def engine(self):
        return RankEngine(build_graph(SAMPLE_TEXT))

    def test_mass_is_conserved_with_dangling_node(self, engine):
        scores = engine.page_rank(0.85)
        assert engine.graph.out_degree("findings") == 0
        assert sum(scores.values()) == pytest.approx(1.0, abs=1e-9)
        assert all(score > 0 for score in scores.values())

    def test_two_node_chain_closed_form(self):
        # a -> b, b dangling. Stationary solution for d=0.85:
        # r_b = 0.925 / 1.425, r_a = 1 - r_b
        scores = RankEngine(build_graph("a b")).page_rank(0.85)
        assert scores["b"] == pytest.approx(0.925 / 1.425, abs=1e-4)
        assert scores["a"] == pytest.approx(1 - 0.925 / 1.425, abs=1e-4)

    def test_single_dangling_node_keeps_all_mass(self):
        scores = RankEngine(build_graph("hello")).page_rank(0.85)
        assert scores == {"hello": pytest.approx(1.0)}

    def test_cycle_is_uniform(self):
        result = RankEngine(build_graph("a b c a")).compute(0.85)
        assert result.converged
        assert result.iterations == 1
        for score in result.scores.values():
            assert score == pytest.approx(1 / 3)

    def test_zero_damping_is_uniform(self, engine):
        scores = engine.page_rank(0.0)
        for score in scores.values():
            assert score == pytest.approx(1 / 9)

    def test_full_damping_conserves_mass(self, engine):
        scores = engine.page_rank(1.0)
        assert sum(scores.values()) == pytest.approx(1.0, abs=1e-9)

    def test_out_degree_ignores_weights(self):
        # "x" splits its rank evenly over its successors regardless of counts
        graph = GraphBuilder().build(["x", "a", "x", "a", "x", "b"])
        scores = RankEngine(graph, max_iterations=1).page_rank(1.0)
        assert scores["a"] == pytest.approx(scores["b"])

    def test_empty_graph(self):
        engine = RankEngine(GraphBuilder().build([]))
        assert engine.page_rank(0.85) == {}
        assert engine.compute(0.85).iterations == 0

    def test_iteration_cap(self):
        engine = RankEngine(build_graph(SAMPLE_TEXT), max_iterations=1)
        result = engine.compute(0.85)
        assert result.iterations == 1
        assert not result.converged
        assert result.final_delta > 1e-6

    def test_converges_before_default_cap(self, engine):
        result = engine.compute(0.85)
        assert result.converged
        assert result.iterations < 100
        assert result.final_delta < 1e-6

    def test_ranked_order(self, engine):
        ranked = engine.ranked(0.85)
        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0][0] == "the"

    def test_ranked_ties_broken_by_word(self):
        result = RankScores({"b": 0.5, "a": 0.5}, 1, 0.0, True)
        assert result.ranked() == [("a", 0.5), ("b", 0.5)]


class TestValidateDampingFactor:
    """Test suite for damping factor validation."""

    @pytest.mark.parametrize("value, expected", [
        (0, 0.0), (1, 1.0), (0.85, 0.85), ("0.5", 0.5), (" 0.2 ", 0.2),
    ])
    def test_valid(self, value, expected):
        assert validate_damping_factor(value) == expected

    @pytest.mark.parametrize("value", [-0.1, 1.01, "abc", "", None, "nan"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            validate_damping_factor(value)
