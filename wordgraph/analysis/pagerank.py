"""
PageRank importance ranking over the word graph.

Implements the classic power iteration:
- Initialize all nodes with equal probability (1/N)
- Each round, every node keeps (1-d)/N and receives d * rank(u)/outDegree(u)
  from each predecessor u
- Rank held by dangling nodes (no out-edges) is spread uniformly over all N
  nodes every round, so total rank stays at 1
- Stop when the L1 change between rounds drops below the tolerance, or after
  the iteration cap
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..graph.word_graph import WordGraph

logger = logging.getLogger(__name__)

DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-6


def validate_damping_factor(value) -> float:
    """Parse and check a damping factor; raises ValueError outside [0, 1]."""
    try:
        damping = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Damping factor must be a number, got {value!r}")
    # NaN fails both comparisons
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"Damping factor must be between 0 and 1, got {damping}")
    return damping


@dataclass
class RankScores:
    """PageRank computation results."""
    scores: Dict[str, float]
    iterations: int
    final_delta: float
    converged: bool

    def ranked(self) -> List[Tuple[str, float]]:
        """Scores sorted by rank descending, ties by word."""
        return sorted(self.scores.items(), key=lambda item: (-item[1], item[0]))


class RankEngine:
    """
    PageRank computation engine for word graphs.

    The damping factor is assumed valid here; callers check it with
    ``validate_damping_factor`` first.
    """

    def __init__(self, graph: WordGraph, max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 tolerance: float = DEFAULT_TOLERANCE):
        self.graph = graph
        self.max_iterations = max_iterations
        self.tolerance = tolerance

    def compute(self, damping_factor: float = DEFAULT_DAMPING_FACTOR) -> RankScores:
        nodes = self.graph.ordered_nodes()
        num_nodes = len(nodes)
        if num_nodes == 0:
            return RankScores({}, 0, 0.0, True)

        out_degree = {node: self.graph.out_degree(node) for node in nodes}
        dangling = [node for node in nodes if out_degree[node] == 0]
        teleport = (1.0 - damping_factor) / num_nodes

        current = {node: 1.0 / num_nodes for node in nodes}
        delta = 0.0

        for iteration in range(self.max_iterations):
            dangling_share = sum(current[node] for node in dangling) / num_nodes
            base = teleport + damping_factor * dangling_share
            following = {node: base for node in nodes}

            for source, target, _ in self.graph.edges():
                following[target] += damping_factor * current[source] / out_degree[source]

            delta = sum(abs(following[node] - current[node]) for node in nodes)
            current = following

            if delta < self.tolerance:
                logger.debug(f"PageRank converged after {iteration + 1} iterations (delta={delta:.3e})")
                return RankScores(current, iteration + 1, delta, True)

        logger.debug(f"PageRank stopped at iteration cap {self.max_iterations} (delta={delta:.3e})")
        return RankScores(current, self.max_iterations, delta, False)

    def page_rank(self, damping_factor: float = DEFAULT_DAMPING_FACTOR) -> Dict[str, float]:
        """Final rank of every node."""
        return self.compute(damping_factor).scores

    def ranked(self, damping_factor: float = DEFAULT_DAMPING_FACTOR) -> List[Tuple[str, float]]:
        return self.compute(damping_factor).ranked()
