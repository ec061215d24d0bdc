"""Randomized traversal of the word graph."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set, Tuple

from ..graph.word_graph import WordGraph

logger = logging.getLogger(__name__)


class Walker:
    """
    Random walk that never re-traverses a directed edge.

    The walk stops at the first node without out-edges, or as soon as the
    randomly chosen edge has already been taken, so it visits at most
    ``edge_count + 1`` nodes.
    """

    def __init__(self, graph: WordGraph, rng: Optional[random.Random] = None):
        self.graph = graph
        self.rng = rng or random.Random()

    def random_walk(self) -> List[str]:
        nodes = self.graph.ordered_nodes()
        if not nodes:
            return []

        current = self.rng.choice(nodes)
        visited = [current]
        traversed: Set[Tuple[str, str]] = set()

        while True:
            successors = list(self.graph.out_edges(current))
            if not successors:
                break

            chosen = self.rng.choice(successors)
            edge = (current, chosen)
            if edge in traversed:
                break

            traversed.add(edge)
            visited.append(chosen)
            current = chosen

        logger.debug(f"Random walk visited {len(visited)} nodes over {len(traversed)} edges")
        return visited
