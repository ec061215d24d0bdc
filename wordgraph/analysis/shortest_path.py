"""
Shortest weighted path between two words (Dijkstra).

Edge weights are adjacency counts, used directly as positive costs. The
priority queue holds ``(distance, sequence, node)`` entries: equal distances
pop in the order they were pushed (FIFO), and entries made stale by a later
relaxation are skipped.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..graph.word_graph import WordGraph

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """Outcome of a shortest-path query."""
    source: str
    target: str
    path: List[str] = field(default_factory=list)
    distance: Optional[int] = None
    message: str = ""

    @property
    def found(self) -> bool:
        return bool(self.path)

    def describe(self) -> str:
        if self.found:
            return f"Shortest path: {' -> '.join(self.path)}\nLength: {self.distance}"
        return self.message


class PathFinder:
    """Dijkstra shortest paths over a read-only WordGraph."""

    def __init__(self, graph: WordGraph):
        self.graph = graph

    def _dijkstra(self, source: str) -> Tuple[Dict[str, float], Dict[str, str]]:
        distances: Dict[str, float] = {node: math.inf for node in self.graph}
        predecessors: Dict[str, str] = {}
        distances[source] = 0

        counter = itertools.count()
        queue = [(0, next(counter), source)]

        while queue:
            dist_u, _, u = heapq.heappop(queue)
            if dist_u > distances[u]:
                continue

            for v, weight in self.graph.out_edges(u).items():
                candidate = dist_u + weight
                if candidate < distances[v]:
                    distances[v] = candidate
                    predecessors[v] = u
                    heapq.heappush(queue, (candidate, next(counter), v))

        return distances, predecessors

    def shortest_distances(self, source: str) -> Dict[str, float]:
        """Distance from ``source`` to every node (``math.inf`` if unreachable)."""
        if not self.graph.contains_as_source(source):
            return {}
        distances, _ = self._dijkstra(source)
        return distances

    def shortest_path(self, word1: str, word2: str) -> PathResult:
        """Compute the cheapest directed path from ``word1`` to ``word2``."""
        if not self.graph.contains_as_source(word1):
            return PathResult(word1, word2, message=f'No "{word1}" in the graph!')
        if not self.graph.contains_as_source(word2):
            return PathResult(word1, word2, message=f'No "{word2}" in the graph!')

        distances, predecessors = self._dijkstra(word1)

        if math.isinf(distances[word2]):
            return PathResult(word1, word2, message=f'No path from "{word1}" to "{word2}"')

        path = [word2]
        while path[-1] != word1:
            path.append(predecessors[path[-1]])
        path.reverse()

        distance = int(distances[word2])
        logger.debug(f"Shortest path {word1} -> {word2}: {len(path)} nodes, length {distance}")
        return PathResult(word1, word2, path=path, distance=distance)
