"""
Read-only analyses over a built WordGraph.

- bridge.py: bridge-word queries and bridge-augmented text generation
- shortest_path.py: Dijkstra shortest paths
- pagerank.py: PageRank with dangling-mass redistribution
- random_walk.py: random traversal without edge reuse
"""

from __future__ import annotations

from .bridge import BridgeAnalyzer, format_word_list
from .shortest_path import PathFinder, PathResult
from .pagerank import RankEngine, RankScores, validate_damping_factor
from .random_walk import Walker

__all__ = [
    "BridgeAnalyzer",
    "format_word_list",
    "PathFinder",
    "PathResult",
    "RankEngine",
    "RankScores",
    "validate_damping_factor",
    "Walker",
]
