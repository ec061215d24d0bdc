"""
wordgraph - word-adjacency graph analysis for free text.

Builds a directed graph whose edges count how often one word directly follows
another, then offers bridge-word queries, bridge-augmented text generation,
shortest paths, PageRank and random walks over it.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .text import TextNormalizer, normalize
from .graph import GraphBuilder, GraphFrozenError, GraphStats, WordGraph, build_graph
from .analysis import (
    BridgeAnalyzer,
    PathFinder,
    PathResult,
    RankEngine,
    RankScores,
    Walker,
    validate_damping_factor,
)
from .output import GraphRenderer, graph_to_dot, save_walk
from .config import WordGraphConfig, load_config
from .library import WordGraphError, WordGraphSession

__all__ = [
    # High-level API
    "WordGraphSession",
    "WordGraphError",
    "WordGraphConfig",
    "load_config",

    # Graph model
    "TextNormalizer",
    "normalize",
    "WordGraph",
    "GraphStats",
    "GraphFrozenError",
    "GraphBuilder",
    "build_graph",

    # Analyses
    "BridgeAnalyzer",
    "PathFinder",
    "PathResult",
    "RankEngine",
    "RankScores",
    "Walker",
    "validate_damping_factor",

    # Outputs
    "GraphRenderer",
    "graph_to_dot",
    "save_walk",
]
