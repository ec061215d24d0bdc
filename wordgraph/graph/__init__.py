"""
Word graph model and construction.

- word_graph.py: adjacency structure, query primitives and statistics
- builder.py: the single ingestion path from text to a frozen graph
"""

from __future__ import annotations

from .word_graph import WordGraph, GraphStats, GraphFrozenError
from .builder import GraphBuilder, build_graph

__all__ = [
    "WordGraph",
    "GraphStats",
    "GraphFrozenError",
    "GraphBuilder",
    "build_graph",
]
