"""
Outputs handed to external collaborators.

- dot.py: Graphviz DOT description and PNG rendering
- walk.py: random-walk persistence
"""

from __future__ import annotations

from .dot import GraphRenderer, RenderOutput, graph_to_dot
from .walk import DEFAULT_WALK_FILENAME, format_walk, save_walk

__all__ = [
    "GraphRenderer",
    "RenderOutput",
    "graph_to_dot",
    "DEFAULT_WALK_FILENAME",
    "format_walk",
    "save_walk",
]
