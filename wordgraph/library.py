"""
wordgraph main library interface.

Provides a small API around one shared, read-only word graph: build it once
from text, then run any of the analyses against it as often as needed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .analysis import BridgeAnalyzer, PathFinder, PathResult, RankEngine, Walker, validate_damping_factor
from .config import WordGraphConfig
from .graph import GraphBuilder, WordGraph
from .output import GraphRenderer, RenderOutput, format_walk, graph_to_dot, save_walk
from .utils.error_handling import Result

logger = logging.getLogger(__name__)


class WordGraphError(Exception):
    """Base exception for wordgraph session errors."""
    pass


class WordGraphSession:
    """
    Owns a built WordGraph and the analyzers that query it.

    All analyzers share the graph instance and a single random source, so
    a fixed ``config.seed`` reproduces generated text and walks exactly.
    """

    def __init__(self, graph: WordGraph, config: Optional[WordGraphConfig] = None,
                 rng: Optional[random.Random] = None):
        self.graph = graph
        self.config = config or WordGraphConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.bridges = BridgeAnalyzer(graph, self.rng)
        self.paths = PathFinder(graph)
        self.ranks = RankEngine(
            graph,
            max_iterations=self.config.max_iterations,
            tolerance=self.config.tolerance
        )
        self.walker = Walker(graph, self.rng)

    @classmethod
    def from_text(cls, text: str, config: Optional[WordGraphConfig] = None,
                  rng: Optional[random.Random] = None) -> 'WordGraphSession':
        return cls(GraphBuilder().build_from_text(text), config, rng)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[WordGraphConfig] = None,
                  rng: Optional[random.Random] = None) -> 'WordGraphSession':
        """
        Build a session from a text file.

        Raises:
            WordGraphError: if the file cannot be read; no graph exists to query.
        """
        config = config or WordGraphConfig()
        result = GraphBuilder().build_from_file(path, encoding=config.encoding)
        if result.is_failure:
            raise WordGraphError(f"Cannot build graph from {path}: {result.error}") from result.error
        return cls(result.value, config, rng)

    # Graph display

    def show_directed_graph(self) -> str:
        """DOT description of the graph."""
        return graph_to_dot(self.graph)

    def render_graph(self, dot_path: Optional[Union[str, Path]] = None,
                     image_path: Optional[Union[str, Path]] = None) -> Result[RenderOutput, Exception]:
        renderer = GraphRenderer(dot_executable=self.config.dot_executable)
        return renderer.render(
            self.graph,
            dot_path or self.config.dot_output_path,
            image_path or self.config.image_output_path
        )

    # Analyses

    def query_bridge_words(self, word1: str, word2: str) -> str:
        return self.bridges.query_bridge_words(word1, word2)

    def generate_new_text(self, text: str) -> str:
        return self.bridges.generate_new_text(text)

    def shortest_path(self, word1: str, word2: str) -> PathResult:
        return self.paths.shortest_path(word1, word2)

    def calc_shortest_path(self, word1: str, word2: str) -> str:
        return self.paths.shortest_path(word1, word2).describe()

    def page_rank(self, damping_factor: Optional[float] = None) -> Dict[str, float]:
        """
        PageRank of every word.

        Raises:
            ValueError: if the damping factor is outside [0, 1].
        """
        if damping_factor is None:
            damping_factor = self.config.damping_factor
        damping = validate_damping_factor(damping_factor)
        return self.ranks.page_rank(damping)

    def random_walk(self) -> List[str]:
        return self.walker.random_walk()

    def random_walk_text(self, save_to: Optional[Union[str, Path]] = None) -> str:
        """
        Run a walk, optionally persisting it, and return it space-joined.

        Raises:
            WordGraphError: if ``save_to`` is given and the walk cannot be written.
        """
        nodes = self.walker.random_walk()
        if save_to is not None:
            saved = save_walk(nodes, save_to)
            if saved.is_failure:
                raise WordGraphError(f"Cannot save random walk to {save_to}: {saved.error}") from saved.error
        return format_walk(nodes)

    def get_statistics(self) -> Dict[str, Any]:
        return asdict(self.graph.get_stats())
