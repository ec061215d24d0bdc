"""
Graph construction from normalized text.

GraphBuilder is the only mutator of a WordGraph. Each adjacent token pair
adds one unit of weight to the corresponding edge; the finished graph is
frozen before it is handed to the analyzers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..text.normalizer import TextNormalizer
from ..utils.error_handling import ErrorHandler, ErrorSeverity, Result
from .word_graph import WordGraph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Populates a WordGraph from a token sequence, raw text or a text file."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self.normalizer = normalizer or TextNormalizer()
        self.error_handler = error_handler or ErrorHandler("GraphBuilder")

    def build(self, tokens: Sequence[str]) -> WordGraph:
        """Build and freeze a graph from an ordered token sequence."""
        graph = WordGraph()

        for current_word, next_word in zip(tokens, tokens[1:]):
            graph.add_edge(current_word, next_word)

        # A single token, or the final token, still needs its own entry
        if tokens:
            graph.add_node(tokens[-1])

        graph.freeze()
        logger.info(
            f"Built word graph: {len(graph)} nodes, {graph.edge_count()} edges "
            f"from {len(tokens)} tokens"
        )
        return graph

    def build_from_text(self, text: str) -> WordGraph:
        """Normalize ``text`` and build a graph from its tokens."""
        return self.build(self.normalizer.normalize(text))

    def build_from_file(self, path: Union[str, Path],
                        encoding: str = 'utf-8') -> Result[WordGraph, Exception]:
        """
        Read ``path`` and build a graph from its contents.

        Unreadable input yields a failed Result; the caller decides whether
        the session can continue (it cannot: there is no graph to query).
        """
        def read_and_build(file_path):
            with open(file_path, 'r', encoding=encoding) as f:
                content = f.read()
            return self.build_from_text(content)

        return self.error_handler.safe_file_operation(
            str(path),
            read_and_build,
            operation_name="build_from_file",
            severity=ErrorSeverity.CRITICAL
        )


def build_graph(text: str) -> WordGraph:
    """Build a word graph from raw text with default settings."""
    return GraphBuilder().build_from_text(text)
