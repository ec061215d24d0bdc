"""
Bridge-word discovery and bridge-augmented text generation.

A bridge word between w1 and w2 is any node ``mid`` with edges w1 -> mid and
mid -> w2. Bridge sets are always sorted before they are rendered or sampled
from, so results only depend on the graph and the injected random source.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from ..graph.word_graph import WordGraph
from ..text.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


def format_word_list(words: List[str]) -> str:
    """Render ``["a"]`` as ``a``, two words as ``a and b``, more as ``a, b, and c``."""
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return ", ".join(words[:-1]) + ", and " + words[-1]


class BridgeAnalyzer:
    """Read-only bridge-word queries over a WordGraph."""

    def __init__(self, graph: WordGraph, rng: Optional[random.Random] = None,
                 normalizer: Optional[TextNormalizer] = None):
        self.graph = graph
        self.rng = rng or random.Random()
        self.normalizer = normalizer or TextNormalizer()

    def bridge_words(self, word1: str, word2: str) -> List[str]:
        """Sorted bridge words from ``word1`` to ``word2`` (empty if none)."""
        bridges = [
            mid for mid in self.graph.out_edges(word1)
            if self.graph.has_edge(mid, word2)
        ]
        return sorted(bridges)

    def query_bridge_words(self, word1: str, word2: str) -> str:
        """Describe the bridge words from ``word1`` to ``word2``."""
        has_word1 = self.graph.contains_anywhere(word1)
        has_word2 = self.graph.contains_anywhere(word2)

        if not has_word1 and not has_word2:
            return f'No "{word1}" and "{word2}" in the graph!'
        if not has_word1:
            return f'No "{word1}" in the graph!'
        if not has_word2:
            return f'No "{word2}" in the graph!'

        bridges = self.bridge_words(word1, word2)
        if not bridges:
            return f'No bridge words from "{word1}" to "{word2}"!'

        return (
            f'The bridge words from "{word1}" to "{word2}" are: '
            f'{format_word_list(bridges)}.'
        )

    def generate_new_text(self, text: str) -> str:
        """
        Insert a random bridge word between every adjacent pair of ``text``
        that has at least one.

        Input is normalized the same way as ingested text; input with no
        tokens produces an empty string.
        """
        words = self.normalizer.normalize(text)
        if not words:
            return ""

        result = [words[0]]
        for word1, word2 in zip(words, words[1:]):
            bridges = self.bridge_words(word1, word2)
            if bridges:
                bridge = self.rng.choice(bridges)
                logger.debug(f"Inserting bridge '{bridge}' between '{word1}' and '{word2}'")
                result.append(bridge)
            result.append(word2)

        return " ".join(result)
