"""
Text normalization for word-graph ingestion.

Every character outside the ASCII letter ranges becomes whitespace, the text
is lowercased and split into tokens. The same rules apply to the ingested
source text and to the free text passed to bridge-word generation.
"""

from __future__ import annotations

import re
from typing import List


NON_ALPHA_RE = re.compile(r'[^A-Za-z]')


class TextNormalizer:
    """Turns raw text into an ordered sequence of lowercase alphabetic tokens."""

    def __init__(self):
        self.pattern = NON_ALPHA_RE

    def normalize(self, text: str) -> List[str]:
        """Return the token sequence for ``text`` (possibly empty)."""
        if not text:
            return []
        cleaned = self.pattern.sub(' ', text).lower()
        return cleaned.split()

    def __call__(self, text: str) -> List[str]:
        return self.normalize(text)


_default_normalizer = TextNormalizer()


def normalize(text: str) -> List[str]:
    """Normalize ``text`` with the default normalizer."""
    return _default_normalizer.normalize(text)
