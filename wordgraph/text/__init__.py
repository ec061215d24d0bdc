"""Text normalization for word-graph ingestion."""

from __future__ import annotations

from .normalizer import TextNormalizer, normalize

__all__ = [
    "TextNormalizer",
    "normalize",
]
