"""
Similarity package for Image Similarity.

Public API:
- similarity_score: Fraction of matching bits between two fingerprints
- rank_self: All-pairs ranking inside one corpus
- rank_query: Ranking of one fingerprint against a corpus
"""

from __future__ import annotations

from .scoring import similarity_score
from .ranking import rank_self, rank_query

__all__ = [
    'similarity_score',
    'rank_self',
    'rank_query',
]
