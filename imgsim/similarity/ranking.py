"""
Ranking module for the similarity package.

Provides all-pairs ranking inside one corpus and query-vs-corpus ranking.
Both return None (not an empty list) when the corpus is empty.
"""

from __future__ import annotations

import logging
from typing import Optional, Callable, Sequence

from ..models import CorpusEntry, ScoredPair, QueryMatch
from .scoring import similarity_score

_logger = logging.getLogger(__name__)


def rank_self(
    corpus: Sequence[CorpusEntry],
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> Optional[list[ScoredPair]]:
    """
    Score every unordered pair in a corpus and sort by similarity.

    Args:
        corpus: Fingerprinted images, in discovery order
        progress_callback: Optional callback(current, total) for progress

    Returns:
        - None for an empty corpus
        - [ScoredPair(1.0, id, id)] for a single entry (it matches itself)
        - m(m-1)/2 pairs sorted by score descending otherwise; equal scores
          keep their enumeration order
    """
    if not corpus:
        return None

    if len(corpus) == 1:
        identifier = corpus[0].identifier
        return [ScoredPair(1.0, identifier, identifier)]

    total_comparisons = (len(corpus) * (len(corpus) - 1)) // 2
    _logger.debug(f"Comparing {total_comparisons:,} image pairs")

    results: list[ScoredPair] = []
    for i in range(len(corpus) - 1):
        entry_a = corpus[i]
        for j in range(i + 1, len(corpus)):
            entry_b = corpus[j]
            score = similarity_score(entry_a.fingerprint, entry_b.fingerprint)
            results.append(ScoredPair(score, entry_a.identifier, entry_b.identifier))

            if progress_callback and len(results) % 10000 == 0:
                progress_callback(len(results), total_comparisons)

    # sorted() is stable, also with reverse=True
    return sorted(results, key=lambda pair: pair.score, reverse=True)


def rank_query(
    query: str,
    corpus: Sequence[CorpusEntry],
) -> Optional[list[QueryMatch]]:
    """
    Score one fingerprint against every corpus entry and sort by similarity.

    Args:
        query: Fingerprint of the query image
        corpus: Fingerprinted images, in discovery order

    Returns:
        None for an empty corpus, otherwise one QueryMatch per entry sorted
        by score descending
    """
    if not corpus:
        return None

    results = [
        QueryMatch(similarity_score(query, entry.fingerprint), entry.identifier)
        for entry in corpus
    ]
    return sorted(results, key=lambda match: match.score, reverse=True)


__all__ = ['rank_self', 'rank_query']
