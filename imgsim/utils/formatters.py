"""
Formatting utilities for Image Similarity.

Provides the textual forms used on stdout for scores and ranking lines.
"""

from __future__ import annotations

from ..models import ScoredPair, QueryMatch


def format_score(score: float) -> str:
    """
    Format a score in its shortest round-trip form, without a trailing '.0'.

    Examples:
        >>> format_score(1.0)
        '1'
        >>> format_score(0.984375)
        '0.984375'
    """
    text = repr(float(score))
    if text.endswith('.0'):
        return text[:-2]
    return text


def format_pair(pair: ScoredPair) -> str:
    """Format a ranked pair as: <score> "<path_a>" "<path_b>"."""
    return f'{format_score(pair.score)} "{pair.identifier_a}" "{pair.identifier_b}"'


def format_match(match: QueryMatch) -> str:
    """Format a ranked match as: <score> "<path>"."""
    return f'{format_score(match.score)} "{match.identifier}"'


__all__ = ['format_score', 'format_pair', 'format_match']
