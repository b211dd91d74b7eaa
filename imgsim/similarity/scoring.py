"""
Scoring module for the similarity package.
"""

from __future__ import annotations


def similarity_score(a: str, b: str) -> float:
    """
    Score two fingerprints by the fraction of matching bit positions.

    Fingerprints of different lengths are incomparable and score 0.0, as do
    two empty fingerprints. The score is symmetric and lies in [0, 1], with
    1.0 only for identical fingerprints.

    Args:
        a: First fingerprint
        b: Second fingerprint

    Returns:
        1 - (differing positions / length)

    Examples:
        >>> similarity_score('111', '101')
        0.6666666666666667
    """
    if len(a) != len(b) or not a:
        return 0.0

    distance = sum(1 for bit_a, bit_b in zip(a, b) if bit_a != bit_b)
    return 1.0 - distance / len(a)


__all__ = ['similarity_score']
