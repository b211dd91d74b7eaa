"""
Result printing for the CLI interface.

Everything here writes to stdout; log records go to stderr.
"""

from __future__ import annotations

from typing import Iterable

from ..config import ERROR_PREFIX
from ..models import ScoredPair, QueryMatch
from ..utils.formatters import format_score, format_pair, format_match


def print_score(score: float) -> None:
    """Print a single similarity score."""
    print(format_score(score))


def print_error(error: Exception) -> None:
    """Print a failure as: [ERROR] <reason>."""
    print(f"{ERROR_PREFIX} {error}")


def print_ranked_pairs(pairs: Iterable[ScoredPair]) -> None:
    """Print one line per ranked pair."""
    for pair in pairs:
        print(format_pair(pair))


def print_ranked_matches(matches: Iterable[QueryMatch]) -> None:
    """Print one line per ranked match."""
    for match in matches:
        print(format_match(match))


def print_fingerprint(hex_fingerprint: str, path: str) -> None:
    """Print a fingerprint as: <hex> "<path>"."""
    print(f'{hex_fingerprint} "{path}"')


__all__ = [
    'print_score',
    'print_error',
    'print_ranked_pairs',
    'print_ranked_matches',
    'print_fingerprint',
]
