"""
Entry points for the three comparison use cases.

- compare_images: similarity of two named image files
- compare_directory: all-pairs ranking of the images under a directory
- match_directory: ranking of one named image against a directory

Named inputs are fatal when they fail to decode; images discovered in a
directory are silently dropped instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_WORKERS
from .fingerprint import validate_parameters
from .models import SimilarityConfig, ScoredPair, QueryMatch
from .scanner import fingerprint_file, build_corpus
from .similarity import similarity_score, rank_self, rank_query

_logger = logging.getLogger(__name__)


def compare_images(
    path_a: str | Path,
    path_b: str | Path,
    config: Optional[SimilarityConfig] = None,
) -> float:
    """
    Compute the similarity of two image files.

    Args:
        path_a: First image
        path_b: Second image
        config: Fingerprint parameters (defaults: N=64, K=16)

    Returns:
        Similarity score in [0, 1]

    Raises:
        InvalidParameter: If the config's (N, K) are invalid
        DecodeFailure: If either image cannot be decoded
        UnsupportedChannelCount: If either image cannot be reduced to grayscale
    """
    config = config or SimilarityConfig()
    validate_parameters(config.resize_length, config.dct_block)

    fingerprint_a = fingerprint_file(path_a, config)
    fingerprint_b = fingerprint_file(path_b, config)
    return similarity_score(fingerprint_a, fingerprint_b)


def compare_directory(
    directory: str | Path,
    config: Optional[SimilarityConfig] = None,
    max_workers: int = DEFAULT_WORKERS,
    show_progress: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Optional[list[ScoredPair]]:
    """
    Rank every pair of images under a directory by similarity.

    Returns:
        None when no image could be fingerprinted, otherwise the ranked pairs
        (a single self-pair when only one image qualifies)
    """
    corpus = build_corpus(
        directory,
        config=config,
        max_workers=max_workers,
        show_progress=show_progress,
        logger=logger,
    )
    _logger.debug(f"Ranking {len(corpus):,} fingerprints from {directory}")
    return rank_self(corpus)


def match_directory(
    image_path: str | Path,
    directory: str | Path,
    config: Optional[SimilarityConfig] = None,
    max_workers: int = DEFAULT_WORKERS,
    show_progress: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Optional[list[QueryMatch]]:
    """
    Rank every image under a directory by similarity to a query image.

    The query is fingerprinted before the directory is walked, so a query that
    fails to decode aborts without scanning anything.

    Returns:
        None when no directory image could be fingerprinted, otherwise the
        ranked matches

    Raises:
        InvalidParameter, DecodeFailure, UnsupportedChannelCount: For the query image
    """
    config = config or SimilarityConfig()
    validate_parameters(config.resize_length, config.dct_block)

    query = fingerprint_file(image_path, config)

    corpus = build_corpus(
        directory,
        config=config,
        max_workers=max_workers,
        show_progress=show_progress,
        logger=logger,
    )
    return rank_query(query, corpus)


__all__ = ['compare_images', 'compare_directory', 'match_directory']
