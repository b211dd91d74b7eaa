"""
Data models for Image Similarity.

Contains dataclasses for fingerprint corpora, ranking results and the
configuration passed to the fingerprinting core.
"""

from dataclasses import dataclass, field
from typing import Iterable
import os

from .config import DEFAULT_RESIZE_LENGTH, DEFAULT_DCT_BLOCK, DEFAULT_EXTENSIONS


@dataclass(frozen=True)
class SimilarityConfig:
    """
    Parameters shared by every fingerprint in one comparison set.

    Attributes:
        resize_length: Side length N of the square grayscale buffer
        dct_block: Side length K of the kept DCT block (fingerprint has K*K bits)
        allowed_extensions: Extensions (without dot) accepted in directory scans
    """
    resize_length: int = DEFAULT_RESIZE_LENGTH
    dct_block: int = DEFAULT_DCT_BLOCK
    allowed_extensions: frozenset = field(default=DEFAULT_EXTENSIONS)

    @property
    def fingerprint_bits(self) -> int:
        """Number of bits in a fingerprint produced with this config."""
        return self.dct_block * self.dct_block

    def with_extensions(self, extensions: Iterable[str]) -> 'SimilarityConfig':
        """Return a copy of this config accepting the given extensions."""
        return SimilarityConfig(
            resize_length=self.resize_length,
            dct_block=self.dct_block,
            allowed_extensions=frozenset(extensions),
        )


@dataclass(frozen=True)
class CorpusEntry:
    """
    A fingerprinted image discovered during a directory scan.

    Attributes:
        identifier: Path of the image as produced by the directory walk
        fingerprint: Bit string over {'0', '1'}
    """
    identifier: str
    fingerprint: str

    def __iter__(self):
        return iter((self.identifier, self.fingerprint))

    @property
    def filename(self) -> str:
        """Return just the filename portion of the identifier."""
        return os.path.basename(self.identifier)


@dataclass(frozen=True)
class ScoredPair:
    """
    Similarity of two corpus entries.

    Attributes:
        score: Similarity in [0, 1]
        identifier_a: First image
        identifier_b: Second image
    """
    score: float
    identifier_a: str
    identifier_b: str

    def __iter__(self):
        return iter((self.score, self.identifier_a, self.identifier_b))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'score': self.score,
            'identifier_a': self.identifier_a,
            'identifier_b': self.identifier_b,
        }


@dataclass(frozen=True)
class QueryMatch:
    """
    Similarity of a query image to one corpus entry.

    Attributes:
        score: Similarity in [0, 1]
        identifier: Corpus image
    """
    score: float
    identifier: str

    def __iter__(self):
        return iter((self.score, self.identifier))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'score': self.score,
            'identifier': self.identifier,
        }


__all__ = ['SimilarityConfig', 'CorpusEntry', 'ScoredPair', 'QueryMatch']
