"""
Image Similarity
================
Detects near-duplicate and visually similar images with perceptual fingerprints.

Features:
- DCT-based fingerprints (64x64 grayscale, 16x16 low-frequency block, 256 bits)
- Pair comparison of two images
- All-pairs ranking of the images in a directory
- Ranking of one query image against a directory
- Parallel fingerprinting; unreadable files in a directory are skipped
"""

__version__ = "0.1.0"

from .exceptions import (
    ImageSimilarityError,
    InvalidParameter,
    UnsupportedChannelCount,
    DecodeFailure,
)
from .models import SimilarityConfig, CorpusEntry, ScoredPair, QueryMatch
from .config import DEFAULT_RESIZE_LENGTH, DEFAULT_DCT_BLOCK, DEFAULT_EXTENSIONS
from .fingerprint import (
    preprocess,
    dct2,
    extract_fingerprint,
    compute_fingerprint,
    fingerprint_to_hex,
    fingerprint_from_hex,
)
from .similarity import similarity_score, rank_self, rank_query
from .scanner import decode_image, find_image_files, fingerprint_file, build_corpus
from .comparison import compare_images, compare_directory, match_directory

__all__ = [
    "ImageSimilarityError",
    "InvalidParameter",
    "UnsupportedChannelCount",
    "DecodeFailure",
    "SimilarityConfig",
    "CorpusEntry",
    "ScoredPair",
    "QueryMatch",
    "DEFAULT_RESIZE_LENGTH",
    "DEFAULT_DCT_BLOCK",
    "DEFAULT_EXTENSIONS",
    "preprocess",
    "dct2",
    "extract_fingerprint",
    "compute_fingerprint",
    "fingerprint_to_hex",
    "fingerprint_from_hex",
    "similarity_score",
    "rank_self",
    "rank_query",
    "decode_image",
    "find_image_files",
    "fingerprint_file",
    "build_corpus",
    "compare_images",
    "compare_directory",
    "match_directory",
]
