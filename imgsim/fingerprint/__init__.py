"""
Fingerprint package for Image Similarity.

Turns a decoded pixel array into a fixed-length perceptual bit string.

Public API:
- preprocess: Grayscale conversion and bilinear resize to N x N
- dct2: Orthonormal 2-D DCT-II
- extract_fingerprint: Mean-threshold the low-frequency K x K block
- compute_fingerprint: The full pipeline (preprocess, dct2, extract)
- fingerprint_to_hex / fingerprint_from_hex: Compact hexadecimal form
- has_heif_support: Check if HEIC/HEIF support is available
"""

from __future__ import annotations

from .preprocessing import preprocess, to_grayscale, channel_count
from .transform import dct2
from .extraction import (
    validate_parameters,
    extract_fingerprint,
    compute_fingerprint,
    fingerprint_to_hex,
    fingerprint_from_hex,
)
from .dependencies import HAS_HEIF_SUPPORT


def has_heif_support() -> bool:
    """Check if HEIC/HEIF support is available."""
    return HAS_HEIF_SUPPORT


__all__ = [
    # Preprocessing
    'preprocess',
    'to_grayscale',
    'channel_count',
    # Transform
    'dct2',
    # Extraction
    'validate_parameters',
    'extract_fingerprint',
    'compute_fingerprint',
    'fingerprint_to_hex',
    'fingerprint_from_hex',
    # Feature detection
    'has_heif_support',
]
