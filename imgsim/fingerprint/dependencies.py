"""
Dependency initialization for the fingerprint package.

Handles PIL, numpy, scipy, imagehash and HEIC/HEIF support imports with
proper error handling and configuration.
"""

from __future__ import annotations

import warnings
import logging

from ..config import MAX_IMAGE_PIXELS

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    import numpy as np
    from PIL import Image
    from scipy import fft
    import imagehash
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install Pillow numpy scipy imagehash"
    )

# Register HEIC/HEIF support via pillow-heif
# This must be done before opening any HEIC files
HAS_HEIF_SUPPORT = False
try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
    HAS_HEIF_SUPPORT = True
    _logger.debug("HEIC/HEIF support enabled via pillow-heif")
except ImportError:
    _logger.debug("pillow-heif not installed - HEIC/HEIF files will not be decoded")

# Large scans and panoramas are legitimate inputs
Image.MAX_IMAGE_PIXELS = MAX_IMAGE_PIXELS

# We've increased the limit appropriately
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)


__all__ = [
    'np',
    'Image',
    'fft',
    'imagehash',
    'HAS_HEIF_SUPPORT',
    '_logger',
]
