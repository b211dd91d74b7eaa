"""
Configuration constants for Image Similarity.

This module contains all default settings including:
- Fingerprint parameters (resize length and DCT block size)
- Allowed file extensions for directory scans
- Worker and decoder limits
"""

# Side length of the square grayscale buffer an image is resampled to
DEFAULT_RESIZE_LENGTH = 64

# Side length of the low-frequency DCT block kept for the fingerprint.
# A fingerprint therefore has DEFAULT_DCT_BLOCK ** 2 bits (256).
DEFAULT_DCT_BLOCK = 16

# Extensions accepted during directory scans.
# Matched exactly against the last '.'-delimited part of the path (case-sensitive).
DEFAULT_EXTENSIONS = frozenset({'png', 'jpg', 'jpeg'})

# Default number of parallel workers for fingerprinting
DEFAULT_WORKERS = 4

# Raised decompression bomb limit for Pillow (500 megapixels)
MAX_IMAGE_PIXELS = 500_000_000

# Prefix printed in front of failure messages on stdout
ERROR_PREFIX = '[ERROR]'
