"""
Scanner package for Image Similarity.

Provides decoding of image files and construction of fingerprint corpora from
directories.

Public API:
- iter_candidate_files: Lazily walk every file under a directory
- has_allowed_extension: Exact, case-sensitive extension check
- find_image_files: Discover files with allowed extensions
- decode_image: Decode an image file into a numpy array
- fingerprint_file: Decode and fingerprint one image file
- build_corpus: Fingerprint a whole directory in parallel, skipping failures
"""

from __future__ import annotations

from .file_discovery import iter_candidate_files, has_allowed_extension, find_image_files
from .decoding import decode_image
from .corpus import fingerprint_file, build_corpus

__all__ = [
    # File discovery
    'iter_candidate_files',
    'has_allowed_extension',
    'find_image_files',
    # Decoding
    'decode_image',
    # Corpus construction
    'fingerprint_file',
    'build_corpus',
]
