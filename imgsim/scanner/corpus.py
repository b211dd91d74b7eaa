"""
Corpus construction module for the scanner package.

Fingerprints every accepted file under a directory in parallel. Files that
fail to decode or fingerprint are dropped from the corpus; they never abort
the batch.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Callable, Any

from ..config import DEFAULT_WORKERS
from ..fingerprint import compute_fingerprint, validate_parameters
from ..models import CorpusEntry, SimilarityConfig
from .decoding import decode_image
from .dependencies import HAS_TQDM, _tqdm_class, _logger
from .file_discovery import find_image_files


def fingerprint_file(filepath: str | Path, config: SimilarityConfig) -> str:
    """
    Decode an image as grayscale and compute its fingerprint.

    Raises:
        DecodeFailure: If the file cannot be decoded
        InvalidParameter: If the config's (N, K) are invalid
    """
    pixels = decode_image(filepath, grayscale=True)
    return compute_fingerprint(pixels, config.resize_length, config.dct_block)


def build_corpus(
    root_path: str | Path,
    config: Optional[SimilarityConfig] = None,
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = False,
    logger: Optional[logging.Logger] = None,
) -> list[CorpusEntry]:
    """
    Fingerprint every image with an allowed extension under a directory.

    Args:
        root_path: Directory to walk recursively
        config: Fingerprint parameters and allowed extensions
        max_workers: Number of parallel workers
        progress_callback: Optional callback(current, total) for progress updates
        show_progress: Whether to show tqdm progress bar
        logger: Optional logger for status messages

    Returns:
        Corpus entries in walk order, without the files that failed

    Raises:
        InvalidParameter: If the config itself is invalid (nothing is decoded)
    """
    config = config or SimilarityConfig()
    validate_parameters(config.resize_length, config.dct_block)

    filepaths = find_image_files(root_path, config.allowed_extensions)
    if logger:
        logger.info(f"Found {len(filepaths):,} candidate images in {root_path}")
    if not filepaths:
        return []

    # Slots keep walk order no matter which worker finishes first
    slots: list[Optional[CorpusEntry]] = [None] * len(filepaths)

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(
            total=len(filepaths),
            desc="Fingerprinting images",
            unit="img",
            ncols=80,
        )

    last_callback_time = time.time()
    callback_interval = 1.0  # seconds

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(fingerprint_file, path, config): index
            for index, path in enumerate(filepaths)
        }

        for done, future in enumerate(as_completed(futures), start=1):
            index = futures[future]
            filepath = filepaths[index]
            try:
                slots[index] = CorpusEntry(filepath, future.result())
            except Exception as e:
                # Discovered files are noise when they fail, not errors
                _logger.debug(f"Skipping {filepath}: {e}")

            if pbar is not None:
                pbar.update(1)

            if progress_callback:
                current_time = time.time()
                if current_time - last_callback_time >= callback_interval or done == len(filepaths):
                    progress_callback(done, len(filepaths))
                    last_callback_time = current_time

    if pbar is not None:
        pbar.close()

    corpus = [entry for entry in slots if entry is not None]

    skipped = len(filepaths) - len(corpus)
    if logger and skipped:
        logger.info(f"Skipped {skipped:,} files that could not be fingerprinted")

    return corpus


__all__ = ['fingerprint_file', 'build_corpus']
