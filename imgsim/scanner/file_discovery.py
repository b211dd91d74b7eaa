"""
File discovery module for the scanner package.

Provides functionality to enumerate candidate files under a directory and to
filter them by extension.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from ..config import DEFAULT_EXTENSIONS


def iter_candidate_files(root_path: str | Path) -> Iterator[str]:
    """
    Lazily walk a directory tree and yield every file path under it.

    Args:
        root_path: Directory to walk

    Yields:
        File paths joined onto root_path (not resolved)

    Notes:
        - Directories and files are visited in sorted order, so two walks of
          an unchanged tree yield the same sequence
        - Unreadable directories are skipped; a missing root yields nothing
        - Each call walks the tree again from the start
    """
    for dirpath, dirnames, filenames in os.walk(os.fspath(root_path)):
        dirnames.sort()
        for filename in sorted(filenames):
            yield os.path.join(dirpath, filename)


def has_allowed_extension(filepath: str | Path, allowed_extensions: Iterable[str]) -> bool:
    """
    Check the final '.'-delimited part of a path against allowed extensions.

    The match is exact and case-sensitive ('png' does not accept 'PNG').

    Examples:
        >>> has_allowed_extension('/photos/cat.png', {'png', 'jpg'})
        True
        >>> has_allowed_extension('/photos/cat.PNG', {'png', 'jpg'})
        False
    """
    return str(filepath).split('.')[-1] in allowed_extensions


def find_image_files(
    root_path: str | Path,
    allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[str]:
    """
    Find all files with an allowed extension under the given directory.

    Args:
        root_path: Directory path to search (recursively)
        allowed_extensions: Extensions without the leading dot

    Returns:
        List of file paths in walk order
    """
    extensions = frozenset(allowed_extensions)
    return [
        filepath for filepath in iter_candidate_files(root_path)
        if has_allowed_extension(filepath, extensions)
    ]


__all__ = ['iter_candidate_files', 'has_allowed_extension', 'find_image_files']
