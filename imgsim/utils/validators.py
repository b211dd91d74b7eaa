"""
Input validation for Image Similarity.

Provides parsing of the extension list and checks for user-supplied
directories and worker counts.
"""

from __future__ import annotations

import os
from typing import Optional

from ..config import DEFAULT_EXTENSIONS


def parse_extensions(value: Optional[str]) -> frozenset:
    """
    Parse a comma-separated extension list.

    Empty items are dropped; when nothing is left the defaults are used.
    Extensions are kept exactly as written (no dot stripping, no lowercasing).

    Examples:
        >>> sorted(parse_extensions('png,gif'))
        ['gif', 'png']
        >>> parse_extensions('') == DEFAULT_EXTENSIONS
        True
    """
    if not value:
        return DEFAULT_EXTENSIONS

    extensions = frozenset(part for part in value.split(',') if part)
    return extensions or DEFAULT_EXTENSIONS


def validate_directory(directory: str) -> tuple[bool, str]:
    """
    Validate that a directory exists and is accessible.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_workers(workers) -> tuple[bool, str]:
    """
    Validate a worker count.

    Examples:
        >>> validate_workers(4)
        (True, '')
        >>> validate_workers(0)
        (False, 'Workers must be between 1 and 32')
    """
    try:
        workers = int(workers)
        if not 1 <= workers <= 32:
            return False, "Workers must be between 1 and 32"
        return True, ""
    except (ValueError, TypeError):
        return False, "Workers must be an integer"


__all__ = [
    'parse_extensions',
    'validate_directory',
    'validate_workers',
]
