"""
Utilities package for Image Similarity.

Provides:
- formatters: Textual forms of scores and ranking lines
- validators: Input parsing and validation
"""

from __future__ import annotations

from . import formatters
from . import validators

from .formatters import format_score, format_pair, format_match
from .validators import parse_extensions, validate_directory, validate_workers

__all__ = [
    # Submodules
    'formatters',
    'validators',
    # Formatters
    'format_score',
    'format_pair',
    'format_match',
    # Validators
    'parse_extensions',
    'validate_directory',
    'validate_workers',
]
