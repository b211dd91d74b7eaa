"""
Dependency initialization for the scanner package.

Handles the optional tqdm import used for progress bars.
"""

from __future__ import annotations

import logging
from typing import Optional, Any

# Module-level logger
_logger = logging.getLogger(__name__)

# Optional: tqdm for progress bars
# Store as Optional[Any] to satisfy type checkers when tqdm is not installed
HAS_TQDM = False
_tqdm_class: Optional[Any] = None

try:
    from tqdm import tqdm as _tqdm_import
    HAS_TQDM = True
    _tqdm_class = _tqdm_import
except ImportError:
    pass


__all__ = [
    'HAS_TQDM',
    '_tqdm_class',
    '_logger',
]
