"""
Frequency transform for the fingerprint package.
"""

from __future__ import annotations

from .dependencies import np, fft


def dct2(buffer: np.ndarray) -> np.ndarray:
    """
    Compute the orthonormal 2-D DCT-II of a square buffer.

    The normalization is fixed for every fingerprint; only the relative
    magnitudes of the coefficients matter downstream. Coefficient [0, 0]
    is the DC term.
    """
    return fft.dctn(np.asarray(buffer, dtype=np.float64), type=2, norm='ortho')


__all__ = ['dct2']
