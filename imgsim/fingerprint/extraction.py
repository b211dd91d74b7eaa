"""
Fingerprint extraction module for the fingerprint package.

Reduces the DCT of a normalized image to a K*K bit string by thresholding the
low-frequency block against a mean value, and converts fingerprints to and
from a compact hexadecimal form.
"""

from __future__ import annotations

from ..exceptions import InvalidParameter
from .dependencies import np, imagehash, _logger
from .preprocessing import preprocess
from .transform import dct2


def validate_parameters(resize_length: int, dct_block: int) -> None:
    """
    Check the (N, K) fingerprint parameters.

    K larger than N is rejected outright, so fingerprints from tools that
    accept such blocks have no counterpart here.

    Raises:
        InvalidParameter: If either value is not positive, or K exceeds N
    """
    if resize_length <= 0:
        raise InvalidParameter('resize_length', resize_length)
    if dct_block <= 0:
        raise InvalidParameter('dct_block', dct_block)
    if dct_block > resize_length:
        raise InvalidParameter(
            'dct_block', dct_block,
            requirement=f"at most resize_length ({resize_length})",
        )


def extract_fingerprint(coefficients: np.ndarray, dct_block: int) -> str:
    """
    Threshold the top-left K x K block of a DCT into a bit string.

    The block is read in row-major (row, col) order. The threshold is the sum
    of the block without the DC term divided by N*N - 1, where N is the full
    transform size. Each coefficient (DC included) yields '0' when strictly
    below the threshold and '1' otherwise.

    Args:
        coefficients: N x N transform output
        dct_block: Block side length K, 0 < K <= N

    Returns:
        Fingerprint string of length K*K
    """
    length = coefficients.shape[0]
    validate_parameters(length, dct_block)

    if length == 1:
        # No coefficients besides DC, so nothing falls below the threshold
        return '1'

    block = coefficients[:dct_block, :dct_block]
    mean = (float(block.sum()) - float(block[0, 0])) / (length * length - 1)

    return ''.join('0' if value < mean else '1' for value in block.ravel())


def compute_fingerprint(pixels: np.ndarray, resize_length: int, dct_block: int) -> str:
    """
    Compute the perceptual fingerprint of a decoded image.

    Args:
        pixels: Decoded image array with 1, 3 or 4 channels
        resize_length: Side length N of the normalized buffer
        dct_block: Side length K of the kept DCT block

    Returns:
        Fingerprint string of length K*K

    Raises:
        InvalidParameter: If N or K is invalid (checked before the image is read)
        UnsupportedChannelCount: If the image cannot be reduced to grayscale
    """
    validate_parameters(resize_length, dct_block)

    normalized = preprocess(pixels, resize_length)
    return extract_fingerprint(dct2(normalized), dct_block)


def fingerprint_to_hex(fingerprint: str) -> str:
    """
    Render a fingerprint as hexadecimal, four bits per digit.

    Examples:
        >>> fingerprint_to_hex('11110000')
        'f0'
    """
    if not fingerprint:
        raise InvalidParameter('fingerprint', repr(fingerprint), requirement="a non-empty bit string")
    if set(fingerprint) - {'0', '1'}:
        raise InvalidParameter('fingerprint', repr(fingerprint), requirement="a string over {0, 1}")

    bits = np.array([bit == '1' for bit in fingerprint], dtype=bool)
    return str(imagehash.ImageHash(bits.reshape(1, -1)))


def fingerprint_from_hex(text: str, bits: int | None = None) -> str:
    """
    Parse a hexadecimal fingerprint of a square K x K block back into bits.

    Without ``bits`` the block side is inferred from the number of hex
    digits, which only works for K >= 2 (a single digit reads as 2 x 2).

    Args:
        text: Hexadecimal fingerprint
        bits: Expected fingerprint length K*K; leading padding bits are dropped

    Raises:
        InvalidParameter: If text is not hexadecimal or does not fit in bits
    """
    try:
        parsed = imagehash.hex_to_hash(text)
    except ValueError as e:
        raise InvalidParameter('fingerprint', repr(text), requirement="a hexadecimal string") from e

    fingerprint = ''.join('1' if bit else '0' for bit in parsed.hash.ravel())
    if bits is not None:
        if bits <= 0:
            raise InvalidParameter('bits', bits)
        padding, fingerprint = fingerprint[:-bits], fingerprint[-bits:].rjust(bits, '0')
        if '1' in padding:
            raise InvalidParameter('fingerprint', repr(text), requirement=f"at most {bits} bits")
    _logger.debug(f"Parsed {len(fingerprint)}-bit fingerprint from hex")
    return fingerprint


__all__ = [
    'validate_parameters',
    'extract_fingerprint',
    'compute_fingerprint',
    'fingerprint_to_hex',
    'fingerprint_from_hex',
]
