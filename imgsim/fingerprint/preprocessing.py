"""
Preprocessing module for the fingerprint package.

Normalizes a decoded pixel array into a fixed-size single-channel buffer:
grayscale conversion followed by bilinear resampling to N x N.
"""

from __future__ import annotations

from ..exceptions import InvalidParameter, UnsupportedChannelCount
from .dependencies import np, Image

# ITU-R BT.601 luma weights (same as Pillow's "L" conversion)
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def channel_count(pixels: np.ndarray) -> int:
    """
    Return the number of channels of a pixel array.

    A 2-D array is a single-channel image; a 3-D array is (height, width, channels).
    """
    if pixels.ndim == 2:
        return 1
    if pixels.ndim == 3:
        return int(pixels.shape[2])
    raise ValueError(f"Expected a 2-D or 3-D pixel array, got shape {pixels.shape}")


def to_grayscale(pixels: np.ndarray) -> np.ndarray:
    """
    Reduce a pixel array to a single float64 channel.

    Args:
        pixels: Array of shape (H, W) or (H, W, C) with C in {1, 3, 4}

    Returns:
        Array of shape (H, W)

    Raises:
        UnsupportedChannelCount: If C is not 1, 3 or 4
    """
    channels = channel_count(pixels)
    data = np.asarray(pixels, dtype=np.float64)

    if channels == 1:
        return data if data.ndim == 2 else data[:, :, 0]
    if channels in (3, 4):
        # Fourth channel (alpha or padding) carries no luma
        red, green, blue = LUMA_WEIGHTS
        return data[:, :, 0] * red + data[:, :, 1] * green + data[:, :, 2] * blue

    raise UnsupportedChannelCount(channels)


def resize_bilinear(gray: np.ndarray, length: int) -> np.ndarray:
    """Resample a 2-D buffer to length x length, ignoring aspect ratio."""
    # float32 arrays map onto Pillow's "F" mode
    img = Image.fromarray(np.ascontiguousarray(gray, dtype=np.float32))
    resized = img.resize((length, length), Image.Resampling.BILINEAR)
    return np.asarray(resized, dtype=np.float64)


def preprocess(pixels: np.ndarray, resize_length: int) -> np.ndarray:
    """
    Normalize a decoded image into an N x N grayscale buffer.

    Args:
        pixels: Decoded image array with 1, 3 or 4 channels
        resize_length: Target side length N (must be > 0)

    Returns:
        float64 array of shape (resize_length, resize_length)

    Raises:
        InvalidParameter: If resize_length <= 0 (checked before the image is read)
        UnsupportedChannelCount: If the image has another channel count
    """
    if resize_length <= 0:
        raise InvalidParameter('resize_length', resize_length)

    gray = to_grayscale(pixels)
    return resize_bilinear(gray, resize_length)


__all__ = [
    'LUMA_WEIGHTS',
    'channel_count',
    'to_grayscale',
    'resize_bilinear',
    'preprocess',
]
