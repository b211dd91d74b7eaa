"""
Image decoding module for the scanner package.

Opens image files with Pillow and returns their pixels as numpy arrays.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import DecodeFailure
from ..fingerprint.dependencies import np, Image, _logger

# Modes handed to the fingerprint pipeline unchanged in color mode
_NATIVE_MODES = ('L', 'RGB', 'RGBA')


def decode_image(filepath: str | Path, grayscale: bool = True) -> np.ndarray:
    """
    Decode an image file into a pixel array.

    Args:
        filepath: Path to the image
        grayscale: If True, decode to a single channel (H, W) array.
            Otherwise return (H, W), (H, W, 3) or (H, W, 4) depending on
            whether the image is grayscale, opaque color or has transparency.

    Returns:
        uint8 numpy array

    Raises:
        DecodeFailure: If the file is missing, unreadable, or not a valid image
    """
    filepath = str(filepath)

    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            img.load()

            if grayscale:
                img = img.convert('L')
            elif img.mode not in _NATIVE_MODES:
                has_alpha = 'A' in img.getbands() or 'transparency' in img.info
                img = img.convert('RGBA' if has_alpha else 'RGB')

            return np.array(img)
    except FileNotFoundError:
        raise DecodeFailure(filepath, "File not found")
    except PermissionError:
        raise DecodeFailure(filepath, "File not readable (permission denied)")
    except Image.UnidentifiedImageError as e:
        raise DecodeFailure(filepath, f"Not a valid image file: {e}")
    except Image.DecompressionBombError as e:
        raise DecodeFailure(filepath, f"Image too large: {e}")
    except (OSError, ValueError) as e:
        _logger.debug(f"Decoding failed for {filepath}: {e}")
        raise DecodeFailure(filepath, f"Corrupt or truncated image: {e}")


__all__ = ['decode_image']
