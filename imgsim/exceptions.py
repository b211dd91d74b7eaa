"""
Exception types for Image Similarity.

Every failure the core can report is one of three kinds, each carrying only
the structured fields needed to describe it:

- InvalidParameter: a non-positive (or out of range) fingerprint parameter
- UnsupportedChannelCount: a pixel buffer with a channel count outside {1, 3, 4}
- DecodeFailure: an image file that could not be decoded
"""

from __future__ import annotations

from typing import Any


class ImageSimilarityError(Exception):
    """Base class for all errors raised by the similarity pipeline."""


class InvalidParameter(ImageSimilarityError):
    """A fingerprinting parameter is outside its valid range."""

    def __init__(self, name: str, value: Any, requirement: str = "a positive number"):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name} should be {requirement} instead of {value}")


class UnsupportedChannelCount(ImageSimilarityError):
    """The pixel buffer has a channel count that cannot be reduced to grayscale."""

    def __init__(self, channels: int):
        self.channels = channels
        super().__init__(f"Image with {channels} channels is not supported yet")


class DecodeFailure(ImageSimilarityError):
    """An image file could not be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode {path}: {reason}")


__all__ = [
    'ImageSimilarityError',
    'InvalidParameter',
    'UnsupportedChannelCount',
    'DecodeFailure',
]
