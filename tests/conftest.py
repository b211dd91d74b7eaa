"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

import numpy as np
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path):
    """Point the user configuration at an empty directory for every test."""
    from imgsim.user_config import get_user_config

    monkeypatch.setenv('IMGSIM_CONFIG_DIR', str(tmp_path / 'imgsim-config'))
    for var in ('IMGSIM_WORKERS', 'IMGSIM_EXTENSIONS', 'IMGSIM_MAX_PIXELS'):
        monkeypatch.delenv(var, raising=False)

    config = get_user_config()
    config.reload()
    yield config
    config.reload()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


def make_pattern(width: int = 96, height: int = 96) -> np.ndarray:
    """Smooth grayscale pattern with plenty of low-frequency structure."""
    y, x = np.mgrid[0:height, 0:width]
    # Coordinates scaled to a 96x96 reference so larger sizes show the same picture
    x = x * (96.0 / width)
    y = y * (96.0 / height)
    pattern = 128 + 60 * np.sin(x / 9.0) + 50 * np.cos(y / 13.0)
    return np.clip(pattern, 0, 255).astype(np.uint8)


@pytest.fixture
def pattern_pixels():
    """96x96 uint8 grayscale pattern."""
    return make_pattern()


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a set of sample images for testing.

    Returns:
        dict with paths to:
        - pattern.png, pattern_copy.png (identical pixels)
        - pattern_large.png (same pattern, twice the resolution)
        - inverse.png (negated pattern)
        - gradient.jpg (horizontal gradient)
        - upper.PNG (valid image, upper-case extension)
        - broken.png (text with an image extension)
        - notes.txt (not an image)
    """
    images = {}
    pattern = make_pattern()

    path = temp_dir / "pattern.png"
    Image.fromarray(pattern).save(path, 'PNG')
    images['pattern'] = str(path)

    path = temp_dir / "pattern_copy.png"
    Image.fromarray(pattern).save(path, 'PNG')
    images['pattern_copy'] = str(path)

    path = temp_dir / "pattern_large.png"
    Image.fromarray(make_pattern(192, 192)).save(path, 'PNG')
    images['pattern_large'] = str(path)

    path = temp_dir / "inverse.png"
    Image.fromarray(255 - pattern).save(path, 'PNG')
    images['inverse'] = str(path)

    gradient = np.tile(np.linspace(0, 255, 80).astype(np.uint8), (60, 1))
    path = temp_dir / "gradient.jpg"
    Image.fromarray(gradient).convert('RGB').save(path, 'JPEG')
    images['gradient'] = str(path)

    path = temp_dir / "upper.PNG"
    Image.fromarray(pattern).save(path, 'PNG')
    images['upper'] = str(path)

    path = temp_dir / "broken.png"
    path.write_text("not an image")
    images['broken'] = str(path)

    path = temp_dir / "notes.txt"
    path.write_text("not an image")
    images['notes'] = str(path)

    return images


@pytest.fixture
def pair_dir(tmp_path):
    """Separate directory holding exactly two identical PNG images, a.png and b.png."""
    directory = tmp_path / "pairs"
    directory.mkdir()
    pattern = make_pattern()
    Image.fromarray(pattern).save(directory / "a.png", 'PNG')
    Image.fromarray(pattern).save(directory / "b.png", 'PNG')
    return directory
