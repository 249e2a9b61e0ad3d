"""
Pytest fixtures for pixconvert tests
"""

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def random_image():
    """A 13x17 RGBA image of reproducible noise (odd sizes on purpose)."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(13, 17, 4), dtype=np.uint8)


@pytest.fixture
def gradient_image():
    """A 6x8 image whose pixels all differ: R=x*30, G=y*40, B=x+y, A=255."""
    img = np.zeros((6, 8, 4), dtype=np.uint8)
    for y in range(6):
        for x in range(8):
            img[y, x] = (x * 30, y * 40, x + y, 255)
    return img


@pytest.fixture
def png_file(tmp_path, random_image):
    """Write ``random_image`` to a PNG on disk and return its path."""
    path = tmp_path / "input.png"
    Image.fromarray(random_image).save(path)
    return path
