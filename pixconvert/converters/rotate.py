"""Quarter-turn rotation."""
from __future__ import annotations

import numpy as np

from ..utils.pixels import check_rgba

Array = np.ndarray


def rotate_clockwise(arr: Array) -> Array:
    """Rotate an RGBA image 90 degrees clockwise.

    The result has shape (W, H, 4); input pixel (x, y) lands at
    (H - 1 - y, x).
    """
    check_rgba(arr)
    return np.ascontiguousarray(np.rot90(arr, k=-1))
