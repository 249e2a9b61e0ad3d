"""Horizontal flip."""
from __future__ import annotations

import numpy as np

from ..utils.pixels import check_rgba

Array = np.ndarray


def mirror(arr: Array) -> Array:
    """Flip an RGBA image left to right.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.

    Returns
    -------
    np.ndarray
        New image of the same shape; input pixel (x, y) lands at
        (W - 1 - x, y).
    """
    check_rgba(arr)
    return arr[:, ::-1].copy()
