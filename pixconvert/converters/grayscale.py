"""Grayscale by plain channel averaging."""
from __future__ import annotations

import numpy as np

from ..utils.pixels import check_rgba

Array = np.ndarray


def grayscale(arr: Array) -> Array:
    """Replace R, G and B with their integer mean; alpha is kept.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.

    Returns
    -------
    np.ndarray
        New RGBA image of the same shape.
    """
    check_rgba(arr)
    gray = arr[..., :3].astype(np.uint16).sum(axis=2) // 3
    out = arr.copy()
    out[..., :3] = gray[..., None].astype(np.uint8)
    return out
