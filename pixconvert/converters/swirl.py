"""Swirl distortion with nearest-neighbour backward mapping."""
from __future__ import annotations

import math

import numpy as np

from ..utils.pixels import check_rgba

Array = np.ndarray

DEFAULT_STRENGTH = math.pi / 2


def swirl(arr: Array, strength: float = DEFAULT_STRENGTH) -> Array:
    """Twist the image around its center.

    For every output pixel the offset from the center is rotated by
    ``strength * sin(d / max(W, H) * pi)``, where ``d`` is the distance to
    the center, and the source pixel at the truncated rotated position is
    copied. Positions outside the image yield transparent black.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.
    strength : float
        Peak rotation in radians.

    Returns
    -------
    np.ndarray
        Swirled image of the same shape.
    """
    check_rgba(arr)
    H, W, _ = arr.shape
    if H == 0 or W == 0:
        return arr.copy()
    cx = W / 2.0
    cy = H / 2.0

    ys, xs = np.mgrid[0:H, 0:W].astype(np.float64)
    dx = xs - cx
    dy = ys - cy
    distance = np.sqrt(dx * dx + dy * dy)
    angle = strength * np.sin(distance / max(W, H) * math.pi)
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)

    # astype truncates toward zero, so -0.5 maps to column 0
    src_x = (cos_a * dx - sin_a * dy + cx).astype(np.int64)
    src_y = (sin_a * dx + cos_a * dy + cy).astype(np.int64)
    valid = (src_x >= 0) & (src_x < W) & (src_y >= 0) & (src_y < H)

    out = np.zeros_like(arr)
    out[valid] = arr[src_y[valid], src_x[valid]]
    return out
