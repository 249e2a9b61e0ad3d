"""Sobel edge detection."""
from __future__ import annotations

import numpy as np

from ..utils.pixels import A, B, G, R, check_rgba, fill_border

Array = np.ndarray

SOBEL_X = np.array(
    [
        [-1, 0, 1],
        [-2, 0, 2],
        [-1, 0, 1],
    ],
    dtype=np.int32,
)
SOBEL_Y = np.array(
    [
        [-1, -2, -1],
        [0, 0, 0],
        [1, 2, 1],
    ],
    dtype=np.int32,
)
SOBEL_X.setflags(write=False)
SOBEL_Y.setflags(write=False)


def intensity_of(arr: Array, source: str = "blue") -> Array:
    """Return the (H, W) int32 intensity plane the gradient is taken on.

    ``"blue"`` uses the blue channel alone. ``"luma"`` uses the integer
    BT.601 weighting ``(299 R + 587 G + 114 B) // 1000``.
    """
    if source == "blue":
        return arr[..., B].astype(np.int32)
    if source == "luma":
        px = arr.astype(np.int32)
        return (299 * px[..., R] + 587 * px[..., G] + 114 * px[..., B]) // 1000
    raise ValueError(f"Unknown intensity source: {source}")


def sobel_edges(arr: Array, intensity: str = "blue", border: str = "transparent") -> Array:
    """Compute the Sobel gradient magnitude as an opaque gray image.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.
    intensity : str
        ``"blue"`` or ``"luma"``; see :func:`intensity_of`.
    border : str
        ``"transparent"`` or ``"copy"`` for the one-pixel outer ring.

    Returns
    -------
    np.ndarray
        RGBA image of the same shape; interior pixels hold
        ``min(255, floor(sqrt(gx^2 + gy^2)))`` in R, G and B with alpha 255.
    """
    check_rgba(arr)
    H, W, _ = arr.shape
    out = np.zeros_like(arr)
    if H >= 3 and W >= 3:
        plane = intensity_of(arr, intensity)
        gx = np.zeros((H - 2, W - 2), dtype=np.int32)
        gy = np.zeros((H - 2, W - 2), dtype=np.int32)
        for i in range(3):
            for j in range(3):
                window = plane[i:i + H - 2, j:j + W - 2]
                gx += SOBEL_X[i, j] * window
                gy += SOBEL_Y[i, j] * window
        magnitude = np.sqrt(gx.astype(np.float64) ** 2 + gy.astype(np.float64) ** 2)
        magnitude = np.minimum(np.floor(magnitude), 255).astype(np.uint8)
        inner = out[1:H - 1, 1:W - 1]
        inner[..., :3] = magnitude[..., None]
        inner[..., A] = 255

    fill_border(out, arr, 1, border)
    return out
