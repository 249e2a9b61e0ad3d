"""Cartoon effect: posterized colours with dark diagonal edges."""
from __future__ import annotations

import numpy as np

from ..utils.pixels import A, check_rgba

Array = np.ndarray


def quantize(channels: Array, step: int = 64) -> Array:
    """Round channel values down to a multiple of ``step``."""
    return (channels // step) * step


def cartoon(arr: Array, step: int = 64, threshold: int = 50) -> Array:
    """Posterize R, G, B and blacken pixels on strong diagonal edges.

    Each quantized pixel is compared against the unquantized source pixel
    up and to the left; pixels in the first row or column are compared
    against their own source value. When the largest per-channel absolute
    difference exceeds ``threshold`` the pixel becomes black. Alpha is
    copied from the source.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.
    step : int
        Quantization step (1..256).
    threshold : int
        Edge intensity above which a pixel is drawn black.

    Returns
    -------
    np.ndarray
        New RGBA image of the same shape.
    """
    check_rgba(arr)
    if not 1 <= step <= 256:
        raise ValueError("step must be in 1..256")

    rgb = arr[..., :3].astype(np.int16)
    q = quantize(rgb, step)

    neighbour = rgb.copy()
    neighbour[1:, 1:] = rgb[:-1, :-1]
    edge = np.abs(neighbour - q).max(axis=2)
    q[edge > threshold] = 0

    out = np.empty_like(arr)
    out[..., :3] = q.astype(np.uint8)
    out[..., A] = arr[..., A]
    return out
