"""Box blur over a square neighbourhood.

Only pixels whose whole window lies inside the image are averaged. The ring
of width ``radius`` around the edge is filled by the border policy instead
(see :func:`pixconvert.utils.pixels.fill_border`).
"""
from __future__ import annotations

import numpy as np

from ..utils.pixels import check_rgba, fill_border

Array = np.ndarray


def box_blur(arr: Array, radius: int = 1, border: str = "transparent") -> Array:
    """Apply a (2*radius+1)^2 box blur to every channel including alpha.

    Parameters
    ----------
    arr : np.ndarray
        RGBA image (H, W, 4), dtype=uint8.
    radius : int
        Window radius (>=1). The default gives the 3x3 window.
    border : str
        ``"transparent"`` or ``"copy"``.

    Returns
    -------
    np.ndarray
        Blurred image of the same shape.
    """
    check_rgba(arr)
    if radius < 1:
        raise ValueError("radius must be >= 1")

    H, W, _ = arr.shape
    out = np.zeros_like(arr)
    size = 2 * radius + 1
    if H >= size and W >= size:
        src = arr.astype(np.uint32)
        acc = np.zeros((H - 2 * radius, W - 2 * radius, 4), dtype=np.uint32)
        # Sum the window as shifted views of the source
        for dy in range(size):
            for dx in range(size):
                acc += src[dy:dy + H - 2 * radius, dx:dx + W - 2 * radius]
        out[radius:H - radius, radius:W - radius] = (acc // (size * size)).astype(np.uint8)

    fill_border(out, arr, radius, border)
    return out
