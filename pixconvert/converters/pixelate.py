"""Pixelation by averaging fixed-size blocks.

Blocks are aligned to the top-left corner; the last block of each row and
column is clipped to the image and averaged over the pixels it actually
covers, so no padding ever leaks into the result.
"""
from __future__ import annotations

import numpy as np

from ..utils.pixels import check_rgba

Array = np.ndarray


def _block_edges(length: int, block_size: int) -> tuple[Array, Array]:
    """Return block start offsets and block lengths along one axis."""
    starts = np.arange(0, length, block_size)
    sizes = np.minimum(block_size, length - starts)
    return starts, sizes


def pixelate(arr: Array, block_size: int = 10) -> Array:
    """Pixelate an RGBA image array with square blocks.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 4), dtype=uint8.
    block_size : int
        Block edge length (>=1).

    Returns
    -------
    np.ndarray
        Pixelated image of the same shape and dtype as the input.
    """
    check_rgba(arr)
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    H, W, _ = arr.shape
    if block_size == 1 or H == 0 or W == 0:
        return arr.copy()

    row_starts, row_sizes = _block_edges(H, block_size)
    col_starts, col_sizes = _block_edges(W, block_size)

    # Per-block channel sums, then floor division by the clipped pixel count
    sums = np.add.reduceat(arr.astype(np.uint64), row_starts, axis=0)
    sums = np.add.reduceat(sums, col_starts, axis=1)
    counts = np.outer(row_sizes, col_sizes).astype(np.uint64)
    small = (sums // counts[..., None]).astype(np.uint8)

    # Expand each block average back over its clipped footprint
    return np.repeat(np.repeat(small, row_sizes, axis=0), col_sizes, axis=1)
