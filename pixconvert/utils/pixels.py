"""Pixel buffer helpers.

Buffers are NumPy ``uint8`` arrays of shape (H, W, 4) in RGBA order, which
is how Pillow hands out RGBA images. The packed form follows the classic
32-bit ARGB layout ``A<<24 | R<<16 | G<<8 | B``.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray

# Channel indices inside an RGBA buffer
R, G, B, A = 0, 1, 2, 3


def check_rgba(arr: Array) -> None:
    """Raise if ``arr`` is not an RGBA ``uint8`` buffer."""
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into one 32-bit ARGB integer."""
    for name, value in (("a", a), ("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"channel {name} out of range: {value}")
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(value: int) -> tuple[int, int, int, int]:
    """Split a 32-bit ARGB integer into ``(a, r, g, b)``."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"packed value out of range: {value}")
    return (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def to_packed(arr: Array) -> Array:
    """Return the (H, W) ``uint32`` ARGB view of an RGBA buffer."""
    check_rgba(arr)
    px = arr.astype(np.uint32)
    return (px[..., A] << 24) | (px[..., R] << 16) | (px[..., G] << 8) | px[..., B]


def from_packed(packed: Array) -> Array:
    """Expand a 2D array of packed ARGB values into an RGBA buffer."""
    packed = np.asarray(packed)
    if packed.ndim != 2:
        raise ValueError("packed must have shape (H, W)")
    p = packed.astype(np.uint32)
    out = np.empty(p.shape + (4,), dtype=np.uint8)
    out[..., A] = (p >> 24) & 0xFF
    out[..., R] = (p >> 16) & 0xFF
    out[..., G] = (p >> 8) & 0xFF
    out[..., B] = p & 0xFF
    return out


def fill_border(out: Array, src: Array, width: int, policy: str) -> None:
    """Fill the outer ring of ``out`` that a neighbourhood kernel skipped.

    ``"transparent"`` leaves the ring as allocated (zeros); ``"copy"``
    takes the ring from ``src``. Both arrays must share a shape.
    """
    if policy == "transparent":
        return
    if policy != "copy":
        raise ValueError(f"Unknown border policy: {policy}")
    H, W = out.shape[:2]
    w = min(width, H, W)
    out[:w] = src[:w]
    out[H - w:] = src[H - w:]
    out[:, :w] = src[:, :w]
    out[:, W - w:] = src[:, W - w:]
