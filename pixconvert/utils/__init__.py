"""Utility functions for pixconvert.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- pixels: RGBA buffer validation, ARGB packing and border filling.
"""
from .loader import load_image, save_image
from .pixels import check_rgba, fill_border, from_packed, pack_argb, to_packed, unpack_argb

__all__ = [
    "load_image",
    "save_image",
    "check_rgba",
    "fill_border",
    "pack_argb",
    "unpack_argb",
    "to_packed",
    "from_packed",
]
