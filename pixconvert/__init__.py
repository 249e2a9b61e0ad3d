"""pixconvert: classic pixel filters over RGBA NumPy arrays."""
from __future__ import annotations

from .config import FilterConfig
from .converters import FILTERS, Converter, apply_filter, convert
from .errors import ConvertError, DecodeError, EncodeError
from .utils.loader import load_image, save_image
from .utils.pixels import from_packed, pack_argb, to_packed, unpack_argb

__all__ = [
    "FILTERS",
    "Converter",
    "FilterConfig",
    "apply_filter",
    "convert",
    "ConvertError",
    "DecodeError",
    "EncodeError",
    "load_image",
    "save_image",
    "pack_argb",
    "unpack_argb",
    "to_packed",
    "from_packed",
]
