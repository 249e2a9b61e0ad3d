"""Image filters and a unified entry-point for applying them.

Exported API
------------
- apply_filter(image_array, name, config=None)
- Converter(name, config=None).transform(arr) / .convert(input, output)
- convert(input_path, output_path, name, config=None)

Supported filters
-----------------
- "grayscale": channel-mean grayscale
- "rotate"   : 90 degree clockwise rotation
- "blur"     : box blur (3x3 by default)
- "cartoon"  : posterize plus dark diagonal edges
- "swirl"    : swirl distortion around the center
- "edge"     : Sobel edge magnitude
- "pixelate" : block averaging (10x10 by default)
- "mirror"   : horizontal flip

Implementation notes
--------------------
All filters operate on RGBA ``uint8`` NumPy arrays of shape (H, W, 4) and
return a new array. They are independent of each other and keep no state;
tunables travel in a :class:`~pixconvert.config.FilterConfig`.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Literal, Optional, Union

import numpy as np

from ..config import FilterConfig
from ..utils.loader import load_image, save_image
from . import blur, cartoon, edge, grayscale, mirror, pixelate, rotate, swirl

logger = logging.getLogger(__name__)

Array = np.ndarray

FilterName = Literal[
    "grayscale", "rotate", "blur", "cartoon", "swirl", "edge", "pixelate", "mirror"
]

FILTERS: tuple[str, ...] = (
    "grayscale",
    "rotate",
    "blur",
    "cartoon",
    "swirl",
    "edge",
    "pixelate",
    "mirror",
)


def apply_filter(
    image_array: Array,
    name: FilterName,
    config: Optional[FilterConfig] = None,
) -> Array:
    """Apply the selected filter to an image array.

    Parameters
    ----------
    image_array : np.ndarray
        RGBA image array of shape (H, W, 4), dtype=uint8.
    name : str
        Filter to apply; one of :data:`FILTERS`.
    config : FilterConfig | None
        Filter parameters. Defaults reproduce the classic constants.

    Returns
    -------
    np.ndarray
        Filtered image array, dtype=uint8. Shape is (W, H, 4) for
        ``"rotate"`` and unchanged otherwise.
    """
    cfg = config if config is not None else FilterConfig()

    m = name.lower()
    if m == "grayscale":
        return grayscale.grayscale(image_array)
    if m == "rotate":
        return rotate.rotate_clockwise(image_array)
    if m == "blur":
        return blur.box_blur(image_array, radius=cfg.blur_radius, border=cfg.border)
    if m == "cartoon":
        return cartoon.cartoon(image_array, step=cfg.quantize_step, threshold=cfg.edge_threshold)
    if m == "swirl":
        return swirl.swirl(image_array, strength=cfg.swirl_strength)
    if m == "edge":
        return edge.sobel_edges(image_array, intensity=cfg.intensity, border=cfg.border)
    if m == "pixelate":
        return pixelate.pixelate(image_array, block_size=cfg.block_size)
    if m == "mirror":
        return mirror.mirror(image_array)

    raise ValueError(f"Unknown filter: {name}")


class Converter:
    """Read an image, apply one filter, write the result as PNG."""

    def __init__(self, name: FilterName, config: Optional[FilterConfig] = None) -> None:
        if name.lower() not in FILTERS:
            raise ValueError(f"Unknown filter: {name}")
        self.name = name.lower()
        self.config = config if config is not None else FilterConfig()

    def __repr__(self) -> str:
        return f"Converter({self.name!r}, {self.config!r})"

    def transform(self, arr: Array) -> Array:
        """Apply this converter's filter to an in-memory image.

        Parameters
        ----------
        arr : np.ndarray
            RGBA image (H, W, 4), dtype=uint8.

        Returns
        -------
        np.ndarray
            Filtered image; see :func:`apply_filter`.
        """
        return apply_filter(arr, self.name, self.config)

    def convert(self, input_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        """Run the filter from ``input_path`` to ``output_path``.

        Raises
        ------
        DecodeError
            If the input cannot be read. Nothing is written in that case.
        EncodeError
            If the output cannot be written.
        """
        img = load_image(input_path)
        logger.info(
            "Applying %s to %s (%dx%d)", self.name, input_path, img.shape[1], img.shape[0]
        )
        start = time.perf_counter()
        result = self.transform(img)
        logger.debug("%s took %.3fs", self.name, time.perf_counter() - start)
        save_image(result, output_path)
        logger.info("Wrote %s", output_path)


def convert(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    name: FilterName,
    config: Optional[FilterConfig] = None,
) -> None:
    """Shortcut for ``Converter(name, config).convert(input_path, output_path)``."""
    Converter(name, config).convert(input_path, output_path)


__all__ = ["FILTERS", "Converter", "apply_filter", "convert"]
