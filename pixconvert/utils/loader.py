"""Image loading and saving utilities using Pillow, with NumPy arrays.

All processing happens on RGBA NumPy arrays. These helpers only convert
between Pillow images and ``uint8`` arrays for IO, and translate IO failures
into :class:`~pixconvert.errors.DecodeError` / :class:`~pixconvert.errors.EncodeError`.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError, EncodeError
from .pixels import check_rgba

logger = logging.getLogger(__name__)

Array = np.ndarray

# Output is always normalized to one lossless format
OUTPUT_FORMAT = "PNG"


def _umask() -> int:
    # NamedTemporaryFile creates 0600 files; give the output the usual mode
    mask = os.umask(0)
    os.umask(mask)
    return mask


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGBA NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 4), dtype=uint8, in RGBA order.

    Raises
    ------
    DecodeError
        If the file is missing, unreadable, or not an image.
    """
    p = Path(path)
    try:
        with Image.open(p) as im:
            im = im.convert("RGBA")
            arr = np.array(im, dtype=np.uint8)
    except FileNotFoundError as exc:
        raise DecodeError(f"Input file not found: {p}") from exc
    except UnidentifiedImageError as exc:
        raise DecodeError(f"Not a recognized image: {p}") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"Image too large to decode safely: {p}") from exc
    except (OSError, ValueError) as exc:
        raise DecodeError(f"Could not read image {p}: {exc}") from exc
    logger.debug("Loaded %s (%dx%d)", p, arr.shape[1], arr.shape[0])
    return arr


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGBA NumPy array (uint8) to ``path`` as PNG.

    The PNG is written to a temporary sibling first and moved into place,
    so the output path never holds a partially written file.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 4), dtype=uint8.
    path : str | Path
        Output file path. The format is PNG regardless of the extension.

    Raises
    ------
    EncodeError
        If the file cannot be written.
    """
    check_rgba(arr)

    p = Path(path)
    tmp: Optional[Path] = None
    im = Image.fromarray(np.ascontiguousarray(arr))
    try:
        # Unique name so neither the input nor an unrelated sibling is clobbered
        with tempfile.NamedTemporaryFile(
            dir=p.parent, prefix=p.name + ".", suffix=".tmp", delete=False
        ) as handle:
            tmp = Path(handle.name)
            im.save(handle, format=OUTPUT_FORMAT)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp, 0o666 & ~_umask())
        tmp.replace(p)
    except OSError as exc:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise EncodeError(f"Could not write image {p}: {exc}") from exc
    logger.debug("Wrote %s (%dx%d)", p, arr.shape[1], arr.shape[0])
