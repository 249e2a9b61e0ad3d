"""Exceptions raised at the image I/O boundary."""
from __future__ import annotations


class ConvertError(Exception):
    """Base class for failures of a single conversion."""


class DecodeError(ConvertError):
    """The input is missing, unreadable, or not a raster image."""


class EncodeError(ConvertError):
    """The output could not be written."""
