"""Tunable constants shared by the filters.

Defaults reproduce the fixed constants of the classic converters, so a
default-constructed :class:`FilterConfig` never changes observable output.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

BorderPolicy = Literal["transparent", "copy"]
Intensity = Literal["blue", "luma"]

BORDER_POLICIES = ("transparent", "copy")
INTENSITIES = ("blue", "luma")


@dataclass(frozen=True)
class FilterConfig:
    """Parameters for the eight filters.

    Attributes
    ----------
    block_size : int
        Pixelate block edge length in pixels.
    swirl_strength : float
        Peak swirl rotation in radians.
    blur_radius : int
        Box blur radius; 1 gives the 3x3 window.
    edge_threshold : int
        Cartoon edge intensity above which a pixel turns black.
    quantize_step : int
        Cartoon colour quantization step.
    border : {"transparent", "copy"}
        How blur and edge detection fill the ring they do not compute.
    intensity : {"blue", "luma"}
        Intensity source for Sobel edge detection.
    """

    block_size: int = 10
    swirl_strength: float = math.pi / 2
    blur_radius: int = 1
    edge_threshold: int = 50
    quantize_step: int = 64
    border: BorderPolicy = "transparent"
    intensity: Intensity = "blue"

    def __post_init__(self) -> None:
        for name in ("block_size", "blur_radius", "edge_threshold", "quantize_step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {value!r}")
        if isinstance(self.swirl_strength, bool) or not isinstance(self.swirl_strength, (int, float)):
            raise TypeError(f"swirl_strength must be a number, got {self.swirl_strength!r}")
        if self.block_size < 1:
            raise ValueError("block_size must be >= 1")
        if self.blur_radius < 1:
            raise ValueError("blur_radius must be >= 1")
        if not 1 <= self.quantize_step <= 256:
            raise ValueError("quantize_step must be in 1..256")
        if self.edge_threshold < 0:
            raise ValueError("edge_threshold must be >= 0")
        if not math.isfinite(self.swirl_strength):
            raise ValueError("swirl_strength must be finite")
        if self.border not in BORDER_POLICIES:
            raise ValueError(f"Unknown border policy: {self.border}")
        if self.intensity not in INTENSITIES:
            raise ValueError(f"Unknown intensity source: {self.intensity}")
