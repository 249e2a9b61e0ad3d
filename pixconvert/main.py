"""Command-line entry point for pixconvert.

This tool loads an image, applies one filter, and saves the result as PNG.
All processing occurs on NumPy arrays; Pillow is used only for loading and
saving.

Usage example:
    python -m pixconvert.main -i input.jpg -o output.png --filter swirl --swirl-strength 0.785
"""
from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Optional

from .config import BORDER_POLICIES, INTENSITIES, FilterConfig
from .converters import FILTERS, Converter
from .errors import ConvertError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    defaults = FilterConfig()
    parser = argparse.ArgumentParser(
        prog="pixconvert",
        description=(
            "Apply one of several classic pixel filters to an image. "
            "The result is always written as PNG."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output PNG file")
    parser.add_argument(
        "-f",
        "--filter",
        required=True,
        choices=FILTERS,
        help="Filter to apply: " + " | ".join(FILTERS),
    )

    parser.add_argument(
        "--block-size",
        type=int,
        default=defaults.block_size,
        help="Pixelate block edge length in pixels (>=1).",
    )
    parser.add_argument(
        "--swirl-strength",
        type=float,
        default=defaults.swirl_strength,
        help=f"Peak swirl rotation in radians. Default: pi/2 ({math.pi / 2:.4f}).",
    )
    parser.add_argument(
        "--blur-radius",
        type=int,
        default=defaults.blur_radius,
        help="Box blur radius (>=1). Default 1 is a 3x3 window.",
    )
    parser.add_argument(
        "--edge-threshold",
        type=int,
        default=defaults.edge_threshold,
        help="Cartoon edge intensity above which pixels turn black.",
    )
    parser.add_argument(
        "--quantize-step",
        type=int,
        default=defaults.quantize_step,
        help="Cartoon colour quantization step (1..256).",
    )
    parser.add_argument(
        "--border",
        default=defaults.border,
        choices=BORDER_POLICIES,
        help=(
            "How blur and edge fill the outer ring they do not compute: "
            "transparent | copy."
        ),
    )
    parser.add_argument(
        "--intensity",
        default=defaults.intensity,
        choices=INTENSITIES,
        help="Edge detection intensity source: blue | luma.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def build_config(ns: argparse.Namespace) -> FilterConfig:
    """Build a validated :class:`FilterConfig`; raises ValueError on bad values."""
    return FilterConfig(
        block_size=ns.block_size,
        swirl_strength=ns.swirl_strength,
        blur_radius=ns.blur_radius,
        edge_threshold=ns.edge_threshold,
        quantize_step=ns.quantize_step,
        border=ns.border,
        intensity=ns.intensity,
    )


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if Path(ns.input).resolve() == Path(ns.output).resolve():
        raise ValueError("--output must differ from --input")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_args(args)
        config = build_config(args)
    except ValueError as e:
        logger.error("Argument error: %s", e)
        return 2

    try:
        Converter(args.filter, config).convert(args.input, args.output)
    except ConvertError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
