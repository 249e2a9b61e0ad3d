"""
Tests for filter dispatch, configuration and the command-line entry point.
"""

import math

import numpy as np
import pytest
from PIL import Image

from pixconvert import FILTERS, Converter, FilterConfig, apply_filter
from pixconvert.main import main, parse_args
from pixconvert.utils.loader import load_image


class TestApplyFilter:
    """Test name-based dispatch."""

    @pytest.mark.parametrize("name", FILTERS)
    def test_dimensions(self, name, random_image):
        result = apply_filter(random_image, name)
        assert result.dtype == np.uint8
        if name == "rotate":
            assert result.shape == (17, 13, 4)
        else:
            assert result.shape == random_image.shape

    @pytest.mark.parametrize("name", FILTERS)
    def test_input_not_modified(self, name, random_image):
        before = random_image.copy()
        apply_filter(random_image, name)
        np.testing.assert_array_equal(random_image, before)

    def test_case_insensitive(self, random_image):
        np.testing.assert_array_equal(
            apply_filter(random_image, "MIRROR"), apply_filter(random_image, "mirror")
        )

    def test_unknown_filter(self, random_image):
        with pytest.raises(ValueError):
            apply_filter(random_image, "sepia")

    def test_border_from_config(self, random_image):
        result = apply_filter(random_image, "blur", FilterConfig(border="copy"))
        np.testing.assert_array_equal(result[0], random_image[0])


class TestConverter:
    """Test the Converter object."""

    def test_unknown_filter(self):
        with pytest.raises(ValueError):
            Converter("sepia")

    def test_default_config(self):
        assert Converter("swirl").config == FilterConfig()

    def test_transform(self, random_image):
        conv = Converter("grayscale")
        np.testing.assert_array_equal(
            conv.transform(random_image), apply_filter(random_image, "grayscale")
        )


class TestFilterConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        cfg = FilterConfig()
        assert cfg.block_size == 10
        assert cfg.swirl_strength == pytest.approx(math.pi / 2)
        assert cfg.blur_radius == 1
        assert cfg.edge_threshold == 50
        assert cfg.quantize_step == 64
        assert cfg.border == "transparent"
        assert cfg.intensity == "blue"

    @pytest.mark.parametrize("kwargs", [
        {"block_size": 0},
        {"blur_radius": 0},
        {"quantize_step": 0},
        {"quantize_step": 300},
        {"edge_threshold": -1},
        {"swirl_strength": float("nan")},
        {"border": "wrap"},
        {"intensity": "green"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            FilterConfig(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"block_size": 2.5},
        {"blur_radius": 1.5},
        {"edge_threshold": "50"},
        {"quantize_step": True},
        {"swirl_strength": "fast"},
    ])
    def test_wrong_type(self, kwargs):
        with pytest.raises(TypeError):
            FilterConfig(**kwargs)

    def test_int_swirl_strength_accepted(self):
        assert FilterConfig(swirl_strength=1).swirl_strength == 1

    def test_frozen(self):
        cfg = FilterConfig()
        with pytest.raises(AttributeError):
            cfg.block_size = 3


class TestCli:
    """Test the pixconvert command line."""

    def test_parse_defaults(self):
        ns = parse_args(["-i", "a.png", "-o", "b.png", "-f", "blur"])
        assert ns.block_size == 10
        assert ns.border == "transparent"
        assert ns.intensity == "blue"
        assert not ns.verbose

    def test_unknown_filter_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["-i", "a.png", "-o", "b.png", "-f", "sepia"])

    def test_success(self, png_file, tmp_path):
        out = tmp_path / "edges.png"
        code = main(["-i", str(png_file), "-o", str(out), "-f", "edge", "--intensity", "luma"])
        assert code == 0
        assert load_image(out).shape == (13, 17, 4)

    def test_options_reach_filter(self, png_file, tmp_path):
        out = tmp_path / "pix.png"
        code = main(["-i", str(png_file), "-o", str(out), "-f", "pixelate", "--block-size", "50"])
        assert code == 0
        result = load_image(out)
        assert (result == result[0, 0]).all()

    def test_missing_input(self, tmp_path):
        code = main(["-i", str(tmp_path / "x.png"), "-o", str(tmp_path / "y.png"), "-f", "mirror"])
        assert code == 2

    def test_bad_option_value(self, png_file, tmp_path):
        code = main([
            "-i", str(png_file), "-o", str(tmp_path / "y.png"), "-f", "pixelate",
            "--block-size", "0",
        ])
        assert code == 2

    def test_same_input_and_output(self, png_file):
        code = main(["-i", str(png_file), "-o", str(png_file), "-f", "mirror"])
        assert code == 2

    def test_input_named_like_temp_file(self, png_file, tmp_path):
        src = tmp_path / "out.png.tmp"
        src.write_bytes(png_file.read_bytes())
        before = src.read_bytes()
        out = tmp_path / "out.png"
        assert main(["-i", str(src), "-o", str(out), "-f", "mirror"]) == 0
        assert src.read_bytes() == before
        assert out.exists()

    def test_undecodable_input(self, tmp_path):
        src = tmp_path / "bad.png"
        src.write_bytes(b"\x00\x01\x02")
        out = tmp_path / "out.png"
        code = main(["-i", str(src), "-o", str(out), "-f", "swirl"])
        assert code == 1
        assert not out.exists()

    def test_output_is_png(self, png_file, tmp_path):
        out = tmp_path / "out.bmp"
        assert main(["-i", str(png_file), "-o", str(out), "-f", "cartoon"]) == 0
        with Image.open(out) as im:
            assert im.format == "PNG"
