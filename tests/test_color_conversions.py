# tests/test_color_conversions.py
"""Color-space conversions: reference values and finiteness at the gamut corners."""

from __future__ import annotations

import math

import pytest

from color_palette_resolver.resolution.color import (
    SPACES,
    convert,
    lab_to_din99,
    lab_to_lch,
    rgb_to_din99,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_oklab,
    rgb_to_xyz,
    srgb_to_linear,
)


@pytest.mark.parametrize("space", sorted(SPACES))
@pytest.mark.parametrize("rgb", [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
def test_black_and_white_are_finite_everywhere(space, rgb):
    out = convert(rgb, space)
    assert len(out) == 3
    assert all(math.isfinite(v) for v in out)


def test_srgb_transfer():
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(0.04) == pytest.approx(0.04 / 12.92)
    assert srgb_to_linear(1.0) == pytest.approx(1.0)
    assert srgb_to_linear(0.5) == pytest.approx(0.21404, abs=1e-5)


def test_xyz_of_white_is_matrix_row_sum():
    assert rgb_to_xyz((1, 1, 1)) == pytest.approx((0.9505, 1.0, 1.0890), abs=1e-9)


def test_lab_reference_values():
    assert rgb_to_lab((0, 0, 0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert rgb_to_lab((1, 1, 1)) == pytest.approx((100.0, 0.0, 0.0), abs=0.05)
    L, a, b = rgb_to_lab((1, 0, 0))
    assert L == pytest.approx(53.24, abs=0.1)
    assert a == pytest.approx(80.09, abs=0.2)
    assert b == pytest.approx(67.20, abs=0.2)


def test_lch_hue_is_degrees_and_zero_when_achromatic():
    assert lab_to_lch((50, 0, 0)) == (50, 0.0, 0.0)
    assert lab_to_lch((50, 0, 10)) == pytest.approx((50, 10, 90))
    assert lab_to_lch((50, 0, -10))[2] == pytest.approx(270)


def test_oklab_of_white():
    assert rgb_to_oklab((1, 1, 1)) == pytest.approx((1.0, 0.0, 0.0), abs=1e-3)


def test_din99_black_and_neutral_axis():
    assert rgb_to_din99((0, 0, 0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    L99, a99, b99 = lab_to_din99((50, 0, 0))
    assert L99 == pytest.approx(105.51 * math.log(1.79))
    assert (a99, b99) == (0.0, 0.0)


@pytest.mark.parametrize(
    "rgb, hsv",
    [
        ((1, 0, 0), (0, 1, 1)),
        ((0, 1, 0), (120, 1, 1)),
        ((0, 0, 1), (240, 1, 1)),
        ((1, 0, 1), (300, 1, 1)),
        ((0.5, 0.5, 0.5), (0, 0, 0.21404)),
        ((0.5, 0.25, 0), (14.26, 1, 0.21404)),
        ((0, 0, 0), (0, 0, 0)),
    ],
)
def test_hsv_of_linearized_channels(rgb, hsv):
    assert rgb_to_hsv(rgb) == pytest.approx(hsv, abs=5e-3)


def test_convert_is_case_insensitive():
    assert convert((1, 0, 0), "lab") == rgb_to_lab((1, 0, 0))
    assert convert((0.2, 0.4, 0.6), "rgb") == (0.2, 0.4, 0.6)
    with pytest.raises(KeyError):
        convert((0, 0, 0), "CMYK")
