# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""Tests for the ColorAide-backed color type (requires coloraide)."""

import pytest

coloraide = pytest.importorskip("coloraide")

from huemix import ColorLike, ColorSpace, RGB, interpolate
from huemix.adapters import ColorAideColor


def _srgb(r, g, b):
    return ColorAideColor(coloraide.Color("srgb", [r, g, b]))


RED = (1.0, 0.0, 0.0)
BLUE = (0.0, 0.0, 1.0)


class TestColorAideColor:
    """ColorAide wrapper conversions and immutability."""

    def test_protocol(self):
        assert isinstance(_srgb(*RED), ColorLike)

    def test_rgb_roundtrip(self):
        c = ColorAideColor.from_rgb(RGB(0.2, 0.4, 0.6))
        assert c.to_rgb().as_tuple() == pytest.approx((0.2, 0.4, 0.6))

    def test_hsv_of_red(self):
        h, s, v = _srgb(*RED).to_hsv()
        assert h == pytest.approx(0.0, abs=1e-9)
        assert (s, v) == pytest.approx((1.0, 1.0))

    def test_rejects_non_coloraide(self):
        with pytest.raises(TypeError):
            ColorAideColor((1.0, 0.0, 0.0))

    def test_immutable(self):
        c = _srgb(*RED)
        with pytest.raises(AttributeError):
            c._color = None

    def test_color_property_is_a_copy(self):
        c = _srgb(*RED)
        copy = c.color
        copy["red"] = 0.0
        assert c.to_rgb().as_tuple() == pytest.approx(RED)

    def test_wrapping_copies_input(self):
        source = coloraide.Color("srgb", list(RED))
        c = ColorAideColor(source)
        source["red"] = 0.0
        assert c.to_rgb().as_tuple() == pytest.approx(RED)


class TestInterpolateWithColorAide:
    """End-to-end blends with real color conversions."""

    def test_rgb_midpoint(self):
        out = interpolate(_srgb(*RED), _srgb(*BLUE), 0.5, ColorSpace.RGB)
        assert isinstance(out, ColorAideColor)
        assert out.to_rgb().as_tuple() == pytest.approx((0.5, 0.0, 0.5))

    def test_hsv_red_to_blue_wraps_through_magenta(self):
        out = interpolate(_srgb(*RED), _srgb(*BLUE), 0.5, ColorSpace.HSV)
        h, s, v = out.to_hsv()
        assert h == pytest.approx(300.0)
        assert (s, v) == pytest.approx((1.0, 1.0))

    def test_hsv_achromatic_endpoints(self):
        out = interpolate(_srgb(1.0, 1.0, 1.0), _srgb(0.0, 0.0, 0.0), 0.5, ColorSpace.HSV)
        assert out.to_rgb().as_tuple() == pytest.approx((0.5, 0.5, 0.5), abs=1e-9)

    def test_achromatic_hue_is_zero(self):
        white = _srgb(1.0, 1.0, 1.0)
        assert white.to_hsv().as_tuple() == pytest.approx((0.0, 0.0, 1.0))
        assert white.to_hsl().as_tuple() == pytest.approx((0.0, 0.0, 1.0))

    def test_hsv_white_to_blue_keeps_blue_side_hue(self):
        out = interpolate(_srgb(1.0, 1.0, 1.0), _srgb(*BLUE), 0.5, ColorSpace.HSV)
        assert out.to_hsv().as_tuple() == pytest.approx((300.0, 0.5, 1.0))
        assert out.to_rgb().as_tuple() == pytest.approx((1.0, 0.5, 1.0), abs=1e-9)

    def test_hsl_white_to_blue_keeps_blue_side_hue(self):
        out = interpolate(_srgb(1.0, 1.0, 1.0), _srgb(*BLUE), 0.5, ColorSpace.HSL)
        assert out.to_hsl().as_tuple() == pytest.approx((300.0, 0.5, 0.75))
        assert out.to_rgb().as_tuple() == pytest.approx((0.875, 0.625, 0.875), abs=1e-9)

    @pytest.mark.parametrize(
        "space", [ColorSpace.RGB, ColorSpace.HSL, ColorSpace.LAB, ColorSpace.LUV, ColorSpace.NONE]
    )
    def test_boundaries(self, space):
        red, blue = _srgb(*RED), _srgb(*BLUE)
        assert interpolate(red, blue, 0.0, space).to_rgb().as_tuple() == pytest.approx(RED, abs=1e-6)
        assert interpolate(red, blue, 1.0, space).to_rgb().as_tuple() == pytest.approx(BLUE, abs=1e-6)

    def test_default_matches_luv(self):
        red, blue = _srgb(*RED), _srgb(*BLUE)
        a = interpolate(red, blue).to_luv().as_tuple()
        b = interpolate(red, blue, 0.5, ColorSpace.LUV).to_luv().as_tuple()
        assert a == pytest.approx(b)

    def test_lab_midpoint_lightness(self):
        red, blue = _srgb(*RED), _srgb(*BLUE)
        mid = interpolate(red, blue, 0.5, ColorSpace.LAB).to_lab()
        expected = (red.to_lab().l + blue.to_lab().l) / 2
        assert mid.l == pytest.approx(expected)
