# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for conversions between non-RGB models."""

import numpy as np
import pytest

from tinct.errors import FormatError
from tinct.schema import CMYKColor, HSLColor, HSVColor, HWBColor, RGBColor
from tinct.convert.hsl import rgb_to_hsl
from tinct.convert.hsv import rgb_to_hsv
from tinct.convert.hwb import hsv_to_hwb, hwb_to_hsv, rgb_to_hwb
from tinct.convert.cross import (
    cmyk_to_hex,
    cmyk_to_hsl,
    cmyk_to_hsv,
    cmyk_to_hwb,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_hsv,
    hex_to_hwb,
    hsl_to_cmyk,
    hsl_to_hex,
    hsl_to_hsv,
    hsl_to_hwb,
    hsv_to_cmyk,
    hsv_to_hex,
    hsv_to_hsl,
    hwb_to_cmyk,
    hwb_to_hex,
    hwb_to_hsl,
)


def _random_rgb(n=100, seed=7):
    return [RGBColor(*row) for row in np.random.RandomState(seed).random((n, 3))]


class TestHslHsv:

    def test_pure_red(self):
        assert hsl_to_hsv(HSLColor(0, 1, 0.5)) == HSVColor(h=0, s=1.0, v=1.0)
        assert hsv_to_hsl(HSVColor(0, 1, 1)) == HSLColor(h=0, s=1.0, l=0.5)

    def test_black_has_no_saturation(self):
        assert hsl_to_hsv(HSLColor(0.3, 0.5, 0.0)) == HSVColor(h=0.3, s=0, v=0.0)

    def test_white_has_no_saturation(self):
        assert hsv_to_hsl(HSVColor(0.2, 0.0, 1.0)) == HSLColor(h=0.2, s=0, l=1.0)

    def test_black_from_hsv(self):
        assert hsv_to_hsl(HSVColor(0.6, 0.4, 0.0)) == HSLColor(h=0.6, s=0, l=0.0)

    def test_hue_carried_through(self):
        assert hsl_to_hsv(HSLColor(0.42, 0.3, 0.6)).h == 0.42
        assert hsv_to_hsl(HSVColor(0.42, 0.3, 0.6)).h == 0.42

    def test_matches_rgb_path(self):
        """Direct formulas agree with composing through RGB."""
        for rgb in _random_rgb():
            direct = hsl_to_hsv(rgb_to_hsl(rgb))
            np.testing.assert_allclose(direct.as_tuple(), rgb_to_hsv(rgb).as_tuple(), atol=1e-9)

    def test_roundtrip(self):
        for rgb in _random_rgb():
            hsl = rgb_to_hsl(rgb)
            recovered = hsv_to_hsl(hsl_to_hsv(hsl))
            np.testing.assert_allclose(recovered.as_tuple(), hsl.as_tuple(), atol=1e-9)


class TestHsvHwb:

    def test_hsv_to_hwb(self):
        hwb = hsv_to_hwb(HSVColor(h=0.1, s=0.5, v=0.8))
        assert hwb.h == 0.1
        assert hwb.w == pytest.approx(0.4)
        assert hwb.b == pytest.approx(0.2)

    def test_hwb_to_hsv(self):
        hsv = hwb_to_hsv(HWBColor(h=0.1, w=0.4, b=0.2))
        assert hsv.h == 0.1
        assert hsv.s == pytest.approx(0.5)
        assert hsv.v == pytest.approx(0.8)

    def test_full_blackness_falls_back(self):
        """Blackness 1 has no value to divide by; saturation becomes 0."""
        assert hwb_to_hsv(HWBColor(h=0.4, w=0.2, b=1.0)) == HSVColor(h=0.4, s=0, v=0)

    def test_matches_rgb_path(self):
        for rgb in _random_rgb():
            direct = hsv_to_hwb(rgb_to_hsv(rgb))
            np.testing.assert_allclose(direct.as_tuple(), rgb_to_hwb(rgb).as_tuple(), atol=1e-9)

    def test_roundtrip(self):
        for rgb in _random_rgb():
            hsv = rgb_to_hsv(rgb)
            recovered = hwb_to_hsv(hsv_to_hwb(hsv))
            np.testing.assert_allclose(recovered.as_tuple(), hsv.as_tuple(), atol=1e-9)


class TestHslHwb:

    def test_pure_hue(self):
        assert hsl_to_hwb(HSLColor(0.25, 1, 0.5)) == HWBColor(h=0.25, w=0, b=0)

    def test_hue_carried_through(self):
        """Hue is copied from the source even for achromatic colors."""
        assert hsl_to_hwb(HSLColor(0.8, 0.0, 0.5)).h == 0.8
        assert hwb_to_hsl(HWBColor(0.8, 0.5, 0.5)).h == 0.8

    def test_roundtrip(self):
        for rgb in _random_rgb():
            hsl = rgb_to_hsl(rgb)
            recovered = hwb_to_hsl(hsl_to_hwb(hsl))
            np.testing.assert_allclose(recovered.as_tuple(), hsl.as_tuple(), atol=1e-9)


class TestHexCompositions:

    def test_hex_to_hsl(self):
        assert hex_to_hsl("#ff0000") == HSLColor(h=0.0, s=1.0, l=0.5)

    def test_hex_to_hsv(self):
        assert hex_to_hsv("#00FFFF").h == pytest.approx(0.5)

    def test_hex_to_hwb(self):
        assert hex_to_hwb("#ffffff") == HWBColor(h=0, w=1.0, b=0.0)

    def test_hex_to_cmyk(self):
        assert hex_to_cmyk("#000000") == CMYKColor(0, 0, 0, 1)

    @pytest.mark.parametrize("fn", [hex_to_hsl, hex_to_hsv, hex_to_hwb, hex_to_cmyk])
    def test_invalid_hex_raises(self, fn):
        with pytest.raises(FormatError):
            fn("#12345")

    @pytest.mark.parametrize("to_model, from_model", [
        (hex_to_hsl, hsl_to_hex),
        (hex_to_hsv, hsv_to_hex),
        (hex_to_hwb, hwb_to_hex),
        (hex_to_cmyk, cmyk_to_hex),
    ])
    @pytest.mark.parametrize("text", ["#3941c8", "#ff0000", "#808080", "#000000", "#ffffff", "#0a7f33"])
    def test_hex_roundtrip(self, to_model, from_model, text):
        assert from_model(to_model(text)) == text


class TestCmykCompositions:

    def test_hsl_to_cmyk(self):
        cmyk = hsl_to_cmyk(HSLColor(0, 1, 0.5))
        np.testing.assert_allclose(cmyk.as_tuple(), (0, 1, 1, 0), atol=1e-12)

    def test_hsv_to_cmyk(self):
        assert hsv_to_cmyk(HSVColor(0.5, 1, 1)) == CMYKColor(1, 0, 0, 0)

    def test_hwb_to_cmyk(self):
        assert hwb_to_cmyk(HWBColor(0, 0, 1)) == CMYKColor(0, 0, 0, 1)

    @pytest.mark.parametrize("from_rgb, to_cmyk, from_cmyk", [
        (rgb_to_hsl, hsl_to_cmyk, cmyk_to_hsl),
        (rgb_to_hsv, hsv_to_cmyk, cmyk_to_hsv),
        (rgb_to_hwb, hwb_to_cmyk, cmyk_to_hwb),
    ])
    def test_roundtrip_through_cmyk(self, from_rgb, to_cmyk, from_cmyk):
        for rgb in _random_rgb(n=30):
            source = from_rgb(rgb)
            recovered = from_cmyk(to_cmyk(source))
            np.testing.assert_allclose(recovered.as_tuple(), source.as_tuple(), atol=1e-9)
