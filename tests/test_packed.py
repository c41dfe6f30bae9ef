# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for the packed 24-bit integer codec."""

import numpy as np
import pytest

from tinct.schema import CMYKColor, HSLColor, HSVColor, HWBColor, RGBColor
from tinct.convert.packed import (
    cmyk_to_color,
    color_to_cmyk,
    color_to_hex,
    color_to_hsl,
    color_to_hsv,
    color_to_hwb,
    color_to_rgb,
    color_to_rgb_batch,
    hex_to_color,
    hsl_to_color,
    hsv_to_color,
    hwb_to_color,
    rgb_to_color,
    rgb_to_color_batch,
)


class TestRgbPacking:

    def test_red(self):
        assert rgb_to_color(RGBColor(1.0, 0.0, 0.0)) == 0xFF0000

    def test_byte_order(self):
        assert rgb_to_color(RGBColor(0x39 / 255, 0x41 / 255, 0xC8 / 255)) == 0x3941C8

    def test_channels_rounded(self):
        assert rgb_to_color(RGBColor(0.5, 0.5, 0.5)) == 0x808080

    def test_unpack_blue(self):
        assert color_to_rgb(0x0000FF) == RGBColor(0.0, 0.0, 1.0)

    def test_unpack_masks_high_bits(self):
        """An alpha byte above bit 23 is ignored."""
        assert color_to_rgb(0x80FF0000) == RGBColor(1.0, 0.0, 0.0)

    def test_unpack_rounds_input(self):
        assert color_to_rgb(0xFF0000 - 0.4) == RGBColor(1.0, 0.0, 0.0)

    def test_roundtrip(self):
        for value in (0x000000, 0xFFFFFF, 0x3941C8, 0x0A7F33, 0x123456):
            assert rgb_to_color(color_to_rgb(value)) == value


class TestBatch:

    def test_batch_matches_scalar(self):
        rgb = np.random.RandomState(42).random((50, 3))
        packed = rgb_to_color_batch(rgb)
        expected = [rgb_to_color(RGBColor(*row)) for row in rgb]
        np.testing.assert_array_equal(packed, expected)

    def test_batch_shape(self):
        assert rgb_to_color_batch(np.zeros((2, 4, 3))).shape == (2, 4)

    def test_unpack_batch(self):
        rgb = color_to_rgb_batch(np.array([0xFF0000, 0x00FF00, 0x0000FF]))
        np.testing.assert_allclose(rgb, np.eye(3))

    def test_batch_roundtrip(self):
        values = np.array([0x000000, 0xFFFFFF, 0x3941C8, 0x0A7F33])
        np.testing.assert_array_equal(rgb_to_color_batch(color_to_rgb_batch(values)), values)


class TestModelPacking:

    def test_hex(self):
        assert hex_to_color("#3941C8") == 0x3941C8
        assert color_to_hex(0x3941C8) == "#3941c8"

    def test_hsl(self):
        assert hsl_to_color(HSLColor(0, 1, 0.5)) == 0xFF0000
        assert color_to_hsl(0x808080) == HSLColor(h=0, s=0, l=128 / 255)

    def test_hsv(self):
        assert hsv_to_color(HSVColor(0.5, 1, 1)) == 0x00FFFF
        assert color_to_hsv(0x0000FF).h == pytest.approx(2 / 3)

    def test_cmyk(self):
        assert cmyk_to_color(CMYKColor(0, 0, 0, 0)) == 0xFFFFFF
        assert color_to_cmyk(0x000000) == CMYKColor(0, 0, 0, 1)

    def test_hwb(self):
        assert hwb_to_color(HWBColor(0, 0, 0)) == 0xFF0000
        assert color_to_hwb(0xFFFFFF) == HWBColor(h=0, w=1.0, b=0.0)
