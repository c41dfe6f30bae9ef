# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
RGB ↔ HSL conversion.

Hue is a unit float (multiply by 360 for degrees). Achromatic colors
(max == min) have no defined hue and report h = 0, s = 0.
"""

from __future__ import annotations

from tinct.schema import HSLColor, RGBColor
from tinct.convert.numbers import safe_divide


def chromatic_hue(r: float, g: float, b: float, maximum: float, delta: float) -> float:
    """
    Hue of a chromatic color from its channel spread.

    Shared by HSL and HSV. Ties at the maximum resolve red, then green,
    then blue.
    """
    delta_r = (((maximum - r) / 6) + (delta / 2)) / delta
    delta_g = (((maximum - g) / 6) + (delta / 2)) / delta
    delta_b = (((maximum - b) / 6) + (delta / 2)) / delta

    h = 0.0
    if r == maximum:
        h = delta_b - delta_g
    elif g == maximum:
        h = (1 / 3) + delta_r - delta_b
    elif b == maximum:
        h = (2 / 3) + delta_g - delta_r

    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    return h


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """
    Convert RGB to HSL.

    Args:
        rgb: Color with channels in [0, 1]

    Returns:
        HSLColor; grays return HSLColor(0, 0, l)
    """
    r, g, b = rgb.r, rgb.g, rgb.b
    minimum = min(r, g, b)
    maximum = max(r, g, b)
    delta = maximum - minimum

    l = (maximum + minimum) / 2

    if delta == 0:
        return HSLColor(h=0.0, s=0.0, l=l)

    if l < 0.5:
        s = safe_divide(delta, maximum + minimum)
    else:
        s = safe_divide(delta, 2 - maximum - minimum)

    return HSLColor(h=chromatic_hue(r, g, b, maximum, delta), s=s, l=l)


def _hue_to_channel(m1: float, m2: float, h: float) -> float:
    """Map a hue offset onto the [m1, m2] channel range."""
    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    if h * 6 < 1:
        return m1 + (m2 - m1) * 6 * h
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """
    Convert HSL to RGB.

    Returns:
        RGBColor; channels stay in [0, 1] for in-range input
    """
    if hsl.l <= 0.5:
        m2 = hsl.l * (1 + hsl.s)
    else:
        m2 = hsl.l + hsl.s - hsl.s * hsl.l
    m1 = 2 * hsl.l - m2

    return RGBColor(
        r=_hue_to_channel(m1, m2, hsl.h + 1 / 3),
        g=_hue_to_channel(m1, m2, hsl.h),
        b=_hue_to_channel(m1, m2, hsl.h - 1 / 3),
    )
