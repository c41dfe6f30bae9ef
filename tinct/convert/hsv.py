# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
RGB ↔ HSV conversion.

Uses the same max/min/delta skeleton and hue construction as HSL.
The backward map picks one of 6 channel permutations by hue sector.
"""

from __future__ import annotations

import math

from tinct.schema import HSVColor, RGBColor
from tinct.convert.hsl import chromatic_hue
from tinct.convert.numbers import safe_divide


def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """
    Convert RGB to HSV.

    Returns:
        HSVColor; grays return HSVColor(0, 0, v)
    """
    r, g, b = rgb.r, rgb.g, rgb.b
    minimum = min(r, g, b)
    maximum = max(r, g, b)
    delta = maximum - minimum

    v = maximum

    if delta == 0:
        return HSVColor(h=0.0, s=0.0, v=v)

    s = safe_divide(delta, maximum)

    return HSVColor(h=chromatic_hue(r, g, b, maximum, delta), s=s, v=v)


def hsv_to_rgb(hsv: HSVColor) -> RGBColor:
    """
    Convert HSV to RGB.

    Hue 1.0 wraps to sector 0. Hues outside [0, 1) land outside sectors
    0-4 and fall through to the last permutation.
    A NaN or infinite hue with nonzero saturation raises ValueError or
    OverflowError when the sector index is computed.
    """
    v, s = hsv.v, hsv.s

    if s == 0:
        return RGBColor(r=v, g=v, b=v)

    h = hsv.h * 6
    if h == 6:
        h = 0

    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    match i:
        case 0:
            r, g, b = v, t, p
        case 1:
            r, g, b = q, v, p
        case 2:
            r, g, b = p, v, t
        case 3:
            r, g, b = p, q, v
        case 4:
            r, g, b = t, p, v
        case _:
            r, g, b = v, p, q

    return RGBColor(r=r, g=g, b=b)
