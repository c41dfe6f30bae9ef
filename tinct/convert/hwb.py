# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
RGB ↔ HWB and HSV ↔ HWB conversion.

HWB is HSV reparameterized: whiteness = (1 - s) * v, blackness = 1 - v.
HSV ↔ HWB is therefore converted directly rather than through RGB.

The backward map mirrors the hue wheel in odd sectors, so the fractional
part of the hue is flipped there before interpolating.
"""

from __future__ import annotations

import math

from tinct.schema import HSVColor, HWBColor, RGBColor
from tinct.convert.numbers import safe_divide


def rgb_to_hwb(rgb: RGBColor) -> HWBColor:
    """
    Convert RGB to HWB.

    Returns:
        HWBColor; grays (including black and white) return h = 0
    """
    red, green, blue = rgb.r, rgb.g, rgb.b
    w = min(red, green, blue)
    v = max(red, green, blue)
    b = 1 - v

    if v == w:
        return HWBColor(h=0.0, w=w, b=b)

    # The channel holding the minimum picks the numerator and the sector
    # offset; ties resolve red, then green, then blue.
    if red == w:
        f, i = green - blue, 3
    elif green == w:
        f, i = blue - red, 5
    else:
        f, i = red - green, 1

    h = (i - safe_divide(f, v - w)) / 6
    return HWBColor(h=h, w=w, b=b)


def hwb_to_rgb(hwb: HWBColor) -> RGBColor:
    """
    Convert HWB to RGB.

    Hue 1.0 wraps to sector 0 (rgb_to_hwb reports pure reds as 1.0).
    Other hues outside [0, 1) select no sector and produce black.
    NaN or infinite hue raises ValueError or OverflowError when the
    sector index is computed.
    """
    h = hwb.h * 6
    if h == 6:
        h = 0
    w = hwb.w
    v = 1 - hwb.b

    i = math.floor(h)
    f = h - i
    if i & 1:
        f = 1 - f

    n = w + f * (v - w)

    match i:
        case 0:
            r, g, b = v, n, w
        case 1:
            r, g, b = n, v, w
        case 2:
            r, g, b = w, v, n
        case 3:
            r, g, b = w, n, v
        case 4:
            r, g, b = n, w, v
        case 5:
            r, g, b = v, w, n
        case _:
            r, g, b = 0.0, 0.0, 0.0

    return RGBColor(r=r, g=g, b=b)


def hsv_to_hwb(hsv: HSVColor) -> HWBColor:
    """Convert HSV to HWB. Hue is carried through unchanged."""
    return HWBColor(
        h=hsv.h,
        w=(1 - hsv.s) * hsv.v,
        b=1 - hsv.v,
    )


def hwb_to_hsv(hwb: HWBColor) -> HSVColor:
    """
    Convert HWB to HSV. Hue is carried through unchanged.

    Blackness of 1 leaves no value to divide whiteness by; saturation
    then falls back to 0.
    """
    return HSVColor(
        h=hwb.h,
        s=1 - safe_divide(hwb.w, 1 - hwb.b, fallback=1),
        v=1 - hwb.b,
    )
