# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""RGB ↔ CMYK conversion (naive, device-independent)."""

from __future__ import annotations

from tinct.schema import CMYKColor, RGBColor
from tinct.convert.numbers import safe_divide


def rgb_to_cmyk(rgb: RGBColor) -> CMYKColor:
    """
    Convert RGB to CMYK.

    Pure black maps to CMYKColor(0, 0, 0, 1); k = 1 would otherwise
    divide by zero when renormalizing c, m and y.
    """
    r, g, b = rgb.r, rgb.g, rgb.b

    if r == 0 and g == 0 and b == 0:
        return CMYKColor(c=0.0, m=0.0, y=0.0, k=1.0)

    c = 1 - r
    m = 1 - g
    y = 1 - b
    k = min(c, m, y)

    return CMYKColor(
        c=safe_divide(c - k, 1 - k),
        m=safe_divide(m - k, 1 - k),
        y=safe_divide(y - k, 1 - k),
        k=k,
    )


def cmyk_to_rgb(cmyk: CMYKColor) -> RGBColor:
    """Convert CMYK to RGB."""
    return RGBColor(
        r=(1 - cmyk.c) * (1 - cmyk.k),
        g=(1 - cmyk.m) * (1 - cmyk.k),
        b=(1 - cmyk.y) * (1 - cmyk.k),
    )
