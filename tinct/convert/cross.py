# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Conversions between non-RGB models.

Hue is treated as shared between HSL, HSV and HWB: cross conversions
among them carry the source hue through unchanged instead of recomputing
it. HSL ↔ HSV use closed-form formulas, HWB goes through HSV, and
everything involving hex text or CMYK goes through RGB.
"""

from __future__ import annotations

from tinct.schema import CMYKColor, HexColor, HSLColor, HSVColor, HWBColor
from tinct.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from tinct.convert.hexcodec import hex_to_rgb, rgb_to_hex
from tinct.convert.hsl import hsl_to_rgb, rgb_to_hsl
from tinct.convert.hsv import hsv_to_rgb, rgb_to_hsv
from tinct.convert.hwb import hsv_to_hwb, hwb_to_hsv, hwb_to_rgb, rgb_to_hwb


# =============================================================================
# HSL ↔ HSV ↔ HWB (hue preserved)
# =============================================================================


def hsl_to_hsv(hsl: HSLColor) -> HSVColor:
    """
    Convert HSL to HSV.

    Black (v == 0) has no saturation to recover and reports s = 0.
    """
    v = hsl.l + hsl.s * min(hsl.l, 1 - hsl.l)
    s = 0.0 if v == 0 else 2 * (1 - hsl.l / v)
    return HSVColor(h=hsl.h, s=s, v=v)


def hsv_to_hsl(hsv: HSVColor) -> HSLColor:
    """
    Convert HSV to HSL.

    Black and white (l == 0 or l == 1) report s = 0.
    """
    l = hsv.v * (1 - hsv.s / 2)
    s = 0.0 if l == 0 or l == 1 else (hsv.v - l) / min(l, 1 - l)
    return HSLColor(h=hsv.h, s=s, l=l)


def hsl_to_hwb(hsl: HSLColor) -> HWBColor:
    """Convert HSL to HWB via HSV."""
    hwb = hsv_to_hwb(hsl_to_hsv(hsl))
    return HWBColor(h=hsl.h, w=hwb.w, b=hwb.b)


def hwb_to_hsl(hwb: HWBColor) -> HSLColor:
    """Convert HWB to HSL via HSV."""
    hsl = hsv_to_hsl(hwb_to_hsv(hwb))
    return HSLColor(h=hwb.h, s=hsl.s, l=hsl.l)


# =============================================================================
# Hex text (via RGB)
# =============================================================================


def hex_to_hsl(hex_color: HexColor) -> HSLColor:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSLColor) -> HexColor:
    return rgb_to_hex(hsl_to_rgb(hsl))


def hex_to_hsv(hex_color: HexColor) -> HSVColor:
    return rgb_to_hsv(hex_to_rgb(hex_color))


def hsv_to_hex(hsv: HSVColor) -> HexColor:
    return rgb_to_hex(hsv_to_rgb(hsv))


def hex_to_hwb(hex_color: HexColor) -> HWBColor:
    return rgb_to_hwb(hex_to_rgb(hex_color))


def hwb_to_hex(hwb: HWBColor) -> HexColor:
    return rgb_to_hex(hwb_to_rgb(hwb))


def hex_to_cmyk(hex_color: HexColor) -> CMYKColor:
    return rgb_to_cmyk(hex_to_rgb(hex_color))


def cmyk_to_hex(cmyk: CMYKColor) -> HexColor:
    return rgb_to_hex(cmyk_to_rgb(cmyk))


# =============================================================================
# CMYK (via RGB)
# =============================================================================


def hsl_to_cmyk(hsl: HSLColor) -> CMYKColor:
    return rgb_to_cmyk(hsl_to_rgb(hsl))


def cmyk_to_hsl(cmyk: CMYKColor) -> HSLColor:
    return rgb_to_hsl(cmyk_to_rgb(cmyk))


def hsv_to_cmyk(hsv: HSVColor) -> CMYKColor:
    return rgb_to_cmyk(hsv_to_rgb(hsv))


def cmyk_to_hsv(cmyk: CMYKColor) -> HSVColor:
    return rgb_to_hsv(cmyk_to_rgb(cmyk))


def hwb_to_cmyk(hwb: HWBColor) -> CMYKColor:
    return rgb_to_cmyk(hwb_to_rgb(hwb))


def cmyk_to_hwb(cmyk: CMYKColor) -> HWBColor:
    return rgb_to_hwb(cmyk_to_rgb(cmyk))
