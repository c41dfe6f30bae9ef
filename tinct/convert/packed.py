# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Packed 24-bit integer codec.

Layout: ``(r << 16) | (g << 8) | b`` with each channel scaled to 0-255
and rounded. Unpacking rounds the input and masks each byte, so stray
high bits (an alpha byte, for instance) are ignored.

Batch variants operate on NumPy arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tinct.schema import (
    CMYKColor,
    HexColor,
    HSLColor,
    HSVColor,
    HWBColor,
    PackedColor,
    RGBColor,
)
from tinct.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from tinct.convert.hexcodec import hex_to_rgb, rgb_to_hex
from tinct.convert.hsl import hsl_to_rgb, rgb_to_hsl
from tinct.convert.hsv import hsv_to_rgb, rgb_to_hsv
from tinct.convert.hwb import hwb_to_rgb, rgb_to_hwb
from tinct.convert.numbers import round_half_up


# =============================================================================
# RGB ↔ Packed
# =============================================================================


def rgb_to_color(rgb: RGBColor) -> PackedColor:
    """
    Pack RGB into a 24-bit integer.

    Example:
        >>> rgb_to_color(RGBColor(1.0, 0.0, 0.0))
        16711680
    """
    r = round_half_up(rgb.r * 0xFF)
    g = round_half_up(rgb.g * 0xFF)
    b = round_half_up(rgb.b * 0xFF)
    return (r << 16) | (g << 8) | b


def color_to_rgb(value: PackedColor) -> RGBColor:
    """Unpack a 24-bit integer into RGB with unit channels."""
    value = round_half_up(value)
    return RGBColor(
        r=((value >> 16) & 0xFF) / 0xFF,
        g=((value >> 8) & 0xFF) / 0xFF,
        b=(value & 0xFF) / 0xFF,
    )


def rgb_to_color_batch(rgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Vectorized rgb_to_color for arrays of RGB colors.

    Args:
        rgb: Array of shape (..., 3) with unit RGB values

    Returns:
        Integer array of shape (...)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    channels = np.floor(rgb * 0xFF + 0.5).astype(np.int64)
    return (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]


def color_to_rgb_batch(values: NDArray[np.int64]) -> NDArray[np.float64]:
    """
    Vectorized color_to_rgb for arrays of packed colors.

    Args:
        values: Integer array of shape (...)

    Returns:
        Array of shape (..., 3) with unit RGB values
    """
    values = np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)
    r = (values >> 16) & 0xFF
    g = (values >> 8) & 0xFF
    b = values & 0xFF
    return np.stack([r, g, b], axis=-1).astype(np.float64) / 0xFF


# =============================================================================
# Other Models ↔ Packed (via RGB)
# =============================================================================


def hex_to_color(hex_color: HexColor) -> PackedColor:
    return rgb_to_color(hex_to_rgb(hex_color))


def color_to_hex(value: PackedColor) -> HexColor:
    return rgb_to_hex(color_to_rgb(value))


def hsl_to_color(hsl: HSLColor) -> PackedColor:
    return rgb_to_color(hsl_to_rgb(hsl))


def color_to_hsl(value: PackedColor) -> HSLColor:
    return rgb_to_hsl(color_to_rgb(value))


def hsv_to_color(hsv: HSVColor) -> PackedColor:
    return rgb_to_color(hsv_to_rgb(hsv))


def color_to_hsv(value: PackedColor) -> HSVColor:
    return rgb_to_hsv(color_to_rgb(value))


def cmyk_to_color(cmyk: CMYKColor) -> PackedColor:
    return rgb_to_color(cmyk_to_rgb(cmyk))


def color_to_cmyk(value: PackedColor) -> CMYKColor:
    return rgb_to_cmyk(color_to_rgb(value))


def hwb_to_color(hwb: HWBColor) -> PackedColor:
    return rgb_to_color(hwb_to_rgb(hwb))


def color_to_hwb(value: PackedColor) -> HWBColor:
    return rgb_to_hwb(color_to_rgb(value))
