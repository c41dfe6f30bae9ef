# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color model conversions.

RGB is the hub: each model converts to and from RGB, and most other
pairs compose through it. HSL, HSV and HWB convert among themselves
directly and share their hue unchanged.

All functions are pure and never mutate their input. Only the strict
hex parser raises (FormatError); everything else degrades degenerate
input to conventional values (hue 0 for grays, k = 1 for black).
"""

from tinct.convert.numbers import (
    is_number_defined,
    is_number_not_defined,
    round_half_up,
    safe_divide,
    safe_number,
)
from tinct.convert.hexcodec import (
    hex_argb_to_rgb,
    hex_to_rgb,
    is_color_valid,
    is_color_valid_with_alpha,
    rgb_to_hex,
)
from tinct.convert.hsl import hsl_to_rgb, rgb_to_hsl
from tinct.convert.hsv import hsv_to_rgb, rgb_to_hsv
from tinct.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from tinct.convert.hwb import hsv_to_hwb, hwb_to_hsv, hwb_to_rgb, rgb_to_hwb
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
from tinct.convert.wrapper import convert, space_of

__all__ = [
    # Numeric guards
    "safe_divide",
    "safe_number",
    "is_number_defined",
    "is_number_not_defined",
    "round_half_up",
    # Hex codec
    "is_color_valid",
    "is_color_valid_with_alpha",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_argb_to_rgb",
    # RGB hub
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    # Hue-preserving cross conversions
    "hsl_to_hsv",
    "hsv_to_hsl",
    "hsv_to_hwb",
    "hwb_to_hsv",
    "hsl_to_hwb",
    "hwb_to_hsl",
    # Hex and CMYK compositions
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_hsv",
    "hsv_to_hex",
    "hex_to_hwb",
    "hwb_to_hex",
    "hex_to_cmyk",
    "cmyk_to_hex",
    "hsl_to_cmyk",
    "cmyk_to_hsl",
    "hsv_to_cmyk",
    "cmyk_to_hsv",
    "hwb_to_cmyk",
    "cmyk_to_hwb",
    # Packed integers
    "rgb_to_color",
    "color_to_rgb",
    "rgb_to_color_batch",
    "color_to_rgb_batch",
    "hex_to_color",
    "color_to_hex",
    "hsl_to_color",
    "color_to_hsl",
    "hsv_to_color",
    "color_to_hsv",
    "cmyk_to_color",
    "color_to_cmyk",
    "hwb_to_color",
    "color_to_hwb",
    # Dispatcher
    "convert",
    "space_of",
]
