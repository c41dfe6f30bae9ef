# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color model conversions and contrast metrics.

Converts between RGB, HSL, HSV, HWB, CMYK, hex text and packed 24-bit
integers, and measures WCAG luminance and contrast.

Quick start::

    from tinct import convert, contrast_ratio, hex_to_rgb

    convert("#3941c8", "hsl")          # HSLColor(h=..., s=..., l=...)
    contrast_ratio(hex_to_rgb("#000000"), hex_to_rgb("#ffffff"))  # 21.0
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.errors import FormatError, TintError
from tinct.schema import (
    CMYKColor,
    ColorSpace,
    HexColor,
    HSLColor,
    HSVColor,
    HWBColor,
    PackedColor,
    RGBColor,
)
from tinct.convert import (
    convert,
    hex_to_rgb,
    is_color_valid,
    is_color_valid_with_alpha,
    rgb_to_hex,
)
from tinct.measure import (
    WCAGThresholds,
    contrast_percentage,
    contrast_ratio,
    luminance,
    meets_wcag,
)

__all__ = [
    # Core API
    "convert",
    "hex_to_rgb",
    "rgb_to_hex",
    "is_color_valid",
    "is_color_valid_with_alpha",
    # Metrics
    "luminance",
    "contrast_ratio",
    "contrast_percentage",
    "meets_wcag",
    "WCAGThresholds",
    # Types
    "RGBColor",
    "HSLColor",
    "HSVColor",
    "HWBColor",
    "CMYKColor",
    "HexColor",
    "PackedColor",
    "ColorSpace",
    # Errors
    "TintError",
    "FormatError",
    # Version
    "__version__",
]
