# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Value types for color representations.

All types in this module are immutable (frozen dataclasses).
Conversions always build a new value; inputs are never modified.
"""

from tinct.schema.color_types import (
    CMYKColor,
    ColorSpace,
    HexColor,
    HSLColor,
    HSVColor,
    HWBColor,
    PackedColor,
    RGBColor,
)

__all__ = [
    # Cartesian / subtractive models
    "RGBColor",
    "CMYKColor",
    # Hue-based models
    "HSLColor",
    "HSVColor",
    "HWBColor",
    # Scalar encodings
    "HexColor",
    "PackedColor",
    # Dispatcher key
    "ColorSpace",
]
