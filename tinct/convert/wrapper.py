# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Generic conversion dispatcher.

``convert(value, to)`` looks up a direct converter for the (source,
target) pair and otherwise routes through RGB. The source model is
inferred from the value's type unless given explicitly.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable, Optional, Union

from tinct.schema import (
    CMYKColor,
    ColorSpace,
    HSLColor,
    HSVColor,
    HWBColor,
    RGBColor,
)
from tinct.convert import cross, packed
from tinct.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from tinct.convert.hexcodec import hex_to_rgb, rgb_to_hex
from tinct.convert.hsl import hsl_to_rgb, rgb_to_hsl
from tinct.convert.hsv import hsv_to_rgb, rgb_to_hsv
from tinct.convert.hwb import hsv_to_hwb, hwb_to_hsv, hwb_to_rgb, rgb_to_hwb

ColorValue = Union[RGBColor, HSLColor, HSVColor, HWBColor, CMYKColor, str, int]

_TYPE_SPACES: dict[type, ColorSpace] = {
    RGBColor: ColorSpace.RGB,
    HSLColor: ColorSpace.HSL,
    HSVColor: ColorSpace.HSV,
    HWBColor: ColorSpace.HWB,
    CMYKColor: ColorSpace.CMYK,
    str: ColorSpace.HEX,
    int: ColorSpace.PACKED,
}

TO_RGB: dict[ColorSpace, Callable[[Any], RGBColor]] = {
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.HSV: hsv_to_rgb,
    ColorSpace.HWB: hwb_to_rgb,
    ColorSpace.CMYK: cmyk_to_rgb,
    ColorSpace.HEX: hex_to_rgb,
    ColorSpace.PACKED: packed.color_to_rgb,
}

FROM_RGB: dict[ColorSpace, Callable[[RGBColor], Any]] = {
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HWB: rgb_to_hwb,
    ColorSpace.CMYK: rgb_to_cmyk,
    ColorSpace.HEX: rgb_to_hex,
    ColorSpace.PACKED: packed.rgb_to_color,
}

# Pairs with a dedicated converter that does not simply compose the
# hub functions (hue-preserving conversions among HSL/HSV/HWB).
DIRECT: dict[tuple[ColorSpace, ColorSpace], Callable[[Any], Any]] = {
    (ColorSpace.HSL, ColorSpace.HSV): cross.hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): cross.hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HWB): cross.hsl_to_hwb,
    (ColorSpace.HWB, ColorSpace.HSL): cross.hwb_to_hsl,
    (ColorSpace.HSV, ColorSpace.HWB): hsv_to_hwb,
    (ColorSpace.HWB, ColorSpace.HSV): hwb_to_hsv,
}


def space_of(value: ColorValue) -> ColorSpace:
    """
    Infer the color model of a value from its type.

    Raises:
        TypeError: If the type is not a supported color representation
    """
    # bool is an int subclass but never a packed color
    if isinstance(value, bool):
        raise TypeError("Cannot infer color space from bool")
    for kind, space in _TYPE_SPACES.items():
        if isinstance(value, kind):
            return space
    # NumPy integer scalars register as numbers.Integral
    if isinstance(value, numbers.Integral):
        return ColorSpace.PACKED
    raise TypeError(f"Unsupported color value type: {type(value).__name__}")


def _as_space(space: Union[ColorSpace, str]) -> ColorSpace:
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(space)
    except ValueError:
        valid = ", ".join(s.value for s in ColorSpace)
        raise ValueError(f"Unknown color space {space!r}; expected one of: {valid}") from None


def convert(
    value: ColorValue,
    to: Union[ColorSpace, str],
    *,
    source: Optional[Union[ColorSpace, str]] = None,
) -> ColorValue:
    """
    Convert a color value to another model.

    Args:
        value: Color in any supported representation
        to: Target model (ColorSpace or its string value, e.g. "hsl")
        source: Source model; inferred from the value's type if None

    Returns:
        The converted value. Same-model conversion returns value as-is.

    Raises:
        ValueError: Unknown model name
        TypeError: Source model cannot be inferred from value
        FormatError: Hex text input is malformed

    Example:
        >>> convert("#ff0000", "hsl")
        HSLColor(h=0.0, s=1.0, l=0.5)
    """
    target = _as_space(to)
    origin = _as_space(source) if source is not None else space_of(value)

    if origin == target:
        return value

    direct = DIRECT.get((origin, target))
    if direct is not None:
        return direct(value)

    rgb = value if origin == ColorSpace.RGB else TO_RGB[origin](value)
    if target == ColorSpace.RGB:
        return rgb
    return FROM_RGB[target](rgb)
