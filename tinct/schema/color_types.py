# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Unvalidated: Channels are conventionally 0-1 but never clamped or checked.
  Out-of-range values propagate through conversions unchanged.
- Serializable: JSON-ready via to_dict / from_dict

Every channel (hue included) is a unit float:
- RGB: r, g, b (0 = none, 1 = full intensity)
- HSL: h (0-1 around the wheel), s, l
- HSV: h, s, v
- HWB: h, w (whiteness), b (blackness)
- CMYK: c, m, y, k

Hex text (``"#rrggbb"``) and packed integers (``0xRRGGBB``) are plain
``str`` and ``int`` values; see HexColor and PackedColor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Scalar Aliases
# =============================================================================

HexColor = str
"""Hex color text: ``#`` followed by 6 (or 8, with alpha) hex digits."""

PackedColor = int
"""24-bit integer ``(r << 16) | (g << 8) | b`` with 0-255 channels."""


class ColorSpace(Enum):
    """Color models understood by the conversion dispatcher."""

    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    CMYK = "cmyk"
    HEX = "hex"
    PACKED = "packed"


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A color in sRGB space with unit channels.

    Attributes:
        r: Red (0-1)
        g: Green (0-1)
        b: Blue (0-1)
    """
    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL (hue, saturation, lightness).

    Attributes:
        h: Hue as a fraction of the wheel (0 = red, 1/3 = green, 2/3 = blue)
        s: Saturation (0-1)
        l: Lightness (0 = black, 0.5 = pure hue, 1 = white)
    """
    h: float
    s: float
    l: float

    @property
    def is_achromatic(self) -> bool:
        """True for grays, where hue carries no information."""
        return self.s == 0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class HSVColor:
    """
    A color in HSV (hue, saturation, value).

    Attributes:
        h: Hue as a fraction of the wheel
        s: Saturation (0-1)
        v: Value, the maximum channel intensity (0-1)
    """
    h: float
    s: float
    v: float

    @property
    def is_achromatic(self) -> bool:
        """True for grays, where hue carries no information."""
        return self.s == 0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.v)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> HSVColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"])


@dataclass(frozen=True, slots=True)
class HWBColor:
    """
    A color in HWB (hue, whiteness, blackness).

    HWB is a reparameterization of HSV: whiteness is the amount of white
    mixed into the pure hue, blackness the amount of black.

    Attributes:
        h: Hue as a fraction of the wheel
        w: Whiteness (0-1)
        b: Blackness (0-1)
    """
    h: float
    w: float
    b: float

    @property
    def is_achromatic(self) -> bool:
        """True when whiteness and blackness leave no room for hue."""
        return self.w + self.b >= 1

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.w, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "w": self.w, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> HWBColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], w=data["w"], b=data["b"])


@dataclass(frozen=True, slots=True)
class CMYKColor:
    """
    A color in CMYK (cyan, magenta, yellow, key).

    Attributes:
        c: Cyan (0-1)
        m: Magenta (0-1)
        y: Yellow (0-1)
        k: Key / black (0-1)
    """
    c: float
    m: float
    y: float
    k: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYKColor:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])
