# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hex text codec.

Strict entry point: ``#`` + exactly 6 hex digits, case-insensitive.
The alpha-aware validator also accepts 8 digits but does not parse them.

Formatting is the inverse of parsing: each channel is scaled to 0-255,
rounded, and written as 2 lowercase hex digits. Channels outside 0-1 are
not clamped, so they format to more than 2 digits or carry a minus sign.
"""

from __future__ import annotations

import logging
import re

from tinct.errors import FormatError
from tinct.schema import HexColor, RGBColor
from tinct.convert.numbers import round_half_up

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)
_HEX_ALPHA_RE = re.compile(r"#[0-9a-f]{6}(?:[0-9a-f]{2})?", re.IGNORECASE)
_HEX_PREFIX_RE = re.compile(r"[0-9a-f]*", re.IGNORECASE)


def is_color_valid(hex_color: str) -> bool:
    """True if hex_color is ``#`` followed by exactly 6 hex digits."""
    return _HEX_RE.fullmatch(hex_color) is not None


def is_color_valid_with_alpha(hex_color: str) -> bool:
    """True if hex_color is ``#`` followed by 6 or 8 hex digits."""
    return _HEX_ALPHA_RE.fullmatch(hex_color) is not None


def _parse_channel(pair: str) -> float:
    """Parse 2 hex digits to a unit float; unparseable text becomes 0."""
    try:
        value = int(pair, 16)
    except ValueError:
        logger.debug("Unparseable hex channel %r, using 0", pair)
        value = 0
    return value / 0xFF


def _parse_int_prefix(text: str) -> int:
    """Parse the leading run of hex digits in text (0 if there is none)."""
    digits = _HEX_PREFIX_RE.match(text).group(0)
    if not digits:
        logger.debug("No hex digits in %r, using 0", text)
        return 0
    return int(digits, 16)


def hex_to_rgb(hex_color: HexColor) -> RGBColor:
    """
    Parse ``#RRGGBB`` text to RGB.

    Args:
        hex_color: Hex string like "#3941C8" (case-insensitive)

    Returns:
        RGBColor with channels in [0, 1]

    Raises:
        FormatError: If hex_color is not ``#`` + 6 hex digits
    """
    if not is_color_valid(hex_color):
        logger.debug("Rejected hex color %r", hex_color)
        raise FormatError(f"Invalid hex color format: {hex_color!r}")

    digits = hex_color[1:]
    return RGBColor(
        r=_parse_channel(digits[0:2]),
        g=_parse_channel(digits[2:4]),
        b=_parse_channel(digits[4:6]),
    )


def rgb_to_hex(rgb: RGBColor) -> HexColor:
    """
    Format RGB as lowercase ``#rrggbb`` text.

    Each channel is rounded to the nearest integer after scaling by 255
    (ties round up). Out-of-range channels are emitted unclamped.

    Returns:
        Hex string like "#3941c8"
    """
    r = round_half_up(rgb.r * 0xFF)
    g = round_half_up(rgb.g * 0xFF)
    b = round_half_up(rgb.b * 0xFF)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_argb_to_rgb(argb: HexColor) -> RGBColor:
    """
    Extract RGB from ARGB hex text, discarding the alpha byte.

    Short input is left-padded with zeros to 8 digits, so "#ff0000" reads
    as an opaque red and "#f00" as 0x00000f00. The leading ``#`` is
    optional. No validation: parsing stops at the first non-hex character
    and input without leading hex digits yields black.
    """
    digits = argb[1:] if argb.startswith("#") else argb
    value = _parse_int_prefix(digits.rjust(8, "0"))
    return RGBColor(
        r=((value >> 16) & 0xFF) / 0xFF,
        g=((value >> 8) & 0xFF) / 0xFF,
        b=(value & 0xFF) / 0xFF,
    )
