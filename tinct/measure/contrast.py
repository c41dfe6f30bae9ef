# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Relative luminance and contrast metrics.

Conversion chain: sRGB → Linear RGB → Relative luminance (Y)
                                    → CIE L* (for contrast percentage)

References:
- WCAG 2.x relative luminance and contrast ratio:
  https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- CIE L*: https://en.wikipedia.org/wiki/CIELAB_color_space

The linearization threshold is the WCAG 2.x value 0.03928 (not the
IEC 61966-2-1 value 0.04045); the two differ only below 8-bit precision.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from tinct.schema import RGBColor
from tinct.convert.numbers import safe_divide


# sRGB transfer function (WCAG 2.x constants)
SRGB_THRESHOLD = 0.03928
SRGB_SLOPE = 12.92

# Rec. 709 luminance weights
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Flare term added to both luminances in the contrast ratio
CONTRAST_FLARE = 0.05

# CIE L* constants (exact rationals)
CIE_EPSILON = 216 / 24389
CIE_KAPPA = 24389 / 27


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class WCAGThresholds:
    """Minimum contrast ratios per WCAG 2.x conformance level."""

    # Success criterion 1.4.3 (Contrast, Minimum)
    aa_normal: float = 4.5
    aa_large: float = 3.0

    # Success criterion 1.4.6 (Contrast, Enhanced)
    aaa_normal: float = 7.0
    aaa_large: float = 4.5

    def minimum(self, level: str = "AA", *, large_text: bool = False) -> float:
        """
        Required ratio for a conformance level.

        Raises:
            ValueError: If level is not "AA" or "AAA"
        """
        level = level.upper()
        if level == "AA":
            return self.aa_large if large_text else self.aa_normal
        if level == "AAA":
            return self.aaa_large if large_text else self.aaa_normal
        raise ValueError(f"Unknown WCAG level {level!r}; expected 'AA' or 'AAA'")


# =============================================================================
# Scalar metrics
# =============================================================================


def _linearize(channel: float) -> float:
    if channel <= SRGB_THRESHOLD:
        return channel / SRGB_SLOPE
    try:
        return ((channel + 0.055) / 1.055) ** 2.4
    except OverflowError:
        return math.inf


def luminance(rgb: RGBColor) -> float:
    """
    WCAG relative luminance of an sRGB color.

    Returns:
        Y in [0, 1] for in-range input (0 = black, 1 = white)
    """
    wr, wg, wb = LUMINANCE_WEIGHTS
    return (
        _linearize(rgb.r) * wr
        + _linearize(rgb.g) * wg
        + _linearize(rgb.b) * wb
    )


def contrast_ratio(rgb1: RGBColor, rgb2: RGBColor) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments.
    Out-of-range input whose luminance leaves no finite ratio returns 0.

    Returns:
        Ratio in [1, 21] (1 = identical luminance, 21 = black on white)
    """
    l1 = luminance(rgb1)
    l2 = luminance(rgb2)
    return safe_divide(max(l1, l2) + CONTRAST_FLARE, min(l1, l2) + CONTRAST_FLARE)


def _y_to_lstar(y: float) -> float:
    """Convert relative luminance to CIE L* (perceptual lightness)."""
    if y <= CIE_EPSILON:
        return y * CIE_KAPPA
    return y ** (1 / 3) * 116 - 16


def contrast_percentage(rgb1: RGBColor, rgb2: RGBColor) -> float:
    """
    Perceptual lightness difference between two colors.

    Each luminance is mapped to CIE L* and the absolute difference is
    returned, so the scale is roughly linear to the eye.

    Returns:
        Value in approximately [0, 100] (0 = low contrast, 100 = high)
    """
    l1 = _y_to_lstar(luminance(rgb1))
    l2 = _y_to_lstar(luminance(rgb2))
    return max(l1, l2) - min(l1, l2)


def meets_wcag(
    rgb1: RGBColor,
    rgb2: RGBColor,
    *,
    level: str = "AA",
    large_text: bool = False,
    thresholds: Optional[WCAGThresholds] = None,
) -> bool:
    """
    Check whether two colors reach a WCAG contrast level.

    Args:
        rgb1, rgb2: Foreground and background (order does not matter)
        level: "AA" or "AAA"
        large_text: Use the large-text minimum (>=18pt or >=14pt bold)
        thresholds: Ratio minimums (uses WCAG 2.x defaults if None)

    Raises:
        ValueError: If level is unknown
    """
    cfg = thresholds or WCAGThresholds()
    return contrast_ratio(rgb1, rgb2) >= cfg.minimum(level, large_text=large_text)


# =============================================================================
# Vectorized metrics
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Linearize sRGB values with the WCAG piecewise curve.

    - For values <= 0.03928: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Clip the power branch input so the discarded lane stays NaN-free
    curve_input = np.maximum(srgb, SRGB_THRESHOLD)
    return np.where(
        srgb <= SRGB_THRESHOLD,
        srgb / SRGB_SLOPE,
        np.power((curve_input + 0.055) / 1.055, 2.4),
    )


def luminance_batch(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Vectorized luminance for arrays of sRGB colors.

    Args:
        rgb: Array of shape (..., 3) with unit sRGB values

    Returns:
        Array of shape (...) with relative luminance values
    """
    linear = srgb_to_linear(rgb)
    return linear @ np.asarray(LUMINANCE_WEIGHTS, dtype=np.float64)


def contrast_ratio_batch(
    rgb1: NDArray[np.float64],
    rgb2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized contrast_ratio for matching arrays of sRGB colors.

    Args:
        rgb1: Array of shape (N, 3) or (..., 3)
        rgb2: Array broadcastable against rgb1

    Returns:
        Array of contrast ratios with the broadcast leading shape
    """
    l1 = luminance_batch(rgb1)
    l2 = luminance_batch(rgb2)
    lighter = np.maximum(l1, l2)
    darker = np.minimum(l1, l2)
    return (lighter + CONTRAST_FLARE) / (darker + CONTRAST_FLARE)
