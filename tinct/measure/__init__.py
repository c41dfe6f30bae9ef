# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Perceptual metrics for Tinct.

Relative luminance and WCAG contrast, computed from sRGB colors.
"""

from tinct.measure.contrast import (
    WCAGThresholds,
    contrast_percentage,
    contrast_ratio,
    contrast_ratio_batch,
    luminance,
    luminance_batch,
    meets_wcag,
    srgb_to_linear,
)

__all__ = [
    "luminance",
    "contrast_ratio",
    "contrast_percentage",
    "meets_wcag",
    "WCAGThresholds",
    "srgb_to_linear",
    "luminance_batch",
    "contrast_ratio_batch",
]
