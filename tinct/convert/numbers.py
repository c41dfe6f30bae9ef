# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Numeric guards for conversion formulas.

Several conversions divide by a channel spread (max - min, 1 - k, ...)
that collapses to zero for achromatic colors. Explicit branches cover the
exact cases; everything else goes through safe_divide, which degrades to
a fallback instead of producing NaN or infinity.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def is_number_not_defined(value: float) -> bool:
    """True if value is NaN or infinite."""
    return math.isnan(value) or math.isinf(value)


def is_number_defined(value: float) -> bool:
    """True if value is a finite number."""
    return not is_number_not_defined(value)


def safe_number(value: float, fallback: float = 0) -> float:
    """Return value, or fallback if it is NaN or infinite."""
    return fallback if is_number_not_defined(value) else value


def safe_divide(numerator: float, denominator: float, fallback: float = 0) -> float:
    """
    Divide, returning fallback when the quotient is not a finite number.

    Covers zero denominators (including 0/0) as well as non-finite
    operands and overflow.

    Args:
        numerator: Dividend
        denominator: Divisor
        fallback: Value returned in place of NaN / infinity (default: 0)

    Returns:
        numerator / denominator, or fallback
    """
    if denominator == 0:
        logger.debug("safe_divide: zero denominator, using fallback %r", fallback)
        return fallback
    try:
        quotient = numerator / denominator
    except OverflowError:
        logger.debug("safe_divide: overflow in %r / %r", numerator, denominator)
        return fallback
    if is_number_not_defined(quotient):
        logger.debug("safe_divide: non-finite %r / %r", numerator, denominator)
        return fallback
    return quotient


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)
