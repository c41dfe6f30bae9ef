# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Exception types raised by tinct."""


class TintError(Exception):
    """Base class for tinct errors."""


class FormatError(TintError, ValueError):
    """Hex color text does not match the required ``#RRGGBB`` pattern."""
