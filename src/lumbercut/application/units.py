"""Conversion between user lengths and whole planning units."""

from __future__ import annotations

import math

# Digits kept when scaling, so 0.1 * 100 plans as 10 and not 10.000000000000002.
_SCALE_PRECISION = 9


def scale_length(value: float, unit_scale: int) -> float:
    """Nominal length in planning units; whole results become ints."""
    scaled = round(value * unit_scale, _SCALE_PRECISION)
    return int(scaled) if float(scaled).is_integer() else scaled


def board_units(value: float, unit_scale: int) -> int:
    """Whole planning units of a board; partial units cannot be cut."""
    return math.floor(round(value * unit_scale, _SCALE_PRECISION))


def unscale_length(value: float, unit_scale: int) -> float:
    """Planning units back to user units."""
    if unit_scale == 1:
        return value
    result = round(value / unit_scale, _SCALE_PRECISION)
    return int(result) if float(result).is_integer() else result
