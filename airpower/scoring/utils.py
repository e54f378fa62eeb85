"""
Numeric Utilities
airpower/scoring/utils.py

Truncation and clamping helpers shared by the mastery formulas.
"""

import math

IMPROVEMENT_MIN = 0
IMPROVEMENT_MAX = 10
IMPROVEMENT_DEFAULT = 0


def truncate(value: float) -> int:
    """Drop the fractional part, rounding toward zero (not floor)."""
    return math.trunc(value)


def clamp(value, min_val, max_val):
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def clamp_improvement(value) -> int:
    """
    Normalise raw improvement input to an integer level in [0, 10].

    Numeric input (including numeric strings) is truncated toward zero
    and clamped. Anything else, NaN and infinities included, resets to 0.

    Examples:
        >>> clamp_improvement("7")
        7
        >>> clamp_improvement(12)
        10
        >>> clamp_improvement("max")
        0
    """
    if isinstance(value, bool):
        return IMPROVEMENT_DEFAULT
    try:
        level = math.trunc(float(value))
    except (TypeError, ValueError, OverflowError):
        return IMPROVEMENT_DEFAULT
    return clamp(level, IMPROVEMENT_MIN, IMPROVEMENT_MAX)
