"""Math utilities for rating arithmetic."""

from __future__ import annotations

import math
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def split_rating(rating: float) -> tuple[int, float]:
    """Split a rating into its whole part and fractional remainder.

    Example:
        >>> split_rating(2.5)
        (2, 0.5)
    """
    whole = math.floor(rating)
    return int(whole), rating - whole


def format_number(value: float) -> str:
    """Format a rating for display, dropping the decimal part of whole values.

    Example:
        >>> format_number(3.0)
        '3'
        >>> format_number(3.5)
        '3.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)
