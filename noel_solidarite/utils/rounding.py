"""Rounding helpers matching the browser's Math.round semantics"""

import math


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer, halves going towards +infinity.

    Finite input gives an int. Infinity and NaN come back unchanged, as
    Math.round does, instead of raising.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def round_to_cents(value: float) -> float:
    """Round to two decimal places, halves going up"""
    if not math.isfinite(value):
        return value
    return round_half_up(value * 100) / 100
