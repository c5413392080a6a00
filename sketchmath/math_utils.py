"""Pure math utilities - ranges, interpolation, distances."""

from __future__ import annotations
import math

from .errors import InvalidRangeError
from .logging import log


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    if a > b:
        raise InvalidRangeError(f"clamp range is reversed: [{a}, {b}]")
    return a if v < a else b if v > b else v


def constrain(v: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp with the unit range as default bounds."""
    return clamp(v, min_val, max_val)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def lerp_unclamped(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, v: float) -> float:
    """Position of v between a and b, 0 at a and 1 at b (not clamped)."""
    if a == b:
        raise InvalidRangeError(f"inverse_lerp range is empty: [{a}, {b}]")
    return (v - a) / (b - a)


def map_range(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float,
    new_max: float,
) -> float:
    """Affinely rescale value from [old_min, old_max] onto [new_min, new_max].

    Values outside the source range extrapolate.

    Raises:
        InvalidRangeError: old_min == old_max.
    """
    if old_min == old_max:
        raise InvalidRangeError(f"source range is empty: [{old_min}, {old_max}]")
    return (value - old_min) * (new_max - new_min) / (old_max - old_min) + new_min


def wrap(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Fold value back into [min_val, max_val] by stepping whole widths.

    Both bounds are inclusive: wrap(60, 0, 60) stays 60 while wrap(65, 0, 60)
    is 5 and wrap(-5, 0, 60) is 55.
    """
    if min_val > max_val:
        raise InvalidRangeError(f"wrap range is reversed: [{min_val}, {max_val}]")
    if not math.isfinite(value):
        raise ValueError(f"cannot wrap non-finite value {value}")
    width = max_val - min_val
    if width == 0:
        log(f"[WRAP] Zero-width range at {min_val}, returning lower bound")
        return min_val
    while value > max_val:
        stepped = value - width
        if stepped == value:
            raise ValueError(f"wrap width {width} is below the float precision of {value}")
        value = stepped
    while value < min_val:
        stepped = value + width
        if stepped == value:
            raise ValueError(f"wrap width {width} is below the float precision of {value}")
        value = stepped
    return value


def dist_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared Euclidean distance; compare against r * r to skip the sqrt."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(dist_sq(x1, y1, x2, y2))


def manhattan_dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """L1 (taxicab) distance between two points."""
    return abs(x2 - x1) + abs(y2 - y1)
