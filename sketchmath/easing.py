"""Easing curves over t in [0, 1]; every curve maps 0 -> 0 and 1 -> 1."""

from __future__ import annotations

from .errors import InvalidRangeError


def _unit(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return t


def _check_degree(n: float) -> None:
    # 0 ** 0 == 1 and 0 ** -n divides by zero
    if n <= 0:
        raise InvalidRangeError(f"easing degree must be positive, got {n}")


def poly_ease_in(t: float, n: float = 2) -> float:
    """Polynomial ease-in of degree n: accelerating from zero velocity."""
    _check_degree(n)
    return _unit(t) ** n


def poly_ease_out(t: float, n: float = 2) -> float:
    """Polynomial ease-out of degree n: decelerating to zero velocity."""
    _check_degree(n)
    return 1.0 - (1.0 - _unit(t)) ** n


def poly_ease_inout(t: float, n: float = 2) -> float:
    """Polynomial ease-in-out: ease-in to the midpoint, ease-out after."""
    _check_degree(n)
    t = _unit(t)
    if t < 0.5:
        return 2.0 ** (n - 1) * t ** n
    return 1.0 - (2.0 - 2.0 * t) ** n / 2.0


def ease_out_quad(t: float) -> float:
    return poly_ease_out(t, 2)


def ease_in_out_cubic(t: float) -> float:
    return poly_ease_inout(t, 3)
