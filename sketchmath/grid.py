"""Row-major mapping between linear indices and 2D grid coordinates."""

from __future__ import annotations

from .errors import InvalidRangeError
from .types import Point


def _check_width(width: int) -> None:
    if width <= 0:
        raise InvalidRangeError(f"grid width must be positive, got {width}")


def xy_from_index(i: int, width: int) -> Point:
    """Grid coordinate of linear index i in a row-major grid of `width` columns.

    Args:
        i: Linear index, 0 at the top-left cell.
        width: Number of columns.

    Returns:
        Point with x = column, y = row.
    """
    _check_width(width)
    return Point(x=i % width, y=i // width)


def index_from_xy(x: int, y: int, width: int) -> int:
    """Linear index of cell (x, y); inverse of xy_from_index."""
    _check_width(width)
    return x + width * y
