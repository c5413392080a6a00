"""Core data types for sketchmath."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate (column x, row y)."""
    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        """Allow `x, y = point` unpacking."""
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
