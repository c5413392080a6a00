"""Exceptions raised by sketchmath helpers."""

from __future__ import annotations


class SketchMathError(ValueError):
    """Base class for all sketchmath errors."""


class InvalidRangeError(SketchMathError):
    """A range is degenerate or reversed where a proper range is required."""


class EmptyInputError(SketchMathError):
    """A sequence or string argument has no elements."""
