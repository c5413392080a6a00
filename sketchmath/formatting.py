"""Hex and colour string helpers."""

from __future__ import annotations
import re
from typing import Sequence

from PIL import ImageColor

from .config import HEX_PREFIX
from .types import RGB

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def dec_to_hex(value: int, pad: int = 0, prefix: bool = False) -> str:
    """Format a non-negative integer as uppercase hex.

    Args:
        value: Integer to format.
        pad: Minimum number of digits, zero-filled on the left.
        prefix: Prepend "0x".

    Returns:
        Hex string, e.g. dec_to_hex(12, 2) == "0C".
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"cannot format negative value {value} as hex")
    digits = format(value, "X").rjust(max(0, int(pad)), "0")
    return HEX_PREFIX + digits if prefix else digits


def hex_to_dec(text: str) -> int:
    """Parse a hex string ("E8", "0xe8", "#E8") into an integer."""
    s = text.strip()
    if s[:2].lower() == HEX_PREFIX:
        s = s[2:]
    elif s.startswith("#"):
        s = s[1:]
    if not _HEX_DIGITS.fullmatch(s):
        raise ValueError(f"not a hex number: {text!r}")
    return int(s, 16)


def css_to_rgb(value: str) -> RGB:
    """Parse any CSS colour string ("#e8e8e8", "rgb(1,2,3)", "tomato")."""
    r, g, b = ImageColor.getrgb(value.strip())[:3]
    return (r, g, b)


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Render an (r, g, b) triple as "#RRGGBB"."""
    r, g, b = rgb[:3]
    return "#" + "".join(dec_to_hex(max(0, min(255, int(c))), 2) for c in (r, g, b))
