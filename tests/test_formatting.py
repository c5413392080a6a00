from __future__ import annotations

import pytest

from sketchmath import css_to_rgb, dec_to_hex, hex_to_dec, rgb_to_hex


def test_dec_to_hex():
    assert dec_to_hex(232) == "E8"
    assert dec_to_hex(12, 2) == "0C"
    assert dec_to_hex(0) == "0"
    assert dec_to_hex(255, 4, prefix=True) == "0x00FF"


def test_hex_to_dec():
    assert hex_to_dec("E8") == 232
    assert hex_to_dec("0xe8") == 232
    assert hex_to_dec(" #0C ") == 12


def test_hex_round_trip():
    for value in (0, 7, 232, 4096, 65535):
        assert hex_to_dec(dec_to_hex(value, 6, prefix=True)) == value


@pytest.mark.parametrize("text", ["", "0x", "G1", "1_0", "-5"])
def test_hex_to_dec_rejects_garbage(text):
    with pytest.raises(ValueError):
        hex_to_dec(text)


def test_dec_to_hex_negative():
    with pytest.raises(ValueError):
        dec_to_hex(-1)


def test_css_colors():
    assert css_to_rgb("#E8E8E8") == (232, 232, 232)
    assert css_to_rgb("rgb(1,2,3)") == (1, 2, 3)
    assert css_to_rgb("red") == (255, 0, 0)
    assert rgb_to_hex((232, 12, 0)) == "#E80C00"
    with pytest.raises(ValueError):
        css_to_rgb("not-a-colour")
