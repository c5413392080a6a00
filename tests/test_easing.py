from __future__ import annotations

import pytest

from sketchmath import (
    InvalidRangeError,
    ease_in_out_cubic,
    ease_out_quad,
    poly_ease_in,
    poly_ease_inout,
    poly_ease_out,
)


@pytest.mark.parametrize("ease", [poly_ease_in, poly_ease_out, poly_ease_inout])
@pytest.mark.parametrize("n", [1, 2, 3, 5, 2.5])
def test_endpoints(ease, n):
    assert ease(0, n) == 0
    assert ease(1, n) == 1


def test_known_values():
    assert poly_ease_in(0, 2) == 0
    assert poly_ease_in(1, 2) == 1
    assert poly_ease_out(0.5, 2) == 0.75
    assert poly_ease_in(0.5, 3) == 0.125
    assert poly_ease_inout(0.5, 2) == 0.5
    assert poly_ease_inout(0.25, 2) == 0.125


def test_inputs_outside_unit_range_are_clamped():
    assert poly_ease_in(-1, 2) == 0
    assert poly_ease_out(3, 2) == 1


def test_named_curves():
    assert ease_out_quad(0.5) == 0.75
    assert ease_in_out_cubic(0.25) == pytest.approx(0.0625)
    assert ease_in_out_cubic(0.75) == pytest.approx(0.9375)


@pytest.mark.parametrize("ease", [poly_ease_in, poly_ease_out, poly_ease_inout])
@pytest.mark.parametrize("n", [0, -1, -2.5])
def test_non_positive_degree_rejected(ease, n):
    with pytest.raises(InvalidRangeError):
        ease(0.5, n)
