"""Random value generators and shuffles.

Every helper takes an optional `rng` keyword (a `random.Random`); when it is
omitted the shared generator from `sketchmath.rng` is used.

Reversed ranges (a > b) are not validated: the draw simply comes from the
mirrored interval, e.g. `random_range(5, 1)` lands in (1, 5].
"""

from __future__ import annotations
import math
from random import Random
from typing import MutableSequence, Optional, Sequence, TypeVar

from .config import (
    RANDOM_INT_DEFAULT_HIGH,
    RANDOM_INTERVAL_AVERAGE,
    RANDOM_INTERVAL_SPREAD,
    NORMAL_SPREAD_DIVISOR,
    NORMAL_MAX_RETRIES,
)
from .errors import EmptyInputError
from .logging import log
from .math_utils import clamp
from .rng import get_rng

T = TypeVar("T")


def _source(rng: Optional[Random]) -> Random:
    return rng if rng is not None else get_rng()


def random_unit(*, rng: Optional[Random] = None) -> float:
    """Uniform float in [0, 1)."""
    return _source(rng).random()


def random_upto(a: float, *, rng: Optional[Random] = None) -> float:
    """Uniform float in [0, a)."""
    return random_range(0.0, a, rng=rng)


def random_range(a: float, b: float, *, rng: Optional[Random] = None) -> float:
    """Uniform float in [a, b)."""
    return _source(rng).random() * (b - a) + a


def random(
    a: Optional[float] = None,
    b: Optional[float] = None,
    *,
    rng: Optional[Random] = None,
) -> float:
    """Uniform float, overloaded on how many bounds are given.

    random()      -> [0, 1)
    random(a)     -> [0, a)
    random(a, b)  -> [a, b)
    """
    if a is None and b is None:
        return random_unit(rng=rng)
    if b is None:
        return random_upto(a, rng=rng)
    if a is None:
        return random_upto(b, rng=rng)
    return random_range(a, b, rng=rng)


def random_int(
    a: Optional[int] = None,
    b: Optional[int] = None,
    *,
    rng: Optional[Random] = None,
) -> int:
    """Uniform integer in [a, b), the floor of a scaled uniform draw.

    random_int()      -> [0, 2), a coin flip of 0 or 1
    random_int(a)     -> [0, a)
    random_int(a, b)  -> [a, b)
    """
    if a is None and b is None:
        a, b = 0, RANDOM_INT_DEFAULT_HIGH
    elif b is None:
        a, b = 0, a
    elif a is None:
        a = 0
    return math.floor(_source(rng).random() * (b - a)) + a


def random_interval(
    average: float = RANDOM_INTERVAL_AVERAGE,
    interval: float = RANDOM_INTERVAL_SPREAD,
    *,
    rng: Optional[Random] = None,
) -> float:
    """Uniform float within `interval` of `average`."""
    return random_range(average - interval, average + interval, rng=rng)


def _box_muller(source: Random) -> float:
    u = 0.0
    v = 0.0
    # random() is [0, 1); log(0) is undefined
    while u == 0.0:
        u = source.random()
    while v == 0.0:
        v = source.random()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def random_normal(
    min_val: float = 0.0,
    max_val: float = 1.0,
    skew: float = 0.0,
    *,
    rng: Optional[Random] = None,
) -> float:
    """Approximately normal draw squeezed into [min_val, max_val].

    A standard normal sample is rescaled to z/10 + 0.5 and resampled until it
    lands in [0, 1]. The result is raised to `skew` (values above 1 pull the
    peak towards min_val, below 1 towards max_val) and stretched onto the
    target range.

    The default skew of 0 raises every draw to the power 0, so the call
    returns max_val. Pass skew=1 for an unskewed bell curve.
    """
    source = _source(rng)
    num = 0.5
    for _ in range(NORMAL_MAX_RETRIES):
        num = _box_muller(source) / NORMAL_SPREAD_DIVISOR + 0.5
        if 0.0 <= num <= 1.0:
            break
    else:
        log(f"[RANDOM] random_normal gave up after {NORMAL_MAX_RETRIES} draws, clamping {num:.4f}")
        num = clamp(num, 0.0, 1.0)

    num = num ** skew
    return num * (max_val - min_val) + min_val


def random_from_array(seq: Sequence[T], *, rng: Optional[Random] = None) -> T:
    """Uniformly chosen element of a non-empty sequence."""
    if len(seq) == 0:
        raise EmptyInputError("cannot pick from an empty sequence")
    return seq[random_int(0, len(seq), rng=rng)]


def _fisher_yates(items: MutableSequence, source: Random) -> None:
    for i in range(len(items) - 1, 0, -1):
        j = math.floor(source.random() * (i + 1))
        items[i], items[j] = items[j], items[i]


def shuffle_array(seq: MutableSequence, *, rng: Optional[Random] = None) -> None:
    """Shuffle a mutable sequence in place (Fisher-Yates).

    Not safe to call concurrently on the same list; callers must lock.
    """
    if len(seq) == 0:
        raise EmptyInputError("cannot shuffle an empty sequence")
    _fisher_yates(seq, _source(rng))


def shuffle_string(s: str, *, rng: Optional[Random] = None) -> str:
    """Return a new string with the characters of `s` in random order."""
    if not s:
        raise EmptyInputError("cannot shuffle an empty string")
    chars = list(s)
    _fisher_yates(chars, _source(rng))
    return "".join(chars)
