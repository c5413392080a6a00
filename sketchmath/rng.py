"""Shared random source.

All random helpers draw from one `random.Random` instance unless a caller
passes its own generator. Seeding it makes a sketch reproducible; tagged
sub-generators give independent streams per sketch element so adding draws
in one place does not shift the sequence seen by another.

Not cryptographically secure.
"""

from __future__ import annotations
import random
import zlib
from typing import Optional

from .config import DEFAULT_SEED
from .logging import log

_BASE_SEED: Optional[int] = DEFAULT_SEED
_SHARED_RNG: random.Random = random.Random(_BASE_SEED)


def set_seed(seed: Optional[int]) -> None:
    """Reseed the shared generator. None reseeds from OS entropy."""
    global _BASE_SEED, _SHARED_RNG
    _BASE_SEED = None if seed is None else int(seed) & 0xFFFFFFFF
    _SHARED_RNG = random.Random(_BASE_SEED)
    log(f"[RNG] Reseeded shared generator (seed={_BASE_SEED})")


def get_seed() -> Optional[int]:
    return _BASE_SEED


def _derive_seed(tag: str) -> int:
    # Stable across processes, unlike hash().
    crc = zlib.crc32(tag.encode("utf-8")) & 0xFFFFFFFF
    base = _BASE_SEED if _BASE_SEED is not None else 0
    return (base ^ crc) & 0xFFFFFFFF


def get_rng(tag: Optional[str] = None) -> random.Random:
    """Get the shared generator, or an independent generator for `tag`.

    A tagged generator is derived from the base seed, so two calls with the
    same tag and seed replay the same sequence.
    """
    if tag is None:
        return _SHARED_RNG
    return random.Random(_derive_seed(str(tag)))
