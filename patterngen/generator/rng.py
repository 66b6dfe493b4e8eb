"""Seeded pseudo-random stream used by the pattern engine.

The seed string is folded with DJB2 over its UTF-16 code units and the
resulting 32-bit integer drives a Mulberry32 generator. All arithmetic is
masked to 32 bits so the stream matches the TypeScript implementation the
showcase frontend shipped with, bit for bit.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from patterngen.core import require_seed

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_DJB2_START = 5381
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def hash_seed(seed: str) -> int:
    """Return the unsigned 32-bit DJB2 hash of *seed*."""

    encoded = seed.encode("utf-16-le", "surrogatepass")
    value = _DJB2_START
    for index in range(0, len(encoded), 2):
        unit = encoded[index] | (encoded[index + 1] << 8)
        value = (value * 33 + unit) & _MASK32
    return value


class SeededRng:
    """Deterministic random source built from a string seed."""

    def __init__(self, seed: str) -> None:
        self.seed = require_seed(seed)
        self._state = hash_seed(seed)

    def random(self) -> float:
        """Return the next float in ``[0, 1)``."""

        self._state = (self._state + _MULBERRY_INCREMENT) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def uniform(self, minimum: float, maximum: float) -> float:
        return minimum + self.random() * (maximum - minimum)

    def randint(self, minimum: int, maximum: int) -> int:
        """Return an integer in ``[minimum, maximum]``, both ends inclusive."""

        return math.floor(minimum + self.random() * (maximum - minimum + 1))

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[math.floor(self.random() * len(items))]

    def chance(self, probability: float = 0.5) -> bool:
        return self.random() < probability


__all__ = ["SeededRng", "hash_seed"]
