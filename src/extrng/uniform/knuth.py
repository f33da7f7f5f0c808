"""
Knuth's lagged Fibonacci generator from TAOCP vol. 2, section 3.6.

    X[j] = (X[j-100] - X[j-37]) mod 2^30

Draws are taken from the 100-word state after each pass of ``ran_array``
over a 1009-word quality buffer. Two seeding procedures exist:

- ``ran_start_1997``: the routine as first published. It leaves part of the
  odd positions of the work array uninitialised on each squaring step.
- ``ran_start_2002``: the corrected routine from the 2002 printing. It
  zeroes the odd positions and warms the state up with ten ``ran_array``
  cycles before use.

The two must not be conflated: they produce different streams for the same
seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar

from ..constants import (
    KT_LONG_LAG,
    KT_MODULUS,
    KT_QUALITY_WORDS_COUNT,
    KT_SEPARATION,
    KT_SHORT_LAG,
    KT_WARMUP_CYCLES_COUNT,
    KT_WORDS_COUNT,
    SEED_KNUTH_MODULUS,
    UNIFORM_SCALE_KNUTH,
)
from ..core.models import RNGAlgorithm
from ..seeding import scramble
from .base import UniformGenerator, clamp_open_unit

KK = KT_LONG_LAG
LL = KT_SHORT_LAG
MM = KT_MODULUS
TT = KT_SEPARATION


def _mod_diff(x: int, y: int) -> int:
    return (x - y) & (MM - 1)


def ran_array(ran_x: list[int], n: int) -> list[int]:
    """Generate ``n`` values into a fresh buffer and advance ``ran_x`` in place."""
    assert n >= KK, f"n ({n}) must be at least {KK}"
    aa = ran_x[:KK] + [0] * (n - KK)
    for j in range(KK, n):
        aa[j] = _mod_diff(aa[j - KK], aa[j - LL])
    j = n
    for i in range(LL):
        ran_x[i] = _mod_diff(aa[j - KK], aa[j - LL])
        j += 1
    for i in range(LL, KK):
        ran_x[i] = _mod_diff(aa[j - KK], ran_x[i - LL])
        j += 1
    return aa


def _initial_powers(seed: int) -> list[int]:
    x = [0] * (KK + KK - 1)
    ss = (seed + 2) & (MM - 2)
    for j in range(KK):
        x[j] = ss
        ss <<= 1
        if ss >= MM:
            ss -= MM - 2
    x[1] += 1
    return x


def _rotate_into_state(x: list[int]) -> list[int]:
    ran_x = [0] * KK
    for j in range(LL):
        ran_x[j + KK - LL] = x[j]
    for j in range(LL, KK):
        ran_x[j - LL] = x[j]
    return ran_x


def ran_start_1997(seed: int) -> list[int]:
    """Seeding procedure as first published; returns the 100-word state."""
    x = _initial_powers(seed)
    ss = seed & (MM - 1)
    t = TT - 1
    while t:
        # "square"
        for j in range(KK - 1, 0, -1):
            x[j + j] = x[j]
        for j in range(KK + KK - 2, KK - LL, -2):
            x[KK + KK - 1 - j] = x[j] & (MM - 2)
        for j in range(KK + KK - 2, KK - 1, -1):
            if x[j] & 1:
                x[j - (KK - LL)] = _mod_diff(x[j - (KK - LL)], x[j])
                x[j - KK] = _mod_diff(x[j - KK], x[j])
        # "multiply by z"
        if ss & 1:
            for j in range(KK, 0, -1):
                x[j] = x[j - 1]
            x[0] = x[KK]
            if x[KK] & 1:
                x[LL] = _mod_diff(x[LL], x[KK])
        if ss:
            ss >>= 1
        else:
            t -= 1
    return _rotate_into_state(x)


def ran_start_2002(seed: int) -> list[int]:
    """Corrected seeding procedure with warm-up; returns the 100-word state."""
    x = _initial_powers(seed)
    ss = seed & (MM - 1)
    t = TT - 1
    while t:
        for j in range(KK - 1, 0, -1):
            x[j + j] = x[j]
            x[j + j - 1] = 0
        for j in range(KK + KK - 2, KK - 1, -1):
            x[j - (KK - LL)] = _mod_diff(x[j - (KK - LL)], x[j])
            x[j - KK] = _mod_diff(x[j - KK], x[j])
        if ss & 1:
            for j in range(KK, 0, -1):
                x[j] = x[j - 1]
            x[0] = x[KK]
            x[LL] = _mod_diff(x[LL], x[KK])
        if ss:
            ss >>= 1
        else:
            t -= 1
    ran_x = _rotate_into_state(x)
    for _ in range(KT_WARMUP_CYCLES_COUNT):
        ran_array(ran_x, KK + KK - 1)
    return ran_x


@dataclass
class KnuthTAOCP(UniformGenerator):
    """Knuth TAOCP generator seeded with the 1997 procedure."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.KNUTH_TAOCP
    words_count: ClassVar[int] = KT_WORDS_COUNT
    ran_start: ClassVar[Callable[[int], list[int]]] = staticmethod(ran_start_1997)

    _ran_x: list[int] = field(default_factory=lambda: [0] * KK)
    _pos: int = KK

    def next_uniform(self) -> float:
        if self._pos >= KK:
            ran_array(self._ran_x, KT_QUALITY_WORDS_COUNT)
            self._pos = 0
        value = self._ran_x[self._pos]
        self._pos += 1
        return clamp_open_unit(value * UNIFORM_SCALE_KNUTH)

    def seed(self, seed: int) -> None:
        self._ran_x = self.ran_start(scramble(seed) % SEED_KNUTH_MODULUS)
        self._pos = KK

    def words(self) -> list[int]:
        return list(self._ran_x) + [self._pos]

    def _assign_words(self, words: list[int]) -> None:
        self._ran_x = words[:KK]
        self._pos = words[KK]

    def repair(self) -> None:
        if self._pos <= 0 or self._pos > KK:
            self._pos = KK
        if not any(self._ran_x):
            self.seed(0)

    def validate(self) -> None:
        if not 0 <= self._pos <= KK:
            raise ValueError(f"Knuth-TAOCP position out of range: {self._pos}")
        if any(word >= MM for word in self._ran_x):
            raise ValueError("Knuth-TAOCP words must be below 2^30")
        if not any(self._ran_x):
            raise ValueError("Knuth-TAOCP table is all zero")


@dataclass
class KnuthTAOCP2(KnuthTAOCP):
    """Knuth TAOCP generator seeded with the corrected 2002 procedure."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.KNUTH_TAOCP2
    ran_start: ClassVar[Callable[[int], list[int]]] = staticmethod(ran_start_2002)
