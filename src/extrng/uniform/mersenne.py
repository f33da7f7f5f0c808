"""
Mersenne-Twister (Matsumoto and Nishimura, 1998), MT19937.

State layout is the cursor followed by the 624-word table. A cursor of 625
marks a table that was never initialised; the first draw then seeds it with
the canonical ``sgenrand(4357)`` recurrence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import (
    MT_DEFAULT_SEED,
    MT_LOWER_MASK,
    MT_MATRIX_A,
    MT_SHIFT_OFFSET,
    MT_TABLE_WORDS_COUNT,
    MT_TEMPERING_MASK_B,
    MT_TEMPERING_MASK_C,
    MT_UPPER_MASK,
    MT_WORDS_COUNT,
    UNIFORM_SCALE_MT,
    WORD_MASK,
)
from ..core.models import RNGAlgorithm
from ..seeding import lcg_step, lcg_words, scramble
from .base import UniformGenerator, clamp_open_unit

N = MT_TABLE_WORDS_COUNT
M = MT_SHIFT_OFFSET
_MAG01 = (0x0, MT_MATRIX_A)


@dataclass
class MersenneTwister(UniformGenerator):
    """MT19937 with a 624-word table and a cursor."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.MERSENNE_TWISTER
    words_count: ClassVar[int] = MT_WORDS_COUNT

    _mt: list[int] = field(default_factory=lambda: [0] * N)
    _mti: int = N + 1

    def sgenrand(self, seed: int) -> None:
        """Canonical table initialisation from a single word."""
        seed &= WORD_MASK
        for i in range(N):
            word = seed & 0xFFFF0000
            seed = lcg_step(seed)
            word |= (seed & 0xFFFF0000) >> 16
            seed = lcg_step(seed)
            self._mt[i] = word
        self._mti = N

    def _twist(self) -> None:
        mt = self._mt
        for kk in range(N - M):
            y = (mt[kk] & MT_UPPER_MASK) | (mt[kk + 1] & MT_LOWER_MASK)
            mt[kk] = mt[kk + M] ^ (y >> 1) ^ _MAG01[y & 0x1]
        for kk in range(N - M, N - 1):
            y = (mt[kk] & MT_UPPER_MASK) | (mt[kk + 1] & MT_LOWER_MASK)
            mt[kk] = mt[kk + (M - N)] ^ (y >> 1) ^ _MAG01[y & 0x1]
        y = (mt[N - 1] & MT_UPPER_MASK) | (mt[0] & MT_LOWER_MASK)
        mt[N - 1] = mt[M - 1] ^ (y >> 1) ^ _MAG01[y & 0x1]
        self._mti = 0

    def next_uniform(self) -> float:
        if self._mti >= N:
            if self._mti == N + 1:
                self.sgenrand(MT_DEFAULT_SEED)
            self._twist()
        y = self._mt[self._mti]
        self._mti += 1
        y ^= y >> 11
        y ^= (y << 7) & MT_TEMPERING_MASK_B
        y ^= (y << 15) & MT_TEMPERING_MASK_C
        y ^= y >> 18
        return clamp_open_unit(y * UNIFORM_SCALE_MT)

    def seed(self, seed: int) -> None:
        # The cursor word is filled too, then overwritten, so the table
        # starts at the second generated word.
        words = lcg_words(scramble(seed), MT_WORDS_COUNT)
        self._mt = words[1:]
        self._mti = N

    def words(self) -> list[int]:
        return [self._mti] + list(self._mt)

    def _assign_words(self, words: list[int]) -> None:
        self._mti = words[0]
        self._mt = words[1:]

    def repair(self) -> None:
        if self._mti <= 0 or self._mti > N + 1:
            self._mti = N
        if not any(self._mt):
            self.seed(0)

    def validate(self) -> None:
        if not 0 <= self._mti <= N + 1:
            raise ValueError(f"Mersenne-Twister cursor out of range: {self._mti}")
        if self._mti != N + 1 and not any(self._mt):
            raise ValueError("Mersenne-Twister table is all zero")
