"""
Marsaglia's multiply-with-carry generator.

Two 16-bit multiply-with-carry sequences; the high half of the first is
concatenated with the low half of the second. Period about 2^60.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import (
    MM_MULTIPLIERS,
    MM_WORDS_COUNT,
    UNIFORM_SCALE_32M1,
    WORD_LOW16_MASK,
    WORD_MASK,
)
from ..core.models import RNGAlgorithm
from ..seeding import lcg_words, scramble
from .base import UniformGenerator, clamp_open_unit


@dataclass
class MarsagliaMulticarry(UniformGenerator):
    """Multiply-with-carry generator with state (I1, I2)."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.MARSAGLIA_MULTICARRY
    words_count: ClassVar[int] = MM_WORDS_COUNT

    _seeds: list[int] = field(default_factory=lambda: [1, 1])

    def next_uniform(self) -> float:
        i1, i2 = self._seeds
        i1 = (MM_MULTIPLIERS[0] * (i1 & WORD_LOW16_MASK) + (i1 >> 16)) & WORD_MASK
        i2 = (MM_MULTIPLIERS[1] * (i2 & WORD_LOW16_MASK) + (i2 >> 16)) & WORD_MASK
        self._seeds = [i1, i2]
        combined = ((i1 << 16) & WORD_MASK) ^ (i2 & WORD_LOW16_MASK)
        return clamp_open_unit(combined * UNIFORM_SCALE_32M1)

    def seed(self, seed: int) -> None:
        self._seeds = lcg_words(scramble(seed), MM_WORDS_COUNT)
        self.repair()

    def words(self) -> list[int]:
        return list(self._seeds)

    def _assign_words(self, words: list[int]) -> None:
        self._seeds = words

    def repair(self) -> None:
        self._seeds = [word if word != 0 else 1 for word in self._seeds]

    def validate(self) -> None:
        if 0 in self._seeds:
            raise ValueError("Marsaglia-Multicarry words must be non-zero")
