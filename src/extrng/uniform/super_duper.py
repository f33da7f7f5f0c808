"""
Marsaglia's Super-Duper, in the Reeds et al. (1984) formulation.

A Tausworthe shift register combined with a 69069 congruential generator,
both on unsigned words.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import (
    SD_CONGRUENTIAL_MULTIPLIER,
    SD_TAUSWORTHE_MASK,
    SD_WORDS_COUNT,
    UNIFORM_SCALE_32M1,
    WORD_MASK,
)
from ..core.models import RNGAlgorithm
from ..seeding import lcg_words, scramble
from .base import UniformGenerator, clamp_open_unit


@dataclass
class SuperDuper(UniformGenerator):
    """Super-Duper generator with state (Tausworthe word, congruential word)."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.SUPER_DUPER
    words_count: ClassVar[int] = SD_WORDS_COUNT

    _seeds: list[int] = field(default_factory=lambda: [1, 1])

    def next_uniform(self) -> float:
        i1, i2 = self._seeds
        # Tausworthe
        i1 ^= (i1 >> 15) & SD_TAUSWORTHE_MASK
        i1 ^= (i1 << 17) & WORD_MASK
        # Congruential
        i2 = (i2 * SD_CONGRUENTIAL_MULTIPLIER) & WORD_MASK
        self._seeds = [i1, i2]
        return clamp_open_unit((i1 ^ i2) * UNIFORM_SCALE_32M1)

    def seed(self, seed: int) -> None:
        self._seeds = lcg_words(scramble(seed), SD_WORDS_COUNT)
        self.repair()

    def words(self) -> list[int]:
        return list(self._seeds)

    def _assign_words(self, words: list[int]) -> None:
        self._seeds = words

    def repair(self) -> None:
        if self._seeds[0] == 0:
            self._seeds[0] = 1
        # congruential part must be odd
        self._seeds[1] |= 1

    def validate(self) -> None:
        if self._seeds[0] == 0:
            raise ValueError("Super-Duper Tausworthe word must be non-zero")
        if self._seeds[1] % 2 == 0:
            raise ValueError("Super-Duper congruential word must be odd")
