"""
Wichmann-Hill (1982) combined multiplicative congruential generator.

Three small prime-modulus generators; the draw is the fractional part of the
sum of their normalised outputs. Period about 7e12.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import WH_MODULI, WH_MULTIPLIERS, WH_WORDS_COUNT
from ..core.models import RNGAlgorithm
from ..seeding import lcg_words, scramble
from .base import UniformGenerator, clamp_open_unit


@dataclass
class WichmannHill(UniformGenerator):
    """Wichmann-Hill generator with state (I1, I2, I3)."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.WICHMANN_HILL
    words_count: ClassVar[int] = WH_WORDS_COUNT

    _seeds: list[int] = field(default_factory=lambda: [1, 1, 1])

    def next_uniform(self) -> float:
        value = 0.0
        for j in range(WH_WORDS_COUNT):
            self._seeds[j] = self._seeds[j] * WH_MULTIPLIERS[j] % WH_MODULI[j]
            value += self._seeds[j] / WH_MODULI[j]
        return clamp_open_unit(value - int(value))

    def seed(self, seed: int) -> None:
        self._seeds = lcg_words(scramble(seed), WH_WORDS_COUNT)
        self.repair()

    def words(self) -> list[int]:
        return list(self._seeds)

    def _assign_words(self, words: list[int]) -> None:
        self._seeds = words

    def repair(self) -> None:
        """Reduce each word by its modulus; a zero word would stick at zero."""
        for j in range(WH_WORDS_COUNT):
            self._seeds[j] %= WH_MODULI[j]
            if self._seeds[j] == 0:
                self._seeds[j] = 1

    def validate(self) -> None:
        for j in range(WH_WORDS_COUNT):
            if not 0 < self._seeds[j] < WH_MODULI[j]:
                raise ValueError(f"Wichmann-Hill word {j} out of range: {self._seeds[j]}")
