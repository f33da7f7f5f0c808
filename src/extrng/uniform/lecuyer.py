"""
L'Ecuyer (1999) combined multiple-recursive generator MRG32k3a.

Two order-3 recurrences modulo m1 and m2. The scaling by 1/(m1 + 1) already
keeps draws strictly inside (0, 1), so no endpoint clamp is applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import (
    LECUYER_A12,
    LECUYER_A13N,
    LECUYER_A21,
    LECUYER_A23N,
    LECUYER_M1,
    LECUYER_M2,
    LECUYER_WORDS_COUNT,
    UNIFORM_SCALE_LECUYER,
)
from ..core.models import RNGAlgorithm
from ..seeding import lcg_step, scramble
from .base import UniformGenerator


@dataclass
class LecuyerCMRG(UniformGenerator):
    """MRG32k3a with state (s10, s11, s12, s20, s21, s22)."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.LECUYER_CMRG
    words_count: ClassVar[int] = LECUYER_WORDS_COUNT

    _seeds: list[int] = field(default_factory=lambda: [12345] * LECUYER_WORDS_COUNT)

    def next_uniform(self) -> float:
        s = self._seeds
        p1 = (LECUYER_A12 * s[1] - LECUYER_A13N * s[0]) % LECUYER_M1
        p2 = (LECUYER_A21 * s[5] - LECUYER_A23N * s[3]) % LECUYER_M2
        self._seeds = [s[1], s[2], p1, s[4], s[5], p2]
        if p1 > p2:
            return (p1 - p2) * UNIFORM_SCALE_LECUYER
        return (p1 - p2 + LECUYER_M1) * UNIFORM_SCALE_LECUYER

    def seed(self, seed: int) -> None:
        seed = scramble(seed)
        words = []
        for _ in range(LECUYER_WORDS_COUNT):
            seed = lcg_step(seed)
            while seed >= LECUYER_M2:
                seed = lcg_step(seed)
            words.append(seed)
        self._seeds = words

    def words(self) -> list[int]:
        return list(self._seeds)

    def _assign_words(self, words: list[int]) -> None:
        self._seeds = words

    def _problems(self) -> list[str]:
        problems = []
        first, second = self._seeds[:3], self._seeds[3:]
        if not any(first) or any(word >= LECUYER_M1 for word in first):
            problems.append("first component must be non-zero and below m1")
        if not any(second) or any(word >= LECUYER_M2 for word in second):
            problems.append("second component must be non-zero and below m2")
        return problems

    def repair(self) -> None:
        if self._problems():
            self.seed(0)

    def validate(self) -> None:
        problems = self._problems()
        if problems:
            raise ValueError(f"L'Ecuyer-CMRG state invalid: {'; '.join(problems)}")
