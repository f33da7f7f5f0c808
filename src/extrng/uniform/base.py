"""
UniformGenerator - interface shared by every uniform algorithm.

TigerStyle: Each algorithm owns its own state shape. The engine never
reinterprets one algorithm's words as another's.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, Sequence, runtime_checkable

from ..constants import UNIFORM_SCALE_32M1, WORD_MASK
from ..core.models import RNGAlgorithm


@runtime_checkable
class UniformSource(Protocol):
    """Anything that can produce the next uniform draw.

    User-owned generators bound under ``RNGAlgorithm.USER_POINTER`` only need
    to satisfy this protocol.
    """

    def next_uniform(self) -> float:
        """Return the next value in (0, 1)."""
        ...


def clamp_open_unit(value: float) -> float:
    """Keep a scaled draw strictly inside (0, 1)."""
    if value <= 0.0:
        return 0.5 * UNIFORM_SCALE_32M1
    if 1.0 - value <= 0.0:
        return 1.0 - 0.5 * UNIFORM_SCALE_32M1
    return value


class UniformGenerator(ABC):
    """Base class for the built-in uniform algorithms.

    Subclasses declare ``algorithm`` and ``words_count`` and implement the
    recurrence, the seeding rule and the word-vector codec.
    """

    algorithm: ClassVar[RNGAlgorithm]
    words_count: ClassVar[int]

    @abstractmethod
    def next_uniform(self) -> float:
        """Advance the state and return a value in (0, 1)."""

    @abstractmethod
    def seed(self, seed: int) -> None:
        """Expand an integer seed into a full valid state."""

    @abstractmethod
    def words(self) -> list[int]:
        """Return the state as unsigned 32-bit words."""

    @abstractmethod
    def _assign_words(self, words: list[int]) -> None:
        """Store an already length-checked word vector."""

    def repair(self) -> None:
        """Force the stored words to satisfy the algorithm's constraints.

        The default accepts any words. Called after a seed vector is loaded.
        """

    def validate(self) -> None:
        """Raise ValueError when the stored words cannot drive the recurrence."""

    def load_words(self, words: Sequence[int], repair: bool) -> None:
        """Replace the state with ``words``.

        Args:
            words: Unsigned 32-bit words, exactly ``words_count`` of them.
            repair: Fix up invalid words (seed vectors) instead of rejecting
                them (snapshots).

        Raises:
            ValueError: Wrong length, or invalid words with ``repair=False``.
        """
        words = [int(word) & WORD_MASK for word in words]
        if len(words) != self.words_count:
            raise ValueError(
                f"{self.algorithm.name} needs {self.words_count} state words, got {len(words)}"
            )
        self._assign_words(words)
        if repair:
            self.repair()
        else:
            self.validate()
