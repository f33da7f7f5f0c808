"""
User-supplied uniform sources.

- ``UserUniform``: a zero-argument callback returning a float.
- ``UserPointer``: an externally owned object with ``next_uniform()``. Held
  through a weak reference; the caller keeps it alive.

Neither keeps local state, and neither validates the range of what the
caller returns.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from ..core.models import RNGAlgorithm
from ..errors import ConfigurationError, NotReadyError
from .base import UniformGenerator, UniformSource


@dataclass
class UserUniform(UniformGenerator):
    """Delegates every draw to a registered callback."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.USER_UNIFORM
    words_count: ClassVar[int] = 0

    _callback: Optional[Callable[[], float]] = None

    @property
    def is_bound(self) -> bool:
        return self._callback is not None

    def bind(self, source: Callable[[], float]) -> None:
        if not callable(source):
            raise ConfigurationError("user uniform source must be a zero-argument callable")
        self._callback = source

    def next_uniform(self) -> float:
        if self._callback is None:
            raise NotReadyError("no user uniform callback has been bound")
        return self._callback()

    def seed(self, seed: int) -> None:
        """Seeding belongs to the caller's callback."""

    def words(self) -> list[int]:
        return []

    def _assign_words(self, words: list[int]) -> None:
        pass


@dataclass
class UserPointer(UniformGenerator):
    """Delegates every draw to a caller-owned generator object."""

    algorithm: ClassVar[RNGAlgorithm] = RNGAlgorithm.USER_POINTER
    words_count: ClassVar[int] = 0

    _ref: Optional[weakref.ref] = None

    @property
    def is_bound(self) -> bool:
        return self._ref is not None and self._ref() is not None

    def bind(self, source: UniformSource) -> None:
        if not isinstance(source, UniformSource):
            raise ConfigurationError("user pointer source must provide next_uniform()")
        try:
            self._ref = weakref.ref(source)
        except TypeError as e:
            raise ConfigurationError(
                f"user pointer source {type(source).__name__} does not support weak references"
            ) from e

    def next_uniform(self) -> float:
        source = self._ref() if self._ref is not None else None
        if source is None:
            raise NotReadyError("no live user generator is bound")
        return source.next_uniform()

    def seed(self, seed: int) -> None:
        """The external generator manages its own state."""

    def words(self) -> list[int]:
        return []

    def _assign_words(self, words: list[int]) -> None:
        pass
