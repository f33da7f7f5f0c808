"""
UserNorm - delegates normal draws to a caller-registered callback.

No validation is applied to what the callback returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from ..core.models import NormalMethod
from ..errors import ConfigurationError, NotReadyError
from .base import UniformDraw


@dataclass
class UserNorm:
    """Callback-backed normal method; owned by one engine."""

    method: ClassVar[NormalMethod] = NormalMethod.USER_NORM

    _callback: Optional[Callable[[], float]] = None

    @property
    def is_bound(self) -> bool:
        return self._callback is not None

    def bind(self, callback: Callable[[], float]) -> None:
        if not callable(callback):
            raise ConfigurationError("user normal source must be a zero-argument callable")
        self._callback = callback

    def next_normal(self, state, uniform: UniformDraw) -> float:
        if self._callback is None:
            raise NotReadyError("no user normal callback has been bound")
        return self._callback()
