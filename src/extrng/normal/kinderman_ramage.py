"""
Kinderman and Ramage (1976) mixture sampler for standard normal deviates.

Reference:
    Kinderman, A.J. and Ramage, J.G. (1976). Computer generation of normal
    random variables. JASA 71, 893-896.

Two variants are kept side by side:

- ``KindermanRamage``: the corrected sampler (Leydold's fix).
- ``BuggyKindermanRamage``: the historical code, reproduced bit for bit so
  old streams can be regenerated. Its central-region slope constant is
  mistyped (1.13113163544180 instead of 1.131131635444180), and region 1
  neither skips negative candidates nor applies the g(t) acceptance test,
  which distorts the density near the region boundaries.
"""

from __future__ import annotations

import math
from typing import ClassVar

from ..core.models import NormalMethod
from .base import UniformDraw, rejection_attempts

A = 2.216035867166471
C1 = 0.398942280401433
C2 = 0.180025191068563


def _g(x: float) -> float:
    return C1 * math.exp(-x * x / 2.0) - C2 * (A - x)


class KindermanRamage:
    """Corrected Kinderman-Ramage sampler."""

    method: ClassVar[NormalMethod] = NormalMethod.KINDERMAN_RAMAGE
    central_slope: ClassVar[float] = 1.131131635444180
    legacy_region1: ClassVar[bool] = False

    def next_normal(self, state, uniform: UniformDraw) -> float:
        u1 = uniform()
        if u1 < 0.884070402298758:
            u2 = uniform()
            return A * (self.central_slope * u1 + u2 - 1)

        if u1 >= 0.973310954173898:  # tail
            for _ in rejection_attempts(self.method):
                u2 = uniform()
                u3 = uniform()
                tt = A * A - 2 * math.log(u3)
                if u2 * u2 < (A * A) / tt:
                    return math.sqrt(tt) if u1 < 0.986655477086949 else -math.sqrt(tt)

        if u1 >= 0.958720824790463:  # region 3
            for _ in rejection_attempts(self.method):
                u2 = uniform()
                u3 = uniform()
                tt = A - 0.630834801921960 * min(u2, u3)
                if max(u2, u3) <= 0.755591531667601:
                    return tt if u2 < u3 else -tt
                if 0.034240503750111 * abs(u2 - u3) <= _g(tt):
                    return tt if u2 < u3 else -tt

        if u1 >= 0.911312780288703:  # region 2
            for _ in rejection_attempts(self.method):
                u2 = uniform()
                u3 = uniform()
                tt = 0.479727404222441 + 1.105473661022070 * min(u2, u3)
                if max(u2, u3) <= 0.872834976671790:
                    return tt if u2 < u3 else -tt
                if 0.049264496342790 * abs(u2 - u3) <= _g(tt):
                    return tt if u2 < u3 else -tt

        return self._region1(uniform)

    def _region1(self, uniform: UniformDraw) -> float:
        for _ in rejection_attempts(self.method):
            u2 = uniform()
            u3 = uniform()
            tt = 0.479727404222441 - 0.595507138015940 * min(u2, u3)
            if self.legacy_region1:
                if max(u2, u3) <= 0.805577924423817:
                    return tt if u2 < u3 else -tt
                continue
            if tt < 0.0:
                continue
            if max(u2, u3) <= 0.805577924423817:
                return tt if u2 < u3 else -tt
            if 0.053377549506886 * abs(u2 - u3) <= _g(tt):
                return tt if u2 < u3 else -tt
        raise AssertionError("unreachable")


class BuggyKindermanRamage(KindermanRamage):
    """Historical Kinderman-Ramage code, kept for stream compatibility."""

    method: ClassVar[NormalMethod] = NormalMethod.BUGGY_KINDERMAN_RAMAGE
    central_slope: ClassVar[float] = 1.13113163544180
    legacy_region1: ClassVar[bool] = True
