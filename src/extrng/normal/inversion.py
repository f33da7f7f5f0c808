"""
Inversion: push a uniform draw through the inverse normal CDF.

A single double from the uniform generator carries at most 32 random bits,
too few for the tails, so two draws are combined into one value on a 2^27
grid before inverting.
"""

from __future__ import annotations

import math
from typing import ClassVar

from ..constants import NORMAL_INVERSION_BIG
from ..core.models import NormalMethod
from .base import UniformDraw


def qnorm(p: float) -> float:
    """Standard normal quantile function.

    Wichura's algorithm AS 241 (PPND16), accurate to about 1 part in 10^16.

    Args:
        p: Lower-tail probability.

    Returns:
        x such that P(Z <= x) = p; -inf/inf at the endpoints, nan outside.
    """
    if math.isnan(p) or p < 0.0 or p > 1.0:
        return math.nan
    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf

    q = p - 0.5
    if abs(q) <= 0.425:
        r = 0.180625 - q * q
        return (
            q * (((((((r * 2509.0809287301226727 +
                       33430.575583588128105) * r + 67265.770927008700853) * r +
                     45921.953931549871457) * r + 13731.693765509461125) * r +
                   1971.5909503065514427) * r + 133.14166789178437745) * r +
                 3.387132872796366608)
            / (((((((r * 5226.495278852545925 +
                     28729.085735721942674) * r + 39307.89580009271061) * r +
                   21213.794301586595867) * r + 5394.1960214247511077) * r +
                 687.1870074920579083) * r + 42.313330701600911252) * r + 1.0)
        )

    # closer than 0.075 from {0, 1}
    r = p if q < 0 else 0.5 - p + 0.5
    r = math.sqrt(-math.log(r))
    if r <= 5.0:
        r += -1.6
        val = ((((((((r * 7.7454501427834140764e-4 +
                      0.0227238449892691845833) * r + 0.24178072517745061177) *
                    r + 1.27045825245236838258) * r +
                   3.64784832476320460504) * r + 5.7694972214606914055) *
                 r + 4.6303378461565452959) * r +
                1.42343711074968357734)
               / (((((((r *
                        1.05075007164441684324e-9 + 5.475938084995344946e-4) *
                       r + 0.0151986665636164571966) * r +
                      0.14810397642748007459) * r + 0.68976733498510000455) *
                    r + 1.6763848301838038494) * r +
                   2.05319162663775882187) * r + 1.0))
    else:
        # very close to 0 or 1
        r += -5.0
        val = ((((((((r * 2.01033439929228813265e-7 +
                      2.71155556874348757815e-5) * r +
                     0.0012426609473880784386) * r + 0.026532189526576123093) *
                   r + 0.29656057182850489123) * r +
                  1.7848265399172913358) * r + 5.4637849111641143699) *
                r + 6.6579046435011037772)
               / (((((((r *
                        2.04426310338993978564e-15 + 1.4215117583164458887e-7) *
                       r + 1.8463183175100546818e-5) * r +
                      7.868691311456132591e-4) * r + 0.0148753612908506148525)
                    * r + 0.13692988092273580531) * r +
                   0.59983220655588793769) * r + 1.0))
    return -val if q < 0.0 else val


class Inversion:
    """Stateless inversion method, two uniforms per draw."""

    method: ClassVar[NormalMethod] = NormalMethod.INVERSION

    def next_normal(self, state, uniform: UniformDraw) -> float:
        u = uniform()
        u = int(NORMAL_INVERSION_BIG * u) + uniform()
        return qnorm(u / NORMAL_INVERSION_BIG)
