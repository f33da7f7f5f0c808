"""
Derived variates built on an engine's uniform and normal streams.

These are the draws a sampling routine needs beyond the two primitives,
implemented with the same consumption pattern as the reference environment
so that mixed sequences stay reproducible.
"""

from __future__ import annotations

import math

from .engine import Engine

# q[k-1] = sum(log(2)^j / j!, j = 1..k)
_EXP_Q = (
    0.6931471805599453,
    0.9333736875190459,
    0.9888777961838675,
    0.9984959252914960040,
    0.9998292811061389,
    0.9999833164100727,
    0.9999985508193230,
    0.9999998906925558,
    0.9999999924734159,
    0.9999999995283275,
    0.9999999999728814,
    0.9999999999985598,
    0.9999999999999289,
    0.9999999999999968,
    0.9999999999999999,
    1.0000000000000000,
)


def _open_unit(handle: Engine) -> float:
    # built-ins never leave (0, 1); user sources might
    u = handle.draw_uniform()
    while u <= 0.0 or u >= 1.0:
        u = handle.draw_uniform()
    return u


def draw_exponential(handle: Engine) -> float:
    """Standard exponential draw.

    Ahrens and Dieter (1972) algorithm SA: the integer part comes from the
    leading binary digits of one uniform, the fraction from a minimum of a
    geometrically distributed number of further uniforms.
    """
    a = 0.0
    u = _open_unit(handle)
    while True:
        u += u
        if u > 1.0:
            break
        a += _EXP_Q[0]
    u -= 1.0

    if u <= _EXP_Q[0]:
        return a + u

    i = 0
    ustar = handle.draw_uniform()
    umin = ustar
    while True:
        ustar = handle.draw_uniform()
        if umin > ustar:
            umin = ustar
        i += 1
        if u <= _EXP_Q[i]:
            break
    return a + umin * _EXP_Q[0]


def _random_bits(handle: Engine, bits: int) -> int:
    value = 0
    for _ in range(0, bits + 1, 16):
        chunk = int(math.floor(handle.draw_uniform() * 65536))
        value = 65536 * value + chunk
    return value & ((1 << bits) - 1)


def draw_index(handle: Engine, n: int, rounding: bool = False) -> int:
    """Uniform integer in [0, n).

    Args:
        handle: Engine to draw from.
        n: Number of outcomes. Must be positive.
        rounding: Use the historical ``floor(n * u)`` rule, which is biased
            for large n, instead of rejection sampling over random bits.
    """
    assert n > 0, f"n ({n}) must be positive"
    if rounding:
        return int(math.floor(n * handle.draw_uniform()))
    bits = math.ceil(math.log2(n))
    while True:
        value = _random_bits(handle, bits)
        if value < n:
            return value


def draw_uniform_in_range(handle: Engine, low: float, high: float) -> float:
    """Uniform draw on (low, high); returns ``low`` without drawing when equal."""
    assert math.isfinite(low) and math.isfinite(high), "bounds must be finite"
    assert low <= high, f"low ({low}) must be <= high ({high})"
    if low == high:
        return low
    return low + (high - low) * _open_unit(handle)


def draw_bernoulli(handle: Engine, probability: float) -> bool:
    """True with the given probability, consuming one uniform."""
    assert 0.0 <= probability <= 1.0, f"probability ({probability}) must be in [0, 1]"
    return handle.draw_uniform() < probability


def draw_normal_with(handle: Engine, mean: float, sd: float) -> float:
    """Normal draw with the given mean and standard deviation.

    A zero standard deviation returns the mean without consuming a draw; a
    NaN mean or a non-finite standard deviation gives NaN, also without one.
    """
    if math.isnan(mean) or not math.isfinite(sd):
        return math.nan
    assert sd >= 0.0, f"sd ({sd}) must be non-negative"
    if sd == 0.0 or not math.isfinite(mean):
        return mean
    return mean + sd * handle.draw_normal()
