"""
Seed expansion rules.

A user seed is a single integer. Before it reaches a generator it is reduced
to an unsigned 32-bit word and scrambled by fifty steps of the 69069
congruential generator; the generator then draws its words from further
steps of the same recurrence.
"""

from __future__ import annotations

import os
import time

from .constants import (
    SEED_LCG_INCREMENT,
    SEED_LCG_MULTIPLIER,
    SEED_SCRAMBLE_ROUNDS_COUNT,
    WORD_MASK,
)


def to_word(value: int) -> int:
    """Reduce any Python int to an unsigned 32-bit word (C cast semantics)."""
    return value & WORD_MASK


def lcg_step(seed: int) -> int:
    """One step of ``seed = 69069 * seed + 1`` in unsigned 32-bit arithmetic."""
    return (SEED_LCG_MULTIPLIER * seed + SEED_LCG_INCREMENT) & WORD_MASK


def scramble(seed: int) -> int:
    """Apply the initial scrambling to a user seed.

    Args:
        seed: Any integer; negative values wrap like a C int cast.

    Returns:
        The scrambled unsigned 32-bit seed.
    """
    seed = to_word(seed)
    for _ in range(SEED_SCRAMBLE_ROUNDS_COUNT):
        seed = lcg_step(seed)
    return seed


def lcg_words(seed: int, count: int) -> list[int]:
    """Fill ``count`` words by continuing the recurrence from ``seed``."""
    assert count >= 0, "count must be non-negative"
    words = []
    for _ in range(count):
        seed = lcg_step(seed)
        words.append(seed)
    return words


def time_to_seed() -> int:
    """Derive a seed from the wall clock and the process id.

    Used when a caller asks for an engine without a seed. The result is not
    reproducible, so callers log it.
    """
    now_ns = time.time_ns()
    secs, usecs = divmod(now_ns // 1000, 1_000_000)
    seed = ((usecs << 16) ^ secs) & WORD_MASK
    seed ^= (os.getpid() << 16) & WORD_MASK
    return seed
