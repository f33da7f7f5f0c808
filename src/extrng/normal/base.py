"""
NormalGenerator - interface shared by the standard-normal transforms.

TigerStyle: Rejection loops are bounded. Exceeding the bound is an
implementation fault, never a user-visible retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Iterator, Protocol

from ..constants import NORMAL_REJECTION_ITERATIONS_MAX
from ..core.models import NormalMethod

if TYPE_CHECKING:
    from ..state import GeneratorState

UniformDraw = Callable[[], float]


class NormalGenerator(Protocol):
    """Turns draws from the bound uniform generator into N(0, 1) draws."""

    method: ClassVar[NormalMethod]

    def next_normal(self, state: GeneratorState, uniform: UniformDraw) -> float:
        """Return the next standard-normal draw.

        Args:
            state: Generator state; only caching methods touch it.
            uniform: The bound uniform generator's draw function.
        """
        ...


def rejection_attempts(method: NormalMethod) -> Iterator[int]:
    """Yield attempt numbers for a rejection loop, then fail loudly.

    Theoretical rejection probabilities are far from one, so running out of
    attempts means the uniform source or the implementation is broken.
    """
    yield from range(NORMAL_REJECTION_ITERATIONS_MAX)
    raise AssertionError(
        f"{method.name} exceeded {NORMAL_REJECTION_ITERATIONS_MAX} rejection iterations"
    )
