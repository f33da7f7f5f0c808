"""
Box-Muller transform.

Each pair of uniforms yields two independent normals. The first is returned,
the second waits in ``GeneratorState.cached_normal`` for the next call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from ..constants import NORMAL_BOX_MULLER_RADIUS_FLOOR
from ..core.models import NormalMethod
from .base import UniformDraw

if TYPE_CHECKING:
    from ..state import GeneratorState


class BoxMuller:
    """Box-Muller with a one-value cache held on the generator state."""

    method: ClassVar[NormalMethod] = NormalMethod.BOX_MULLER

    def next_normal(self, state: GeneratorState, uniform: UniformDraw) -> float:
        # a pending exact zero counts as empty, as in the reference stream
        if state.cached_normal is not None and state.cached_normal != 0.0:
            value = state.cached_normal
            state.cached_normal = None
            return value
        theta = 2 * math.pi * uniform()
        radius = math.sqrt(-2 * math.log(uniform())) + NORMAL_BOX_MULLER_RADIUS_FLOOR
        state.cached_normal = radius * math.sin(theta)
        return radius * math.cos(theta)
