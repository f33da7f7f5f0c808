"""
extrng - Reproducible random streams for model fitting

Uniform and standard-normal variates that match, draw for draw, the streams
of the reference statistical environment for a chosen algorithm and seed.

Usage:
    from extrng import RNGAlgorithm, NormalMethod, create_engine, draw_normal

    engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.INVERSION, seed=1)
    z = draw_normal(engine)  # -0.6264538...

User-supplied generators are bound after creation:

    engine = create_engine(RNGAlgorithm.USER_POINTER, NormalMethod.INVERSION)
    bind_external_uniform(engine, my_generator)  # any object with next_uniform()
"""

from .core.models import EngineSnapshot, EngineStatus, NormalMethod, RNGAlgorithm
from .errors import ConfigurationError, CorruptStateError, NotReadyError, RngError
from .state import GeneratorState, Seed
from .engine import (
    Engine,
    bind_external_normal,
    bind_external_uniform,
    create_engine,
    create_engine_from_settings,
    draw_normal,
    draw_uniform,
    reseed,
    restore,
    set_algorithm,
    set_normal_method,
    snapshot,
)
from .variates import (
    draw_bernoulli,
    draw_exponential,
    draw_index,
    draw_normal_with,
    draw_uniform_in_range,
)

__all__ = [
    # Selectors
    "RNGAlgorithm",
    "NormalMethod",
    "EngineStatus",
    # State
    "GeneratorState",
    "EngineSnapshot",
    "Seed",
    # Errors
    "RngError",
    "ConfigurationError",
    "NotReadyError",
    "CorruptStateError",
    # Engine
    "Engine",
    "create_engine",
    "create_engine_from_settings",
    "bind_external_uniform",
    "bind_external_normal",
    "draw_uniform",
    "draw_normal",
    "reseed",
    "set_algorithm",
    "set_normal_method",
    "snapshot",
    "restore",
    # Derived variates
    "draw_exponential",
    "draw_index",
    "draw_uniform_in_range",
    "draw_bernoulli",
    "draw_normal_with",
]
