"""
Shared test fixtures for the extrng test suite.

Provides fixtures for:
- Engines seeded the way the reference environment seeds them
- Scripted uniform sources that replay a fixed sequence of draws
- Settings isolation
"""

import pytest

from extrng import Engine, NormalMethod, RNGAlgorithm, create_engine
from extrng.core.config import get_settings


# =============================================================================
# Scripted Sources
# =============================================================================


class ScriptedUniform:
    """Replays a fixed list of uniforms, cycling when exhausted.

    Usable both as a USER_UNIFORM callback and as a USER_POINTER object.
    """

    def __init__(self, values):
        assert len(values) > 0, "need at least one value"
        self.values = list(values)
        self.calls = 0

    def next_uniform(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    __call__ = next_uniform


@pytest.fixture
def scripted():
    """Factory for scripted uniform sources."""
    return ScriptedUniform


@pytest.fixture
def scripted_engine(scripted):
    """Factory: an engine whose uniforms come from a fixed script.

    Returns (engine, source) so tests can count consumed draws.
    """

    def make(values, normal_method=NormalMethod.INVERSION):
        source = scripted(values)
        engine = create_engine(RNGAlgorithm.USER_UNIFORM, normal_method, seed=0)
        engine.bind_external_uniform(source)
        return engine, source

    return make


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def mt_engine() -> Engine:
    """Mersenne-Twister with inversion, seed 1: the reference defaults."""
    return create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.INVERSION, seed=1)


BUILTIN_ALGORITHMS = [
    RNGAlgorithm.WICHMANN_HILL,
    RNGAlgorithm.MARSAGLIA_MULTICARRY,
    RNGAlgorithm.SUPER_DUPER,
    RNGAlgorithm.MERSENNE_TWISTER,
    RNGAlgorithm.KNUTH_TAOCP,
    RNGAlgorithm.KNUTH_TAOCP2,
    RNGAlgorithm.LECUYER_CMRG,
]

BUILTIN_NORMAL_METHODS = [
    NormalMethod.BUGGY_KINDERMAN_RAMAGE,
    NormalMethod.AHRENS_DIETER,
    NormalMethod.BOX_MULLER,
    NormalMethod.INVERSION,
    NormalMethod.KINDERMAN_RAMAGE,
]


@pytest.fixture(params=BUILTIN_ALGORITHMS, ids=lambda a: a.name)
def builtin_algorithm(request) -> RNGAlgorithm:
    """Each built-in uniform algorithm in turn."""
    return request.param


@pytest.fixture(params=BUILTIN_NORMAL_METHODS, ids=lambda m: m.name)
def builtin_normal_method(request) -> NormalMethod:
    """Each built-in normal method in turn."""
    return request.param


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Keep EXTRNG_* variables and the settings cache from leaking between tests."""
    for name in ("EXTRNG_ALGORITHM", "EXTRNG_NORMAL_METHOD", "EXTRNG_SEED"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
