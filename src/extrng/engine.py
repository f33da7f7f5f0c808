"""
Engine - dispatch and configuration for one random stream.

TigerStyle:
- Selectors are validated at the boundary, never inside draws
- User-supplied algorithms use two-phase construction: UNREADY until bound
- Every seed is logged so any stream can be replayed

Usage:
    engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.INVERSION, 1)
    u = draw_uniform(engine)
    z = draw_normal(engine)

    state = snapshot(engine)
    ...
    restore(engine, state)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .core.models import (
    EngineStatus,
    NormalMethod,
    RNGAlgorithm,
    parse_algorithm,
    parse_normal_method,
)
from .errors import ConfigurationError, NotReadyError
from .normal import NormalGenerator, UserNorm, builtin_normal
from .seeding import time_to_seed
from .state import GeneratorState, Seed
from .uniform import UniformSource

logger = logging.getLogger(__name__)


def _coerce_algorithm(value: RNGAlgorithm | int | str) -> RNGAlgorithm:
    try:
        return parse_algorithm(value)
    except (KeyError, ValueError, TypeError) as e:
        raise ConfigurationError(f"unknown uniform algorithm: {value!r}") from e


def _coerce_normal_method(value: NormalMethod | int | str) -> NormalMethod:
    try:
        return parse_normal_method(value)
    except (KeyError, ValueError, TypeError) as e:
        raise ConfigurationError(f"unknown normal method: {value!r}") from e


def _warn_on_weak_pairing(algorithm: RNGAlgorithm, normal_method: NormalMethod) -> None:
    if normal_method == NormalMethod.BUGGY_KINDERMAN_RAMAGE:
        logger.warning("Buggy version of Kinderman-Ramage generator used")
    if algorithm == RNGAlgorithm.MARSAGLIA_MULTICARRY and normal_method in (
        NormalMethod.KINDERMAN_RAMAGE,
        NormalMethod.BUGGY_KINDERMAN_RAMAGE,
        NormalMethod.AHRENS_DIETER,
    ):
        logger.warning(
            f"{algorithm.name} is not suitable for normal method {normal_method.name}"
        )


@dataclass
class Engine:
    """A single-owner random stream.

    TigerStyle:
    - No internal locking: one thread drives one engine
    - Draws never raise for built-in algorithms once configured
    - External sources are called at most once per uniform request
    """

    _state: GeneratorState = field(repr=False)
    _user_norm: UserNorm = field(default_factory=UserNorm, repr=False)
    _last_seed: Optional[int] = None

    @classmethod
    def create(
        cls,
        algorithm: RNGAlgorithm | int | str,
        normal_method: NormalMethod | int | str,
        seed: Optional[Seed] = None,
    ) -> Engine:
        """Create an engine.

        Args:
            algorithm: Uniform generator; INVALID is rejected.
            normal_method: Normal transform; INVALID is rejected.
            seed: Integer seed, full word vector, or None for a clock seed.

        Raises:
            ConfigurationError: Invalid selectors or seed.
        """
        algorithm = _coerce_algorithm(algorithm)
        normal_method = _coerce_normal_method(normal_method)
        seed = cls._resolve_seed(seed)
        state = GeneratorState.create(algorithm, normal_method, seed)
        engine = cls(_state=state, _last_seed=seed if isinstance(seed, int) else None)
        _warn_on_weak_pairing(algorithm, normal_method)
        logger.info(
            f"Created engine: algorithm={algorithm.name} normal={normal_method.name} "
            f"seed={engine._describe_seed(seed)} status={engine.status.value}"
        )
        return engine

    @staticmethod
    def _resolve_seed(seed: Optional[Seed]) -> Seed:
        if seed is None:
            seed = time_to_seed()
            logger.info(f"Generated seed from clock (replay with seed={seed})")
        return seed

    @staticmethod
    def _describe_seed(seed: Seed) -> str:
        if isinstance(seed, int):
            return str(seed)
        return f"<{len(seed)}-word vector>"

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def algorithm(self) -> RNGAlgorithm:
        return self._state.algorithm

    @property
    def normal_method(self) -> NormalMethod:
        return self._state.normal_method

    @property
    def status(self) -> EngineStatus:
        uniform = self._state.uniform
        if self.algorithm.is_user_supplied and not uniform.is_bound:
            return EngineStatus.UNREADY
        return EngineStatus.READY

    @property
    def seed(self) -> Optional[int]:
        """The last integer seed applied, None after a vector seed or restore."""
        return self._last_seed

    @property
    def state(self) -> GeneratorState:
        return self._state

    # -------------------------------------------------------------------------
    # Binding
    # -------------------------------------------------------------------------

    def bind_external_uniform(self, source: UniformSource | Callable[[], float]) -> None:
        """Bind the external uniform source of a user-supplied algorithm.

        USER_UNIFORM takes a zero-argument callable, USER_POINTER an object
        with ``next_uniform()`` (held weakly; the caller keeps it alive).

        Raises:
            ConfigurationError: The algorithm is built-in, or the source has
                the wrong shape.
        """
        self._state.bind_user_generator(source)
        logger.info(f"Bound external uniform source for {self.algorithm.name}")

    def bind_external_normal(self, callback: Callable[[], float]) -> None:
        """Register the callback used by NormalMethod.USER_NORM."""
        self._user_norm.bind(callback)

    # -------------------------------------------------------------------------
    # Draws
    # -------------------------------------------------------------------------

    def _require_ready(self) -> None:
        if self.status is EngineStatus.UNREADY:
            raise NotReadyError(
                f"{self.algorithm.name} engine has no external uniform source bound"
            )

    def _normal_generator(self) -> NormalGenerator:
        if self.normal_method == NormalMethod.USER_NORM:
            return self._user_norm
        return builtin_normal(self.normal_method)

    def draw_uniform(self) -> float:
        """Next draw from the bound uniform generator, in (0, 1) for built-ins."""
        self._require_ready()
        return self._state.uniform.next_uniform()

    def draw_normal(self) -> float:
        """Next standard-normal draw from the active normal method."""
        self._require_ready()
        return self._normal_generator().next_normal(
            self._state, self._state.uniform.next_uniform
        )

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def reseed(self, seed: Optional[Seed] = None) -> None:
        """Re-derive the current algorithm's state; clears the normal cache."""
        seed = self._resolve_seed(seed)
        self._state.reseed(seed)
        self._last_seed = seed if isinstance(seed, int) else None
        logger.info(f"Reseeded {self.algorithm.name} engine with seed={self._describe_seed(seed)}")

    def set_algorithm(
        self, algorithm: RNGAlgorithm | int | str, seed: Optional[Seed] = None
    ) -> None:
        """Switch uniform algorithm.

        Old-shaped state means nothing to a different algorithm, so a fresh
        seed is mandatory. Any external binding is dropped.

        Raises:
            ConfigurationError: Missing seed or invalid algorithm.
        """
        algorithm = _coerce_algorithm(algorithm)
        if seed is None:
            raise ConfigurationError(
                f"switching to {algorithm.name} requires a fresh seed"
            )
        self._state.configure(algorithm, seed)
        self._last_seed = seed if isinstance(seed, int) else None
        _warn_on_weak_pairing(algorithm, self.normal_method)
        logger.info(
            f"Switched engine to algorithm={algorithm.name} seed={self._describe_seed(seed)} "
            f"status={self.status.value}"
        )

    def set_normal_method(self, normal_method: NormalMethod | int | str) -> None:
        """Switch normal method; clears the normal cache."""
        normal_method = _coerce_normal_method(normal_method)
        if normal_method == NormalMethod.INVALID:
            raise ConfigurationError("normal method must not be INVALID")
        self._state.clear_cache()
        self._state.normal_method = normal_method
        _warn_on_weak_pairing(self.algorithm, normal_method)
        logger.info(f"Switched engine to normal={normal_method.name}")

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def snapshot(self) -> bytes:
        """Opaque state bytes for ``restore``."""
        data = self._state.serialize()
        logger.debug(f"Snapshot of {self.algorithm.name} engine: {len(data)} bytes")
        return data

    def restore(self, data: bytes) -> None:
        """Resume from ``snapshot`` bytes.

        Raises:
            CorruptStateError: The bytes are malformed; the engine is unchanged.
        """
        self._state.restore(data)
        self._last_seed = None
        logger.debug(
            f"Restored {self.algorithm.name}/{self.normal_method.name} engine "
            f"from {len(data)} bytes"
        )


# =============================================================================
# Functional interface
# =============================================================================


def create_engine(
    algorithm: RNGAlgorithm | int | str,
    normal_method: NormalMethod | int | str,
    seed: Optional[Seed] = None,
) -> Engine:
    """Create an engine; see ``Engine.create``."""
    return Engine.create(algorithm, normal_method, seed)


def create_engine_from_settings(settings=None) -> Engine:
    """Create an engine from ``extrng.core.config`` settings."""
    from .core.config import get_settings

    settings = settings or get_settings()
    return Engine.create(settings.algorithm, settings.normal_method, settings.seed)


def bind_external_uniform(handle: Engine, source: UniformSource | Callable[[], float]) -> None:
    handle.bind_external_uniform(source)


def bind_external_normal(handle: Engine, callback: Callable[[], float]) -> None:
    handle.bind_external_normal(callback)


def draw_uniform(handle: Engine) -> float:
    return handle.draw_uniform()


def draw_normal(handle: Engine) -> float:
    return handle.draw_normal()


def reseed(handle: Engine, seed: Optional[Seed] = None) -> None:
    handle.reseed(seed)


def set_algorithm(
    handle: Engine, algorithm: RNGAlgorithm | int | str, seed: Optional[Seed] = None
) -> None:
    handle.set_algorithm(algorithm, seed)


def set_normal_method(handle: Engine, normal_method: NormalMethod | int | str) -> None:
    handle.set_normal_method(normal_method)


def snapshot(handle: Engine) -> bytes:
    return handle.snapshot()


def restore(handle: Engine, data: bytes) -> None:
    handle.restore(data)
