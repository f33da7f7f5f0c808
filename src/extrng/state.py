"""
GeneratorState - the state container behind one random stream.

TigerStyle:
- One owner, never shared between streams
- The uniform generator object is the state; its shape follows its algorithm
- The Box-Muller cache is explicit and cleared on every reconfiguration
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from pydantic import ValidationError

from .constants import SNAPSHOT_SIZE_BYTES_MAX
from .core.models import EngineSnapshot, NormalMethod, RNGAlgorithm
from .errors import ConfigurationError, CorruptStateError
from .uniform import UniformGenerator, make_generator

Seed = Union[int, Sequence[int]]


def apply_seed(generator: UniformGenerator, seed: Seed) -> None:
    """Seed ``generator`` from an integer or a full word vector.

    Integers go through the algorithm's scrambling rule. Word vectors replace
    the state and are repaired to satisfy the algorithm's constraints.

    Raises:
        ConfigurationError: Seed of the wrong type or a vector of the wrong length.
    """
    if isinstance(seed, bool):
        raise ConfigurationError("seed must be an integer or a sequence of integers")
    if isinstance(seed, int):
        generator.seed(seed)
        return
    if isinstance(seed, (str, bytes)) or not isinstance(seed, Sequence):
        raise ConfigurationError(
            f"seed must be an integer or a sequence of integers, got {type(seed).__name__}"
        )
    try:
        generator.load_words(seed, repair=True)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"seed vector rejected: {e}") from e


@dataclass
class GeneratorState:
    """Uniform generator, active normal method and the normal cache."""

    uniform: UniformGenerator
    normal_method: NormalMethod
    cached_normal: Optional[float] = None

    @classmethod
    def create(
        cls, algorithm: RNGAlgorithm, normal_method: NormalMethod, seed: Seed
    ) -> GeneratorState:
        """Build a seeded state.

        Raises:
            ConfigurationError: INVALID selectors or an unusable seed.
        """
        if algorithm == RNGAlgorithm.INVALID:
            raise ConfigurationError("algorithm must not be INVALID")
        if normal_method == NormalMethod.INVALID:
            raise ConfigurationError("normal method must not be INVALID")
        generator = make_generator(algorithm)
        apply_seed(generator, seed)
        return cls(uniform=generator, normal_method=normal_method)

    @property
    def algorithm(self) -> RNGAlgorithm:
        return self.uniform.algorithm

    def configure(self, algorithm: RNGAlgorithm, seed: Seed) -> None:
        """Switch to ``algorithm`` with state freshly derived from ``seed``."""
        if algorithm == RNGAlgorithm.INVALID:
            raise ConfigurationError("algorithm must not be INVALID")
        generator = make_generator(algorithm)
        apply_seed(generator, seed)
        self.uniform = generator
        self.clear_cache()

    def reseed(self, seed: Seed) -> None:
        """Re-derive the current algorithm's state from ``seed``."""
        apply_seed(self.uniform, seed)
        self.clear_cache()

    def bind_user_generator(self, source) -> None:
        """Attach the external source of a user-supplied algorithm.

        Raises:
            ConfigurationError: Built-in algorithm, or a source of the wrong shape.
        """
        if not self.algorithm.is_user_supplied:
            raise ConfigurationError(
                f"{self.algorithm.name} is built-in; external sources are only for "
                f"USER_UNIFORM and USER_POINTER"
            )
        self.uniform.bind(source)

    def clear_cache(self) -> None:
        self.cached_normal = None

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            algorithm=self.algorithm,
            normal_method=self.normal_method,
            words=self.uniform.words(),
            cached_normal=self.cached_normal,
        )

    def serialize(self) -> bytes:
        """Opaque bytes that ``restore`` turns back into this exact state."""
        return self.to_snapshot().model_dump_json().encode("utf-8")

    def restore(self, data: bytes) -> None:
        """Replace this state with a serialized one.

        The state is left untouched when the bytes are rejected.

        Raises:
            CorruptStateError: Malformed bytes, unknown tags, a word vector that
                does not fit the algorithm, or an inconsistent cache.
        """
        if not isinstance(data, (bytes, bytearray)):
            raise CorruptStateError(f"snapshot must be bytes, got {type(data).__name__}")
        if len(data) > SNAPSHOT_SIZE_BYTES_MAX:
            raise CorruptStateError(
                f"snapshot size ({len(data)} bytes) exceeds {SNAPSHOT_SIZE_BYTES_MAX} bytes"
            )
        try:
            snapshot = EngineSnapshot.model_validate_json(data)
        except ValidationError as e:
            raise CorruptStateError(f"snapshot could not be parsed: {e}") from e

        if snapshot.cached_normal is not None:
            if snapshot.normal_method != NormalMethod.BOX_MULLER:
                raise CorruptStateError("only Box-Muller snapshots may carry a cached normal")
            if not math.isfinite(snapshot.cached_normal):
                raise CorruptStateError("cached normal must be finite")

        if snapshot.algorithm == self.algorithm and snapshot.algorithm.is_user_supplied:
            # keep the caller's binding
            generator = self.uniform
        else:
            generator = make_generator(snapshot.algorithm)
        try:
            generator.load_words(snapshot.words, repair=False)
        except ValueError as e:
            raise CorruptStateError(f"snapshot state rejected: {e}") from e

        self.uniform = generator
        self.normal_method = snapshot.normal_method
        self.cached_normal = snapshot.cached_normal
