"""
extrng Core Data Models

These models define the data structures shared across the engine:
- Selectors: which uniform algorithm and which normal method are active
- Engine status: the two-phase construction state machine
- Snapshots: the persisted form of a generator state
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from extrng.constants import SNAPSHOT_FORMAT_VERSION, WORD_MASK


# =============================================================================
# Enums
# =============================================================================


class RNGAlgorithm(IntEnum):
    """Uniform generators. Integer tags are part of the persisted format."""

    WICHMANN_HILL = 0
    MARSAGLIA_MULTICARRY = 1
    SUPER_DUPER = 2
    MERSENNE_TWISTER = 3
    KNUTH_TAOCP = 4
    USER_UNIFORM = 5  # caller-supplied callback
    KNUTH_TAOCP2 = 6
    LECUYER_CMRG = 7
    INVALID = 8  # sentinel, never live
    USER_POINTER = 9  # caller-owned generator object, bound after creation

    @property
    def is_user_supplied(self) -> bool:
        """Whether draws are delegated to an external source."""
        return self in (RNGAlgorithm.USER_UNIFORM, RNGAlgorithm.USER_POINTER)


class NormalMethod(IntEnum):
    """Standard-normal transforms. Integer tags are part of the persisted format."""

    BUGGY_KINDERMAN_RAMAGE = 0  # legacy output compatibility only
    AHRENS_DIETER = 1
    BOX_MULLER = 2
    USER_NORM = 3
    INVERSION = 4
    KINDERMAN_RAMAGE = 5
    INVALID = 6  # sentinel, never live


class EngineStatus(str, Enum):
    """Two-phase construction state.

    An engine bound to a user-supplied algorithm starts UNREADY and becomes
    READY once its external source is bound.
    """

    UNREADY = "unready"
    READY = "ready"


def _parse_member(enum_cls, value):
    if isinstance(value, str) and not value.strip().isdigit():
        name = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return enum_cls[name]
        except KeyError:
            raise ValueError(f"unknown {enum_cls.__name__} name: {value!r}") from None
    return enum_cls(int(value))


def parse_algorithm(value: "RNGAlgorithm | int | str") -> RNGAlgorithm:
    """Accept an enum member, an integer tag, or a member name (any case)."""
    return _parse_member(RNGAlgorithm, value)


def parse_normal_method(value: "NormalMethod | int | str") -> NormalMethod:
    """Accept an enum member, an integer tag, or a member name (any case)."""
    return _parse_member(NormalMethod, value)


# =============================================================================
# Snapshot Models
# =============================================================================


class EngineSnapshot(BaseModel):
    """Persisted generator state.

    Enough to resume an identical draw sequence: both selectors, the full
    word vector of the uniform generator and the normal-method cache.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = SNAPSHOT_FORMAT_VERSION
    algorithm: RNGAlgorithm
    normal_method: NormalMethod
    words: list[int] = Field(default_factory=list)
    cached_normal: float | None = None

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != SNAPSHOT_FORMAT_VERSION:
            raise ValueError(f"unsupported snapshot version {value}")
        return value

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: RNGAlgorithm) -> RNGAlgorithm:
        if value == RNGAlgorithm.INVALID:
            raise ValueError("snapshot holds the invalid algorithm sentinel")
        return value

    @field_validator("normal_method")
    @classmethod
    def _check_normal_method(cls, value: NormalMethod) -> NormalMethod:
        if value == NormalMethod.INVALID:
            raise ValueError("snapshot holds the invalid normal-method sentinel")
        return value

    @field_validator("words")
    @classmethod
    def _check_words(cls, value: list[int]) -> list[int]:
        for word in value:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"state word {word} is not an unsigned 32-bit value")
        return value
