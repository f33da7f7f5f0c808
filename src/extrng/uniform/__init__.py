"""
Uniform generator family.

Usage:
    from extrng.uniform import make_generator
    from extrng.core.models import RNGAlgorithm

    generator = make_generator(RNGAlgorithm.MERSENNE_TWISTER)
    generator.seed(1)
    u = generator.next_uniform()
"""

from ..core.models import RNGAlgorithm
from ..errors import ConfigurationError
from .base import UniformGenerator, UniformSource, clamp_open_unit
from .wichmann_hill import WichmannHill
from .marsaglia import MarsagliaMulticarry
from .super_duper import SuperDuper
from .mersenne import MersenneTwister
from .knuth import KnuthTAOCP, KnuthTAOCP2, ran_array, ran_start_1997, ran_start_2002
from .lecuyer import LecuyerCMRG
from .user import UserPointer, UserUniform

GENERATORS: dict[RNGAlgorithm, type[UniformGenerator]] = {
    RNGAlgorithm.WICHMANN_HILL: WichmannHill,
    RNGAlgorithm.MARSAGLIA_MULTICARRY: MarsagliaMulticarry,
    RNGAlgorithm.SUPER_DUPER: SuperDuper,
    RNGAlgorithm.MERSENNE_TWISTER: MersenneTwister,
    RNGAlgorithm.KNUTH_TAOCP: KnuthTAOCP,
    RNGAlgorithm.USER_UNIFORM: UserUniform,
    RNGAlgorithm.KNUTH_TAOCP2: KnuthTAOCP2,
    RNGAlgorithm.LECUYER_CMRG: LecuyerCMRG,
    RNGAlgorithm.USER_POINTER: UserPointer,
}


def make_generator(algorithm: RNGAlgorithm) -> UniformGenerator:
    """Create an unseeded generator for ``algorithm``.

    Raises:
        ConfigurationError: For the INVALID sentinel or an unknown tag.
    """
    generator_cls = GENERATORS.get(algorithm)
    if generator_cls is None:
        raise ConfigurationError(f"no uniform generator for algorithm {algorithm!r}")
    return generator_cls()


__all__ = [
    "GENERATORS",
    "make_generator",
    "clamp_open_unit",
    "UniformGenerator",
    "UniformSource",
    "WichmannHill",
    "MarsagliaMulticarry",
    "SuperDuper",
    "MersenneTwister",
    "KnuthTAOCP",
    "KnuthTAOCP2",
    "LecuyerCMRG",
    "UserUniform",
    "UserPointer",
    "ran_array",
    "ran_start_1997",
    "ran_start_2002",
]
