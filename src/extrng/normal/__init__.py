"""
Normal variate family.

The stateless methods are shared singletons; ``UserNorm`` carries a callback
and is created per engine.
"""

from ..core.models import NormalMethod
from ..errors import ConfigurationError
from .base import NormalGenerator, UniformDraw, rejection_attempts
from .inversion import Inversion, qnorm
from .box_muller import BoxMuller
from .ahrens_dieter import AhrensDieter
from .kinderman_ramage import BuggyKindermanRamage, KindermanRamage
from .user import UserNorm

BUILTIN_NORMALS: dict[NormalMethod, NormalGenerator] = {
    NormalMethod.BUGGY_KINDERMAN_RAMAGE: BuggyKindermanRamage(),
    NormalMethod.AHRENS_DIETER: AhrensDieter(),
    NormalMethod.BOX_MULLER: BoxMuller(),
    NormalMethod.INVERSION: Inversion(),
    NormalMethod.KINDERMAN_RAMAGE: KindermanRamage(),
}


def builtin_normal(method: NormalMethod) -> NormalGenerator:
    """Look up a built-in method.

    Raises:
        ConfigurationError: For USER_NORM (engine-owned), INVALID or unknown tags.
    """
    generator = BUILTIN_NORMALS.get(method)
    if generator is None:
        raise ConfigurationError(f"no built-in normal method for {method!r}")
    return generator


__all__ = [
    "BUILTIN_NORMALS",
    "builtin_normal",
    "NormalGenerator",
    "UniformDraw",
    "rejection_attempts",
    "Inversion",
    "qnorm",
    "BoxMuller",
    "AhrensDieter",
    "KindermanRamage",
    "BuggyKindermanRamage",
    "UserNorm",
]
