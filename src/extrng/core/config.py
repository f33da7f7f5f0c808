"""
extrng Configuration

Loads engine defaults from environment variables and an optional .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from extrng.core.models import (
    NormalMethod,
    RNGAlgorithm,
    parse_algorithm,
    parse_normal_method,
)


class Settings(BaseSettings):
    """Engine defaults loaded from environment variables.

    Selectors accept integer tags or member names, e.g.
    ``EXTRNG_ALGORITHM=mersenne_twister`` or ``EXTRNG_ALGORITHM=3``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTRNG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    algorithm: RNGAlgorithm = RNGAlgorithm.MERSENNE_TWISTER
    normal_method: NormalMethod = NormalMethod.INVERSION

    # None derives a seed from the clock; the engine logs it
    seed: Optional[int] = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value):
        if isinstance(value, (str, int)):
            return parse_algorithm(value)
        return value

    @field_validator("normal_method", mode="before")
    @classmethod
    def _parse_normal_method(cls, value):
        if isinstance(value, (str, int)):
            return parse_normal_method(value)
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
