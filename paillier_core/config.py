"""
Library configuration read from the environment.
Only defaults live here; every operation also takes explicit arguments.

Settings are loaded when paillier_core.crypto.keygen is imported, so a bad
PAILLIER_KEY_BITS or PAILLIER_PRIME_ROUNDS value makes that import fail with
InvalidParameterError.
"""

import os
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, field_validator

from paillier_core.errors import InvalidParameterError


MIN_KEY_BITS = 16


class Settings(BaseModel):
    default_key_bits: int = Field(default=4096, ge=MIN_KEY_BITS)
    prime_test_rounds: int = Field(default=16, ge=1, le=128)

    @field_validator("default_key_bits")
    @classmethod
    def _even_key_bits(cls, value: int) -> int:
        if value % 2:
            raise ValueError("key size must be an even number of bits")
        return value


def load_settings() -> Settings:
    """Build settings from PAILLIER_* environment variables."""
    try:
        return Settings(
            default_key_bits=os.getenv("PAILLIER_KEY_BITS", "4096"),
            prime_test_rounds=os.getenv("PAILLIER_PRIME_ROUNDS", "16"),
        )
    except ValidationError as exc:
        raise InvalidParameterError(f"invalid PAILLIER_* environment settings: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
