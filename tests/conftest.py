"""Shared pytest fixtures for the Paillier core test suite."""

import pytest

from paillier_core.crypto.keygen import generate_keys, keys_from_primes
from tests.utils import FIXED_P, FIXED_Q


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="session")
def fixed_keys():
    """Deterministic simple-variant key pair built from fixed 64-bit primes."""
    return keys_from_primes(FIXED_P, FIXED_Q, simple_variant=True)


@pytest.fixture(scope="session")
def fixed_keys_standard():
    return keys_from_primes(FIXED_P, FIXED_Q)


@pytest.fixture(scope="session")
def keypair():
    """Freshly generated 256-bit standard key pair."""
    return generate_keys(256)
