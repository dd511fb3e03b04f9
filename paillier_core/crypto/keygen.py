"""
Paillier key generation.

Two variants are supported:
- standard: random generator g, lambda = lcm(p-1, q-1)
- simple: g = n + 1, lambda = (p-1)(q-1); valid when p and q have the same bit length
"""

import logging

from anyio import to_thread

from paillier_core.config import MIN_KEY_BITS, get_settings
from paillier_core.crypto.bigint import generate_prime, invertm, to_bigint
from paillier_core.crypto.numtheory import L, lcm, select_generator
from paillier_core.crypto.paillier import KeyPair, PrivateKey, PublicKey
from paillier_core.errors import InvalidParameterError

logger = logging.getLogger(__name__)

DEFAULT_KEY_BITS = get_settings().default_key_bits


def _check_bit_length(bit_length: int) -> None:
    if isinstance(bit_length, bool) or not isinstance(bit_length, int):
        raise InvalidParameterError(f"bit length must be an int, got {type(bit_length).__name__}")
    if bit_length < MIN_KEY_BITS:
        raise InvalidParameterError(f"bit length must be at least {MIN_KEY_BITS}, got {bit_length}")
    if bit_length % 2:
        # two primes of bit_length // 2 bits never give an odd-length modulus
        raise InvalidParameterError(f"bit length must be even, got {bit_length}")


def keys_from_primes(p: int, q: int, simple_variant: bool = False) -> KeyPair:
    """Build a matched key pair from two distinct primes."""
    p = to_bigint(p)
    q = to_bigint(q)
    if p == q:
        raise InvalidParameterError("p and q must be distinct primes")
    n = p * q
    n_sq = n * n
    phi = (p - 1) * (q - 1)

    if simple_variant:
        g = n + 1
        lam = phi
        mu = invertm(lam, n)
    else:
        g = select_generator(n, n_sq)
        lam = lcm(p - 1, q - 1)
        mu = invertm(L(pow(g, lam, n_sq), n), n)

    public_key = PublicKey(n=n, g=g)
    private_key = PrivateKey(lam=lam, mu=mu, public_key=public_key, factors=(p, q))
    return KeyPair(public_key, private_key)


def generate_keys(bit_length: int = DEFAULT_KEY_BITS, simple_variant: bool = False) -> KeyPair:
    """
    Generate a Paillier key pair whose modulus has exactly `bit_length` bits.

    Prime pairs are drawn until their product has the requested size; errors
    from prime generation or inversion propagate to the caller.
    """
    _check_bit_length(bit_length)
    logger.info("generating %d-bit Paillier keys (simple_variant=%s)", bit_length, simple_variant)

    attempts = 0
    while True:
        attempts += 1
        p = generate_prime(bit_length // 2)
        q = generate_prime(bit_length // 2)
        n = p * q
        if p != q and n.bit_length() == bit_length:
            break
        logger.debug("rejected prime pair #%d: modulus has %d bits", attempts, n.bit_length())

    return keys_from_primes(p, q, simple_variant)


async def generate_keys_async(bit_length: int = DEFAULT_KEY_BITS, simple_variant: bool = False) -> KeyPair:
    """Same as generate_keys, run in a worker thread."""
    return await to_thread.run_sync(generate_keys, bit_length, simple_variant)
