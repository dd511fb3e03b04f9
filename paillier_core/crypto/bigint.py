"""
Big-integer engine used by the Paillier core.
Arithmetic is Python's native int; this module adds the pieces int does not
provide directly: coercion, bounded randomness, inverses and prime search.
"""

import re
import secrets
from typing import Optional, Union

from paillier_core.config import get_settings
from paillier_core.errors import InvalidParameterError, NotInvertibleError


IntLike = Union[int, str]

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def to_bigint(value: IntLike) -> int:
    """Coerce an int or its canonical decimal string into an int."""
    if isinstance(value, bool):
        raise TypeError("bool is not an integer value")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidParameterError(f"not a decimal integer: {value!r}")
        return int(text, 10)
    raise TypeError(f"expected int or decimal str, got {type(value).__name__}")


def random_below(n: int) -> int:
    """Uniform random integer in [0, n)."""
    return secrets.randbelow(n)


def invertm(a: int, m: int) -> int:
    try:
        return pow(a, -1, m)
    except ValueError as exc:
        raise NotInvertibleError(f"element is not invertible modulo a {m.bit_length()}-bit modulus") from exc


def powm(base: int, exp: int, m: int) -> int:
    """Modular exponentiation; a negative exponent goes through the inverse of base."""
    if exp < 0:
        return pow(invertm(base, m), -exp, m)
    return pow(base, exp, m)


def _primes_below(limit: int) -> list[int]:
    sieve = bytearray([1]) * limit
    sieve[0:2] = b"\x00\x00"
    for i in range(2, int(limit ** 0.5) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, limit, i)))
    return [i for i, flag in enumerate(sieve) if flag]


SMALL_PRIMES = _primes_below(1000)


def _is_witness(a: int, d: int, s: int, n: int) -> bool:
    """True when base a proves n = d * 2^s + 1 composite."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int, rounds: Optional[int] = None) -> bool:
    """Trial division by the primes below 1000, then Miller-Rabin with random bases."""
    if rounds is None:
        rounds = get_settings().prime_test_rounds
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p
    # no factor below 1000 and n < 997^2 means n is prime
    if n < SMALL_PRIMES[-1] ** 2:
        return True

    s = ((n - 1) & -(n - 1)).bit_length() - 1
    d = (n - 1) >> s
    return not any(_is_witness(secrets.randbelow(n - 3) + 2, d, s, n) for _ in range(rounds))


def generate_prime(bits: int) -> int:
    """Probable prime with exactly `bits` bits (top bit forced)."""
    if bits < 2:
        raise InvalidParameterError(f"cannot generate a {bits}-bit prime")
    while True:
        candidate = secrets.randbits(bits) | 1 | (1 << (bits - 1))
        if is_probable_prime(candidate):
            return candidate
