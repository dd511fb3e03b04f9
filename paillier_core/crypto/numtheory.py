import math
from typing import Optional

from paillier_core.crypto.bigint import random_below


def lcm(a: int, b: int) -> int:
    return abs(a * b) // math.gcd(a, b)


def L(x: int, n: int) -> int:
    """Paillier L-function: (x - 1) / n, floor division."""
    return (x - 1) // n


def centered_residue(x: int, n: int) -> int:
    """Map x mod n into the signed range (-n/2, n/2]."""
    half = n // 2
    return ((x + half) % n) - half


def _random_unit(n: int) -> int:
    """Uniform nonzero element of [0, n) coprime to n."""
    while True:
        x = random_below(n)
        if x != 0 and math.gcd(x, n) == 1:
            return x


def select_generator(n: int, n2: Optional[int] = None) -> int:
    """
    Random generator for the standard key variant.
    (alpha*n + 1) has order dividing n and beta^n has order dividing lambda,
    so L(g^lambda mod n^2, n) stays well defined. Both alpha and beta are
    units mod n, so g is a unit mod n^2 and alpha * lambda is invertible mod n.
    """
    if n2 is None:
        n2 = n * n
    alpha = _random_unit(n)
    beta = _random_unit(n)
    return ((alpha * n + 1) * pow(beta, n, n2)) % n2
