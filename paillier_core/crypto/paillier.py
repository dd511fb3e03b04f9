"""
Paillier public and private keys.

Plaintexts are signed integers in (-n/2, n/2). Decryption returns the
centered representative of the residue, so negative values round-trip.
"""

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

from paillier_core.crypto.bigint import IntLike, invertm, powm, random_below, to_bigint
from paillier_core.crypto.numtheory import L, centered_residue
from paillier_core.errors import EncryptionRangeError, InvalidParameterError


@dataclass(frozen=True)
class PublicKey:
    n: int
    g: int
    n_sq: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        n = to_bigint(self.n)
        if n < 3:
            raise InvalidParameterError(f"modulus must be at least 3, got {n}")
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "g", to_bigint(self.g))
        object.__setattr__(self, "n_sq", n * n)

    @property
    def bit_length(self) -> int:
        return self.n.bit_length()

    def _random_blinding(self) -> int:
        while True:
            r = random_below(self.n)
            if r > 1 and math.gcd(r, self.n) == 1:
                return r

    def encrypt(self, m: IntLike, r: Optional[IntLike] = None) -> int:
        """
        Encrypt a signed plaintext.

        m must satisfy -n//2 <= m <= n//2. A fresh blinding factor is drawn
        on every call unless r is given explicitly.
        """
        m = to_bigint(m)
        half = self.n // 2
        if not -half <= m <= half:
            raise EncryptionRangeError("value out of encryptable range")
        if r is None:
            r = self._random_blinding()
        else:
            r = to_bigint(r)
            if not 1 < r < self.n or math.gcd(r, self.n) != 1:
                raise InvalidParameterError("blinding factor must be a unit of Z/nZ greater than 1")
        c1 = powm(self.g, m, self.n_sq)
        c2 = pow(r, self.n, self.n_sq)
        return (c1 * c2) % self.n_sq

    def addition(self, *ciphertexts: IntLike) -> int:
        """
        Encryption of the sum of the given ciphertexts' plaintexts.
        With no arguments the result is 1, which is not a blinded encryption.
        """
        acc = 1
        for c in ciphertexts:
            acc = (acc * to_bigint(c)) % self.n_sq
        return acc

    def subtraction(self, c1: IntLike, c2: IntLike) -> int:
        return (to_bigint(c1) * invertm(to_bigint(c2), self.n_sq)) % self.n_sq

    def multiply(self, c: IntLike, k: IntLike) -> int:
        # k is not range checked; it wraps mod n under decryption
        return powm(to_bigint(c), to_bigint(k), self.n_sq)


@dataclass(frozen=True)
class PrivateKey:
    lam: int = field(repr=False)
    mu: int = field(repr=False)
    public_key: PublicKey
    factors: Optional[Tuple[int, int]] = field(default=None, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "lam", to_bigint(self.lam))
        object.__setattr__(self, "mu", to_bigint(self.mu))
        if self.factors is not None:
            p, q = self.factors
            object.__setattr__(self, "factors", (to_bigint(p), to_bigint(q)))

    @property
    def n(self) -> int:
        return self.public_key.n

    @property
    def bit_length(self) -> int:
        return self.public_key.bit_length

    @property
    def p(self) -> Optional[int]:
        return self.factors[0] if self.factors is not None else None

    @property
    def q(self) -> Optional[int]:
        return self.factors[1] if self.factors is not None else None

    def decrypt(self, c: IntLike) -> int:
        n = self.public_key.n
        u = L(pow(to_bigint(c), self.lam, self.public_key.n_sq), n)
        x = (u * self.mu) % n
        return centered_residue(x, n)


class KeyPair(NamedTuple):
    public_key: PublicKey
    private_key: PrivateKey
