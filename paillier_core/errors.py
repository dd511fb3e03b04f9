"""Exceptions raised by the Paillier core."""


class PaillierError(Exception):
    """Base class for every error raised by this library."""


class InvalidParameterError(PaillierError, ValueError):
    """A caller-supplied value is outside what the operation accepts."""


class EncryptionRangeError(InvalidParameterError):
    """Plaintext does not lie in the encryptable range (-n/2, n/2)."""


class NotInvertibleError(PaillierError, ArithmeticError):
    """Modular inverse requested for an element sharing a factor with the modulus."""
