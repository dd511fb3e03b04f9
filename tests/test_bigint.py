import pytest

from paillier_core.crypto.bigint import (
    SMALL_PRIMES,
    generate_prime,
    invertm,
    is_probable_prime,
    powm,
    random_below,
    to_bigint,
)
from paillier_core.errors import InvalidParameterError, NotInvertibleError
from tests.utils import FIXED_P, FIXED_Q


@pytest.mark.parametrize(
    "value, expected",
    [(42, 42), (-7, -7), ("123", 123), (" -45 ", -45), ("+8", 8), (str(FIXED_P), FIXED_P)],
)
def test_to_bigint_accepts_int_and_decimal_string(value, expected):
    assert to_bigint(value) == expected


@pytest.mark.parametrize("value", ["", "12a", "0x10", "1_000", "1.5", "- 3"])
def test_to_bigint_rejects_malformed_strings(value):
    with pytest.raises(InvalidParameterError):
        to_bigint(value)


@pytest.mark.parametrize("value", [True, 1.0, None, b"12"])
def test_to_bigint_rejects_other_types(value):
    with pytest.raises(TypeError):
        to_bigint(value)


def test_random_below_bounds():
    for _ in range(200):
        assert 0 <= random_below(5) < 5


def test_invertm():
    assert (invertm(3, 11) * 3) % 11 == 1
    with pytest.raises(NotInvertibleError):
        invertm(6, 9)
    with pytest.raises(ArithmeticError):
        invertm(0, 9)


def test_powm_negative_exponent():
    assert powm(3, -1, 11) == invertm(3, 11)
    assert powm(2, 10, 1000) == 24
    with pytest.raises(NotInvertibleError):
        powm(3, -2, 9)


def test_small_prime_table():
    assert len(SMALL_PRIMES) == 168
    assert SMALL_PRIMES[:5] == [2, 3, 5, 7, 11]
    assert SMALL_PRIMES[-1] == 997


def test_is_probable_prime():
    assert is_probable_prime(FIXED_P)
    assert is_probable_prime(FIXED_Q)
    assert is_probable_prime(2)
    assert is_probable_prime(31)
    assert is_probable_prime(1009)
    assert not is_probable_prime(1)
    assert not is_probable_prime(FIXED_P * FIXED_Q)
    # Carmichael number
    assert not is_probable_prime(561)
    # no factor below 1000, decided by Miller-Rabin
    assert not is_probable_prime(1009 * 1013)


@pytest.mark.parametrize("bits", [2, 3, 8, 32, 128])
def test_generate_prime_has_exact_bit_length(bits):
    p = generate_prime(bits)
    assert p.bit_length() == bits
    assert is_probable_prime(p)


def test_generate_prime_rejects_tiny_sizes():
    with pytest.raises(InvalidParameterError):
        generate_prime(1)
