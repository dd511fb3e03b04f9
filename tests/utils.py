"""Constants shared across tests."""

# Two primes just below 2^64; their product is a 128-bit modulus.
FIXED_P = (1 << 64) - 59
FIXED_Q = (1 << 64) - 83
