"""Arithmetic in the Goldilocks prime field, with elements held as plain ints."""

P = 0xFFFF_FFFF_0000_0001
"""The Goldilocks prime, 2**64 - 2**32 + 1."""

ZERO = 0
ONE = 1

_U64_LIMIT = 1 << 64


def to_goldilocks(value: int) -> int:
    """Turn a raw 64-bit word into its canonical field element."""
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"{value} is not a 64-bit unsigned word")
    return value % P


def add(a: int, b: int) -> int:
    """Return a + b in the field."""
    return (a + b) % P


def sub(a: int, b: int) -> int:
    """Return a - b in the field."""
    return (a - b) % P


def mul(a: int, b: int) -> int:
    """Return a * b in the field."""
    return (a * b) % P


def neg(a: int) -> int:
    """Return -a in the field."""
    return (-a) % P


def inverse(a: int) -> int:
    """Return the multiplicative inverse of a."""
    if a % P == 0:
        raise ZeroDivisionError("zero has no inverse in the Goldilocks field")
    return pow(a, P - 2, P)


def exp(a: int, power: int) -> int:
    """Return a raised to a non-negative power."""
    if power < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, power, P)