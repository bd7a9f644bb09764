"""Unsigned 64-bit arithmetic helpers and the verifier failure hooks."""

from __future__ import annotations

from functools import lru_cache

BITS = 64
MODULUS = 1 << BITS
MASK = MODULUS - 1
INT64_MIN = 1 << (BITS - 1)
INT64_MAX = INT64_MIN - 1


class VerifierError(Exception):
    """Raised when a checked property of a benchmark does not hold."""


def wrap(value: int) -> int:
    """Reduce an integer to the unsigned 64-bit range."""
    return value & MASK


def to_signed(value: int) -> int:
    """Read an unsigned 64-bit value as a two's complement signed integer."""
    value = wrap(value)
    return value - MODULUS if value >= INT64_MIN else value


def signed_less_than(a: int, b: int) -> bool:
    """Compare two 64-bit words as signed integers."""
    return wrap(a + INT64_MIN) < wrap(b + INT64_MIN)


def verifier_error() -> None:
    """Signal that an error location was reached.

    The error location traps on a division by zero; that trap is reported
    as a VerifierError.
    """
    numerator, denominator = 10, 0
    try:
        numerator // denominator
    except ZeroDivisionError as exc:
        raise VerifierError("error location reached") from exc


def verifier_assert(cond: int) -> None:
    """Raise VerifierError when the condition is false."""
    if not cond:
        verifier_error()


@lru_cache(maxsize=None)
def power_of_two_table() -> tuple[int, ...]:
    """Return the powers of two from 2**0 to 2**63."""
    table = [1]
    for _ in range(1, BITS):
        table.append(wrap(table[-1] * 2))
    return tuple(table)


def two_to_the_power_of(p: int) -> int:
    """Look up 2**p; exponents outside 0..63 are an error."""
    if not 0 <= p < BITS:
        verifier_error()
    return power_of_two_table()[p]