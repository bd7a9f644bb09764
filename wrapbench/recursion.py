"""Recursive benchmark functions and the properties checked on them."""

from __future__ import annotations

import math

from wrapbench.uint64 import (
    MASK,
    MODULUS,
    two_to_the_power_of,
    verifier_assert,
    verifier_error,
    wrap,
)

MULT_LIMIT = 46340
CAP = 5


def is_odd(n: int) -> bool:
    """Parity of n as the mutual odd/even recursion decides it."""
    return wrap(n) % 2 == 1


def is_even(n: int) -> bool:
    """Complement of is_odd."""
    return not is_odd(n)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number modulo 2**64 (fibonacci(0) == 0)."""
    n = wrap(n)
    a, b = 0, 1
    for bit in bin(n)[2:]:
        a, b = (a * (2 * b - a)) % MODULUS, (a * a + b * b) % MODULUS
        if bit == "1":
            a, b = b, (a + b) % MODULUS
    return a


def fibo1(n: int) -> int:
    """First half of the two-function Fibonacci recursion."""
    return fibonacci(n)


def fibo2(n: int) -> int:
    """Second half of the two-function Fibonacci recursion."""
    return fibonacci(n)


def f91(x: int) -> int:
    """McCarthy's 91 function on unsigned 64-bit values."""
    x = wrap(x)
    depth = 1
    while depth:
        if x > 100:
            x -= 10
            depth -= 1
        else:
            x += 11
            depth += 1
    return x


def mult(n: int, m: int) -> int:
    """Product by repeated addition, wrapped to 64 bits."""
    return wrap(wrap(n) * wrap(m))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction; gcd(0, b) == b."""
    return math.gcd(wrap(a), wrap(b))


def identity(x: int) -> int:
    """Identity by counting down and back up."""
    return wrap(x)


def capped_identity(x: int) -> int:
    """Identity that saturates at 5."""
    return min(wrap(x), CAP)


def capped_identity2(x: int) -> int:
    """Companion of capped_identity in the mutual recursion."""
    return min(wrap(x), CAP)


def sum_by_steps(n: int, m: int) -> int:
    """Move n units onto m one at a time."""
    return wrap(wrap(n) + wrap(m))


def hanoi(n: int) -> int:
    """Optimal number of moves for n disks, wrapped to 64 bits."""
    n = wrap(n)
    if n == 0:
        raise ValueError("hanoi needs at least one disk")
    return wrap(pow(2, n, MODULUS) - 1)


def apply_hanoi(n: int, source: int = 1, target: int = 3, via: int = 2) -> int:
    """Count the moves the recursive algorithm makes; the pegs do not change it."""
    moves = 0
    # After 64 levels the wrapped count is saturated at all ones.
    for _ in range(min(wrap(n), 64)):
        moves = wrap(2 * moves + 1)
    return moves


def check_even_odd(n: int) -> bool:
    """is_odd(n) must agree with n % 2."""
    n = wrap(n)
    result = is_odd(n)
    verifier_assert(int(result) == n % 2)
    return result


def check_fibonacci05(x: int) -> int | None:
    """Fibonacci of 19..25 must reach 6765; it fails at 19."""
    x = wrap(x)
    if x > 25:
        return None
    result = fibonacci(x)
    if x < 19 or result >= 6765:
        return result
    verifier_error()


def check_mccarthy91_1(x: int) -> int:
    """f91 is 91 or x - 10 above 102; fails at 102."""
    x = wrap(x)
    result = f91(x)
    if result == 91:
        return result
    if x > 102 and result == wrap(x - 10):
        return result
    verifier_error()


def check_mccarthy91_2(x: int) -> int:
    """f91 is 91 or x - 10 above 101."""
    x = wrap(x)
    result = f91(x)
    if result == 91:
        return result
    if x > 101 and result == wrap(x - 10):
        return result
    verifier_error()


def check_mult_commutative(m: int, n: int) -> int | None:
    """Multiplication must commute for factors up to 46340."""
    m, n = wrap(m), wrap(n)
    if m > MULT_LIMIT or n > MULT_LIMIT:
        return None
    res1 = mult(m, n)
    res2 = mult(n, m)
    if res1 != res2 and m > 0 and n > 0:
        verifier_error()
    return res1


def check_fibo_2calls(x: int) -> int:
    """From 15 on, fibo1 exceeds 610 except exactly at 15."""
    x = wrap(x)
    result = fibo1(x)
    if x < 15 or result > 610:
        return result
    if x != 15:
        verifier_error()
    return result


def check_fibo_2calls_25() -> int:
    """fibo1(25) must be 75025."""
    result = fibo1(25)
    verifier_assert(result == 75025)
    return result


def check_capped_identity(n: int) -> int:
    """The capped identity never yields 10."""
    result = capped_identity(n)
    if result == 10:
        verifier_error()
    return result


def check_identity_1000(n: int) -> int:
    """The identity yields 1000 for input 1000, which is the error."""
    result = identity(n)
    if result == 1000:
        verifier_error()
    return result


def check_rec_hanoi01(n: int) -> int | None:
    """Counted moves must equal the closed count for 1..31 disks."""
    n = wrap(n)
    if n < 1 or n > 31:
        return None
    counter = apply_hanoi(n, 1, 3, 2)
    result = hanoi(n)
    verifier_assert(result == counter)
    return result


def check_rec_hanoi03(n: int) -> int | None:
    """hanoi(n) + 1 must equal 2**n without wrapping to zero."""
    n = wrap(n)
    if n < 1:
        return None
    result = hanoi(n)
    following = wrap(result + 1)
    if following > 0 and following == two_to_the_power_of(n):
        return result
    verifier_error()


def check_sum_non_eq_1(a: int, b: int) -> int:
    """Stepwise sum must equal a + b."""
    result = sum_by_steps(a, b)
    if result != wrap(a + b):
        verifier_error()
    return result


def check_sum_non_eq_3(a: int, b: int) -> int:
    """Fails whenever the stepwise sum equals a + b, which is always."""
    result = sum_by_steps(a, b)
    if result == wrap(a + b):
        verifier_error()
    return result


__all__ = [name for name in dir() if not name.startswith("_") and name != "MASK"]