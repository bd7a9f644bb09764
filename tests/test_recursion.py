import math

import pytest
from hypothesis import given, strategies as st

from wrapbench.recursion import (
    apply_hanoi,
    capped_identity,
    capped_identity2,
    check_capped_identity,
    check_even_odd,
    check_fibo_2calls,
    check_fibo_2calls_25,
    check_fibonacci05,
    check_identity_1000,
    check_mccarthy91_1,
    check_mccarthy91_2,
    check_mult_commutative,
    check_rec_hanoi01,
    check_rec_hanoi03,
    check_sum_non_eq_1,
    check_sum_non_eq_3,
    f91,
    fibo1,
    fibo2,
    fibonacci,
    gcd,
    hanoi,
    identity,
    is_even,
    is_odd,
    mult,
    sum_by_steps,
)
from wrapbench.uint64 import VerifierError, two_to_the_power_of, wrap

U64 = st.integers(min_value=0, max_value=2**64 - 1)

FIBS = [
    1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610,
    987, 1597, 2584, 4181, 6765, 10946, 17711, 28657, 46368, 75025,
    121393, 196418, 317811, 514229, 832040,
]


@pytest.mark.parametrize("n", range(1, 31))
def test_fibonacci_matches_listed_values(n):
    assert fibonacci(n) == FIBS[n - 1]
    assert fibo1(n) == FIBS[n - 1]
    assert fibo2(n) == FIBS[n - 1]


def test_fibonacci_of_zero():
    assert fibonacci(0) == 0


@given(st.integers(min_value=2, max_value=10**6))
def test_fibonacci_recurrence_wraps(n):
    assert fibonacci(n) == wrap(fibonacci(n - 1) + fibonacci(n - 2))


@given(U64)
def test_even_and_odd_are_complements(n):
    assert is_even(n) != is_odd(n)
    assert int(is_odd(n)) == n % 2


@given(st.integers(min_value=0, max_value=2000))
def test_check_even_odd_holds(n):
    assert int(check_even_odd(n)) == n % 2


@given(st.integers(min_value=0, max_value=100))
def test_f91_small_is_91(x):
    assert f91(x) == 91


@given(st.integers(min_value=101, max_value=2**64 - 1))
def test_f91_large_subtracts_ten(x):
    assert f91(x) == x - 10


def test_mccarthy91_1_fails_at_102():
    with pytest.raises(VerifierError):
        check_mccarthy91_1(102)


@given(U64)
def test_mccarthy91_2_never_fails(x):
    result = check_mccarthy91_2(x)
    assert result == 91 or result == x - 10


@given(st.integers(0, 46340), st.integers(0, 46340))
def test_mult_commutes(m, n):
    assert mult(m, n) == mult(n, m)
    assert check_mult_commutative(m, n) == mult(m, n)


def test_mult_commutative_filters_large():
    assert check_mult_commutative(46341, 3) is None


@given(U64, U64)
def test_gcd_agrees_with_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_zero_returns_other():
    assert gcd(0, 20) == 20
    assert gcd(20, 0) == 20


@given(U64)
def test_identity_and_caps(x):
    assert identity(x) == x
    assert capped_identity(x) == min(x, 5)
    assert capped_identity2(x) == capped_identity(x)


def test_check_capped_identity_saturates():
    assert check_capped_identity(2500) == 5


def test_identity_1000_fails():
    with pytest.raises(VerifierError):
        check_identity_1000(1000)


@given(U64, U64)
def test_sum_by_steps_wraps(a, b):
    assert sum_by_steps(a, b) == wrap(a + b)
    assert check_sum_non_eq_1(a, b) == sum_by_steps(a, b)


def test_sum_non_eq_3_always_fails():
    with pytest.raises(VerifierError):
        check_sum_non_eq_3(3, 4)


@pytest.mark.parametrize("n", range(1, 64))
def test_hanoi_is_power_minus_one(n):
    assert hanoi(n) + 1 == two_to_the_power_of(n)
    assert apply_hanoi(n) == hanoi(n)


def test_hanoi_zero_disks_rejected():
    with pytest.raises(ValueError):
        hanoi(0)


def test_apply_hanoi_zero_disks():
    assert apply_hanoi(0, 1, 3, 2) == 0


def test_rec_hanoi01_range():
    assert check_rec_hanoi01(31) == hanoi(31)
    assert check_rec_hanoi01(0) is None
    assert check_rec_hanoi01(32) is None


def test_rec_hanoi03_holds_to_63_and_fails_at_64():
    assert check_rec_hanoi03(63) == 9223372036854775807
    assert check_rec_hanoi03(0) is None
    with pytest.raises(VerifierError):
        check_rec_hanoi03(64)


def test_fibonacci05_fails_only_at_19():
    with pytest.raises(VerifierError):
        check_fibonacci05(19)
    assert check_fibonacci05(20) == 6765
    assert check_fibonacci05(26) is None


@pytest.mark.parametrize("x", range(0, 26))
def test_fibo_2calls_never_fails(x):
    assert check_fibo_2calls(x) == fibonacci(x)


def test_fibo_2calls_25():
    assert check_fibo_2calls_25() == 75025