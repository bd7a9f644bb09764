"""Loop benchmarks and the properties checked on them.

Each ``check_*`` function takes the values the benchmark would choose
nondeterministically as explicit arguments.  It returns the benchmark's
result, or ``None`` where the benchmark returns early.  It raises
:class:`~wrapbench.uint64.VerifierError` when the checked property fails.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wrapbench.uint64 import signed_less_than, verifier_assert, verifier_error, wrap

LARGE_INT = 2000
NESTED_LIMIT = 100
MULTIVAR_BOUND = 1024
SUM01_STEP = 2
SUM01_CAP = 10
SUM01_2_LIMIT = 1000
COUNT_UP_DOWN_MAX = 2000
SIMPLE_MAX = 65535
SUM02_MAX = 10000
INDEX_VALUE_MAX = 1000
CHAR_MAX = 255


def _in_interval(value: int, low: int, high: int, name: str) -> int:
    if not low <= value <= high:
        raise ValueError(f"{name} must lie within {low}..{high}, got {value}")
    return value


def check_array_3(values: Sequence[int]) -> int:
    """Skip over nonzero entries; the index must end at no more than half the length.

    A zero entry stops the index for good, so the scan never finishes.
    """
    words = [wrap(v) for v in values]
    if 0 in words:
        raise ValueError("a zero entry keeps the scan from terminating")
    i = len(words)
    verifier_assert(i <= len(words) // 2)
    return i


def check_count_by_nondet(steps: Iterable[int]) -> int | None:
    """Advance by steps in 1..1999 until reaching 2000; at most 2000 steps are taken."""
    it = iter(steps)
    i = 0
    k = 0
    while i < LARGE_INT:
        try:
            j = wrap(next(it))
        except StopIteration:
            raise ValueError("ran out of steps before reaching the limit") from None
        if j < 1 or j >= LARGE_INT:
            return None
        i += j
        k += 1
    verifier_assert(k <= LARGE_INT)
    return k


def _count_up_down(n: int) -> int:
    n = _in_interval(wrap(n), 0, COUNT_UP_DOWN_MAX, "n")
    x, y = n, 0
    # Every decrement of x is matched by an increment of y.
    y += x
    return y


def check_count_up_down_1(n: int) -> int:
    """Counting x down to zero counts y up to n."""
    n = wrap(n)
    y = _count_up_down(n)
    verifier_assert(y == n)
    return y


def check_count_up_down_2(n: int) -> int:
    """Claims y differs from n after the count, which never holds."""
    n = wrap(n)
    y = _count_up_down(n)
    verifier_assert(y != n)
    return y


def check_half(k: int) -> int | None:
    """Counting the even numbers below 2k gives k."""
    k = wrap(k)
    if k > LARGE_INT or signed_less_than(k, wrap(-LARGE_INT)):
        return None
    limit = wrap(2 * k)
    n = 0
    i = 0
    while signed_less_than(i, limit):
        if i % 2 == 0:
            n += 1
        i += 1
    if signed_less_than(k, 0):
        verifier_assert(n == 0)
        return n
    if n != k:
        verifier_error()
    return n


def _reverse_with_terminator(chars: Sequence[int]) -> tuple[list[int], list[int]]:
    original = list(chars)
    if original:
        original[-1] = 0
    return original, original[::-1]


def check_invert_string_3(chars: Sequence[int]) -> list[int]:
    """Reverse a zero-terminated string of bytes; it must mirror the original."""
    words = [_in_interval(wrap(c), 0, CHAR_MAX, "character") for c in chars]
    original, reversed_ = _reverse_with_terminator(words)
    for front, back in zip(original, reversed(reversed_)):
        verifier_assert(front == back)
    return reversed_


def check_invert_string_4(chars: Sequence[int]) -> list[int]:
    """Reverse a string whose i-th entry is at most its length minus i.

    The reversed string must not contain the length itself, which fails
    when the first entry equals the length.
    """
    size = len(chars)
    words = [
        _in_interval(wrap(c), 0, size - i, f"character {i}")
        for i, c in enumerate(chars)
    ]
    _, reversed_ = _reverse_with_terminator(words)
    for value in reversed_:
        verifier_assert(value != size)
    return reversed_


def check_jain_1(increments: Iterable[int]) -> int:
    """Adding even amounts to 1 never reaches zero."""
    x = 1
    for r in increments:
        x = wrap(x + 2 * wrap(r))
        verifier_assert(x != 0)
    return x


def check_jain_2(pairs: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Two odd counters grown by even amounts never sum to 1."""
    x = y = 1
    for a, b in pairs:
        x = wrap(x + 2 * wrap(a))
        y = wrap(y + 2 * wrap(b))
        verifier_assert(wrap(x + y) != 1)
    return x, y


def check_index_values(values: Iterable[int]) -> list[int] | None:
    """Each stored value must exceed its index; a value that does not ends the run early."""
    stored: list[int] = []
    for index, r in enumerate(values):
        r = _in_interval(wrap(r), 0, INDEX_VALUE_MAX, "value")
        if r <= index:
            return None
        stored.append(r)
    for index, value in enumerate(stored):
        verifier_assert(value > index)
    return stored


def _multivar(x: int, y: int) -> tuple[int, int]:
    if x < MULTIVAR_BOUND:
        steps = MULTIVAR_BOUND - x
        x += steps
        y = wrap(y + steps)
    return x, y


def check_multivar_1(x: int) -> int:
    """Two counters starting equal stay equal."""
    x = wrap(x)
    x, y = _multivar(x, x)
    verifier_assert(x == y)
    return x


def check_multivar_2(x: int) -> int:
    """Two counters one apart are claimed equal, which never holds."""
    x = wrap(x)
    x, y = _multivar(x, wrap(x + 1))
    verifier_assert(x == y)
    return x


def check_nested_1(n: int, m: int) -> int | None:
    """Two nested loops of 10..100 iterations run the body at least 100 times."""
    n, m = wrap(n), wrap(m)
    if n < 10 or n > NESTED_LIMIT or m < 10 or m > NESTED_LIMIT:
        return None
    k = sum(m for _ in range(n))
    verifier_assert(k >= NESTED_LIMIT)
    return k


def check_nested_modified(n: int, m: int, start: int) -> int:
    """Nested loops of 30..100 iterations, the outer starting at 0..2, run at least 80 times."""
    n = _in_interval(wrap(n), 30, 100, "n")
    m = _in_interval(wrap(m), 30, 100, "m")
    start = _in_interval(wrap(start), 0, 2, "start")
    k = sum(m for _ in range(start, n))
    verifier_assert(k >= 80)
    return k


def check_phases(y: int) -> int | None:
    """Square x while that stays below y, then step up to y; x must end at y."""
    y = wrap(y)
    if y == 0:
        return None
    x = 2
    while x < y and x < y // x:
        x = x * x
    # Once squaring would overshoot, every later step is an increment.
    if x < y:
        x = y
    verifier_assert(x == y)
    return x


def _step_by_two(n: int) -> int:
    n = _in_interval(wrap(n), 0, SIMPLE_MAX, "n")
    return n + n % 2


def check_simple_3_1(n: int) -> int:
    """Claims stepping by two from 0 ends on an odd number, which never holds."""
    x = _step_by_two(n)
    verifier_assert(x % 2)
    return x


def check_simple_3_2(n: int) -> int:
    """Stepping by two from 0 ends on an even number."""
    x = _step_by_two(n)
    verifier_assert(x % 2 == 0)
    return x


def _sum_verdict(sn: int, n: int) -> int:
    if sn == wrap(n * SUM01_STEP) or sn == 0:
        return sn
    verifier_error()


def check_sum01_1(n: int) -> int:
    """Adds 2 only for the first nine steps, so the sum is 2n only up to n = 9."""
    n = wrap(n)
    sn = SUM01_STEP * min(n, SUM01_CAP - 1)
    return _sum_verdict(sn, n)


def check_sum01_2(n: int) -> int | None:
    """Adding 2 for each of n steps below 1000 gives 2n."""
    n = wrap(n)
    if n >= SUM01_2_LIMIT:
        return None
    sn = sum(SUM01_STEP for _ in range(n))
    return _sum_verdict(sn, n)


def check_sum02(n: int) -> int:
    """The sum 0 + 1 + ... + n must equal Gauss's formula."""
    n = _in_interval(wrap(n), 0, SUM02_MAX, "n")
    sn = sum(range(n + 1))
    gauss = n * (n + 1) // 2
    if sn != gauss and sn != 0:
        verifier_error()
    return sn


__all__ = [name for name in dir() if name.startswith("check_")]