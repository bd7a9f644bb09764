# wrapbench

wrapbench is a collection of small benchmark programs for program
verification. The programs work on 64-bit unsigned integers that wrap
around. Each benchmark is a plain Python function. It takes the
benchmark's nondeterministic choices as arguments. You can run one
concrete case directly, or pass the function to a property-based tester
such as hypothesis.

## Installation

```
pip install .
```

To install the test tools (pytest and hypothesis) as well, run
`pip install .[test]`.

## Modules

### `wrapbench.uint64`

This module provides the wrapping arithmetic and the failure hooks.

- `wrap(value)` reduces an integer modulo 2**64.
- `to_signed(value)` reads a 64-bit word as a two's complement integer.
- `signed_less_than(a, b)` compares two words as signed integers.
- `power_of_two_table()` returns the tuple of powers of two from 2**0 to
  2**63.
- `two_to_the_power_of(p)` looks up 2**p. An exponent outside 0..63 is an
  error.
- `verifier_error()` always raises `VerifierError`.
- `verifier_assert(cond)` raises `VerifierError` when `cond` is false.

The module also exports the constants `BITS`, `MODULUS`, `MASK`,
`INT64_MIN` and `INT64_MAX`.

### `wrapbench.recursion`

This module holds the recursive benchmarks. Each function is computed
directly, and the results are wrapped to 64 bits.

- `is_odd` and `is_even` give parity.
- `fibonacci`, `fibo1` and `fibo2` compute Fibonacci numbers.
- `f91` is McCarthy's 91 function.
- `mult` multiplies, and `gcd` gives the greatest common divisor.
- `identity`, `capped_identity` and `capped_identity2` are identity
  functions. The capped versions saturate at 5.
- `sum_by_steps(n, m)` adds two values.
- `hanoi(n)` gives the optimal number of moves for `n` disks. It raises
  `ValueError` for zero disks.
- `apply_hanoi(n, source, target, via)` counts the moves.

Each benchmark has a `check_*` driver:

- `check_even_odd`
- `check_fibonacci05`
- `check_mccarthy91_1`
- `check_mccarthy91_2`
- `check_mult_commutative`
- `check_fibo_2calls`
- `check_fibo_2calls_25`
- `check_capped_identity`
- `check_identity_1000`
- `check_rec_hanoi01`
- `check_rec_hanoi03`
- `check_sum_non_eq_1`
- `check_sum_non_eq_3`

A driver returns the benchmark's result. It returns `None` where the
benchmark stops early. It raises `VerifierError` when the property fails.

### `wrapbench.loops`

This module holds the loop benchmarks. Each one is a `check_*` function:

- `check_array_3`
- `check_count_by_nondet`
- `check_count_up_down_1` and `check_count_up_down_2`
- `check_half`
- `check_invert_string_3` and `check_invert_string_4`
- `check_jain_1` and `check_jain_2`
- `check_index_values`
- `check_multivar_1` and `check_multivar_2`
- `check_nested_1` and `check_nested_modified`
- `check_phases`
- `check_simple_3_1` and `check_simple_3_2`
- `check_sum01_1` and `check_sum01_2`
- `check_sum02`

Where a benchmark takes a sequence of choices, pass it as an iterable:

- `check_count_by_nondet` takes step sizes.
- `check_jain_1` takes increments.
- `check_jain_2` takes pairs of increments.

An input outside the range the benchmark allows raises `ValueError`.
`check_count_by_nondet` also raises `ValueError` when it runs out of steps,
and `check_array_3` raises `ValueError` when an entry is zero, because the
scan would never end.

### `wrapbench.search`

- `bsearch(key, items)` does a binary search over an ascending sequence.
- `lfind(key, items)` does a linear search.

Both return an index, or `None` when no element matches.

- `count(items, value, start, end)` counts the matching elements in a slice.
- `is_permutation(first, second)` tells whether one sequence is a
  rearrangement of the other.
- `smallest` and `largest` return the smallest and largest element. Both
  raise `ValueError` for an empty sequence.

### `wrapbench.strings`

Each function in this module treats a NUL character as the end of the
string.

- `strchr(s, c, start)` returns the index of the first `c`, and
  `strrchr(s, c)` returns the index of the last. Both return `None` when
  `c` is not found.
- `dirname(path)` returns the directory part of a path. It returns `"."`
  when the path has no slash, and also when the path is `None`.
- `fnmatch(pattern, string)` does shell-style matching and returns a bool.
  It supports `?`, `*`, `[...]` with ranges and negation by `!` or `^`, and
  `\` escapes.
- `rangematch(pattern, test)` matches one bracket expression. It returns
  how many pattern characters the expression used, or `None`.
- `word_count(text)` returns a `WordCount` with `lines`, `words` and
  `characters`.

### `wrapbench.graphs`

- `Edge(source, target, weight)` is a directed edge.
- `DisjointSet(size)` is a union-find structure with `find` and `union`.
- `bellman_ford(edges, vertex_count, source)` returns shortest distances
  as signed integers. The sums wrap at 64 bits, as in the benchmark.
- `dijkstra(matrix, source)` returns shortest distances over an adjacency
  matrix, where 0 means there is no edge. A vertex that is never reached
  keeps the distance `UNREACHABLE`. Its helper is `min_distance`.
- `kruskal_mst(cost)` returns the total weight of a minimum spanning tree.
  `NO_EDGE` marks a missing edge. It raises `ValueError` when the graph is
  not connected.

### `wrapbench.sorting_simple` and `wrapbench.sorting_divide`

The sorting functions are `bubble_sort`, `insertion_sort`, `selection_sort`,
`heap_sort`, `merge_sort` and `quick_sort`. Each one sorts a mutable
sequence in place and returns that same sequence. The helpers `heapify`,
`merge` and `partition` are public too. Selection sort is not stable.
Merge sort, bubble sort and insertion sort are stable.

## Example

```python
from wrapbench.recursion import f91, check_mccarthy91_1, check_mccarthy91_2
from wrapbench.sorting_divide import quick_sort
from wrapbench.uint64 import VerifierError

assert f91(42) == 91
assert check_mccarthy91_2(42) == 91

items = [5, 3, 9, 1]
quick_sort(items)
assert items == [1, 3, 5, 9]

try:
    check_mccarthy91_1(102)
except VerifierError:
    print("the property fails for this input")
```

## What it does not do

wrapbench has no command-line tool. It does not search for inputs either.
It does not enumerate the nondeterministic choices, and it does not try to
prove a property. You supply the concrete values, or a property-based
tester generates them. The package then reports whether the checked
property holds for those values.