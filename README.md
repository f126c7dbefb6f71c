# algodrills

Compact solutions to well-known array, bit-manipulation, greedy and
counting exercises. Each one is a plain function that takes Python values
and returns a result; invalid input raises `ValueError`.

## Installation

```
pip install .
```

## Modules

- `algodrills.rotation`
  - `rotate_left(values, d)`: the list rotated left by `d` (0 to its length).
  - `rotate_matrix_clockwise(matrix)`: a square matrix turned a quarter turn clockwise.
- `algodrills.selection`
  - `quick_select(values, k)`: the `k`-th smallest value, 1-based.
  - `bitonic_maximum(values)`: the peak of an increasing-then-decreasing
    sequence (for exactly two elements, the smaller one).
- `algodrills.sequences`
  - `fibonacci_members(values)`: the values that are Fibonacci numbers, in order.
  - `overlapping_k_length(values, k)`: total length of the maximal runs of
    values not above `k` that contain `k`.
  - `increasing_array_cost(values)`: total increase needed to make the
    sequence non-decreasing.
- `algodrills.counting`
  - `count_pairs_with_sum(values, k)`: pairs whose values add up to `k`.
  - `count_triplets(values)`: triplets where two values sum to the third,
    or `-1` when there are none.
  - `count_power_pairs(a, b)`: pairs `(x, y)` counted by the usual
    `x**y > y**x` rules for small `y` and a binary search otherwise.
- `algodrills.bits`
  - `missing_number(n, values)`: the one number of `1..n` absent from `n - 1` values.
  - `first_set_bit(n)`: 1-based position of the lowest set bit, 0 for zero.
  - `is_power_of_two(n)`
  - `rightmost_different_bit(m, n)`: 1-based position of the lowest differing bit.
  - `total_set_bits(n)`: set bits over all integers from 1 to `n`.
- `algodrills.cses`
  - `beautiful_permutation(n)`: a permutation of `1..n` with no neighbours
    differing by one; raises `ValueError` for 2 and 3.
  - `longest_repetition(text)`: length of the longest run of one character.
  - `collatz_sequence(n)`: the Collatz walk from `n` to 1.
- `algodrills.scheduling`
  - `max_activities(starts, ends)`: how many activities fit, chosen by
    earliest finish.
  - `meeting_order(starts, ends)`: 1-based indices of those chosen meetings.
- `algodrills.subarrays`
  - `subarrays_with_sum(values, target)`: 1-based `(start, end)` bounds of
    sliding windows over non-negative values that sum to `target`.
- `algodrills.sorting`
  - `sort_012(values)`: 0s, then 1s, then 2s (any other value counts as 2).
  - `rearrange_alternately(values)`: a sorted list interleaved as largest,
    smallest, second largest, ...
  - `relative_sort(values, order)`: values ordered by `order`, the rest ascending.
  - `sort_by_frequency(values)`: by descending frequency, ties ascending.
  - `merge_in_place(a, b)`: merges two sorted lists in place with the gap
    method; returns `None`.
- `algodrills.puzzles`
  - `reverse_words(text)`: reverses the order of dot-separated words.
  - `min_operations(n)`: fewest "add one" and "double" steps from 0 to `n`.

## Example

```python
from algodrills.rotation import rotate_left
from algodrills.bits import total_set_bits
from algodrills.puzzles import reverse_words

rotate_left([1, 2, 3, 4, 5], 2)      # [3, 4, 5, 1, 2]
total_set_bits(4)                    # 5
reverse_words("i.like.this")         # "this.like.i"
```

## What it does not do

The package is a library only. It has no command-line program and does not
read test cases from standard input; call the functions from Python.

## Running the tests

```
pip install .[test]
pytest
```