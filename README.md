# algokata

algokata is a small collection of classic algorithm exercises. It is written in plain Python, needs only the standard library, and has tests for every module.

## Installation

```
pip install .
```

## Modules

### `algokata.arrays`

- `max_area(height)` returns the largest amount of water that two walls can hold between them. It uses two pointers that start at the ends, and the pointer at the shorter wall moves inward.
- `max_area_converging(height)` does the same walk but keeps going until the two pointers meet.
- `find_median_sorted_arrays(nums1, nums2)` returns the median of two sorted sequences together, as a float. It raises `ValueError` when both sequences are empty.
- `remove_duplicates(nums)` drops adjacent repeated values from the list in place and returns the new length.
- `three_sum(nums)` returns triples of **indices** `[a, b, c]` whose values add up to zero. The unordered pairs `a < b` are grouped by their sum. Each pair is completed at most once, by the first position `c` that is not part of the pair.
- `two_sum(nums, target)` tries every ordered pair of distinct positions. It returns the first pair that adds up to `target`, or `[0, 0]` if no pair does.
- `two_sum_hash_map(nums, target)` does the same in a single pass with a dictionary. It returns `[earlier, later]`, or `[0, 0]` if no pair fits.

### `algokata.strings`

- `letter_combinations(digits)` returns every word that a phone keypad can spell from `digits`, in keypad order. An empty string gives `[]`. The digits `0` and `1` raise `ValueError`.
- `longest_common_prefix(strs)` returns the prefix that all of the strings share. It raises `ValueError` when `strs` is empty.
- `is_palindrome(s)` tells whether `s` reads the same in both directions.
- `longest_palindrome(s)` returns the longest palindromic substring. When two are the same length, the earlier one wins.
- `is_match(s, p)` matches the whole of `s` against a pattern in which `.` stands for any single character and `*` repeats the character before it. A pattern that starts with `*` raises `ValueError`.
- `is_valid_parentheses(s)` tells whether `s` holds only the brackets `()`, `[]` and `{}`, with each one closed in the right order.
- `convert_zigzag(s, num_rows)` writes `s` in a zigzag over `num_rows` rows and reads it back row by row.
- `convert_zigzag_by_stride(s, num_rows)` samples each row at a fixed stride. The first and last rows follow the zigzag exactly. Each middle row uses a single stride and ignores the final character, so with three or more rows the result can differ from `convert_zigzag`.

### `algokata.integers`

- `is_palindrome_number(x)` tells whether the decimal digits of `x` read the same in both directions. Negative numbers are never palindromes.
- `is_palindrome_number_by_halves(x)` compares digits in pairs from both ends using powers of ten. It is only reliable for numbers of up to three digits. On longer palindromes it can raise `ZeroDivisionError`.
- `reverse_integer(x)` reverses the decimal digits of `x` and keeps its sign. It returns `0` when the result does not fit in a signed 32-bit integer.
- `roman_to_int(s)` adds up a Roman numeral. A smaller symbol before a larger one counts as their difference. Characters it does not know count as zero.

### `algokata.linked_list`

- `ListNode(val=0, next=None)` is a node of a singly linked list. Nodes compare by identity.
- `build_list(values)` builds a list from the values and returns its head. `to_values(head)` turns an acyclic list back into a Python list, and raises `ValueError` if the list has a cycle.
- `has_cycle(head)` tells whether a list loops back on itself. `detect_cycle(head)` returns the node where the cycle begins, or `None`. Both use a slow and a fast pointer.
- `merge_two_lists(list1, list2)` joins two sorted lists by relinking their nodes. When values are equal, the node from `list2` comes first.
- `merge_k_lists(lists)` merges any number of sorted lists into a newly built list and leaves the inputs unchanged. When values are equal, the list given earlier comes first. `None` gives `None`.
- `remove_nth_from_end(head, n)` unlinks the `n`-th node counted from the end and returns the head. If `n` is at least the length of the list, the head is removed. An `n` below 1 raises `ValueError`.

## Example

```python
from algokata.strings import convert_zigzag
from algokata.linked_list import build_list, merge_two_lists, to_values

convert_zigzag("PAYPALISHIRING", 3)          # 'PAHNAPLSIIGYIR'
to_values(merge_two_lists(build_list([1, 3, 4]), build_list([2, 4, 5])))
# [1, 2, 3, 4, 4, 5]
```

## What it does not do

algokata is a library of functions only. It has no command-line program. Import the modules and call the functions directly.

## Running the tests

```
pip install ".[test]"
pytest
```