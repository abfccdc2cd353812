# algokit

Compact, pure-Python implementations of well-known algorithm exercises,
grouped by the data structure they work on. It has no third-party
dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.numbers` | `is_palindrome_number`, `roman_to_int`, `add_digits`, `is_perfect_number` |
| `algokit.strings` | `is_palindrome`, `reverse_words`, `is_anagram`, `reverse_string`, `reverse_vowels`, `first_unique_char`, `compress`, `count_palindromic_substrings`, `valid_palindrome`, `reverse_only_letters`, `merge_alternately`, `remove_occurrences` |
| `algokit.arrays` | `remove_duplicates`, `max_subarray`, `rotate`, `product_except_self`, `missing_number`, `move_zeroes`, `increasing_triplet`, `find_max_consecutive_ones`, `find_pairs`, `find_min_difference`, `kids_with_candies` |
| `algokit.stacks` | `MinStack`, `StockSpanner`, `BrowserHistory`, `is_valid_parentheses`, `simplify_path`, `remove_k_digits`, `asteroid_collision`, `daily_temperatures`, `car_fleet`, `min_add_to_make_valid`, `is_valid_abc`, `remove_adjacent_duplicates` |
| `algokit.linked_list` | `ListNode`, `build_list`, `to_values`, `has_cycle`, `reverse_list`, `next_larger_nodes` |

## Examples

```python
from algokit.numbers import roman_to_int
from algokit.strings import merge_alternately
from algokit.stacks import MinStack, simplify_path, daily_temperatures
from algokit.linked_list import build_list, reverse_list, to_values

roman_to_int("MCMXCIV")                 # 1994
merge_alternately("abc", "pq")          # "apbqc"
simplify_path("/a/./b/../../c/")        # "/c"
daily_temperatures([73, 74, 75, 71])    # [1, 1, 0, 0]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                         # 1
len(stack)                              # 2

to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

`BrowserHistory` keeps back and forward navigation for visited pages;
`current` is the page now shown:

```python
from algokit.stacks import BrowserHistory

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.visit("b.example.com")
history.back(1)      # "a.example.com"
history.forward(5)   # "b.example.com"
history.current     # "b.example.com"
```

## In-place functions

Some functions change the list they are given rather than return a new one:
`reverse_string`, `rotate` and `move_zeroes` return `None`; `compress` and
`remove_duplicates` return the new length (for `remove_duplicates`, only the
first `k` items are meaningful); `reverse_list` relinks the nodes and returns
the new head.

## Errors

- `max_subarray` and `find_min_difference` raise `ValueError` on an empty list.
- `rotate` raises `ValueError` for a negative `k`.
- `remove_occurrences` raises `ValueError` when `part` is empty.
- `car_fleet` raises `ValueError` when `position` and `speed` differ in length
  or a speed is zero.
- `BrowserHistory.back` and `BrowserHistory.forward` raise `ValueError` for a
  negative step count.
- `MinStack.pop`, `MinStack.top` and `MinStack.get_min` raise `IndexError` on
  an empty stack.

## Notes on behaviour

- `is_valid_parentheses` treats any character that is not an opening bracket
  as a closer, so `"(a)"` is not valid.
- `add_digits` keeps the sign of a negative number.
- `roman_to_int` counts characters that are not Roman symbols as zero.
- `is_palindrome`, `reverse_vowels` and `reverse_only_letters` consider ASCII
  letters (and, for `is_palindrome`, ASCII digits) only.

## What this package does not do

It is a library of functions and small classes only: it has no command-line
program, and it does not read or store data anywhere.