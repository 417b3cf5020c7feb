# drillbits

A collection of small, self-contained routines: bit manipulation, array
puzzles, singly linked lists, searching, sorting, and two
thread-coordination demonstrations. It depends only on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `drillbits.bits`: single-bit operations (`set_nth_bit`, `clear_nth_bit`,
  `toggle_nth_bit`, `clear_rightmost_set_bit`, `set_rightmost_unset_bit`),
  range operations on 32-bit unsigned values (`set_bits_in_range`,
  `clear_bits_in_range`, `toggle_bits_in_range`, `extract_bits`), counting
  (`count_set_bits`, `count_bits_to_convert`, `count_shifts_until_overflow`,
  `rightmost_set_bit_position`), predicates (`is_odd`, `is_power_of_two`,
  `is_power_of_four`, `is_binary_palindrome`, `have_opposite_signs`,
  `has_odd_number_of_set_bits`), bit reversal (`reverse_bits`,
  `reverse_significant_bits`), `swap_odd_even_bits`, `extract_sign_bit`,
  `largest_power_of_two_dividing`, and XOR tricks (`find_unique`,
  `find_two_unique_numbers`, `xor_swap`).
- `drillbits.macros`: compact bit helpers: `is_bit_set`, `set_bit`,
  `clear_bit`, `toggle_bit`, `is_even`, `is_odd`, `is_power_of_two`,
  `count_set_bits` and `swap`.
- `drillbits.arrays`: `count_unique_integers`, `find_missing_positive`,
  `find_two_xor` (returns a pair or `None`) and `max_product_of_two`
  (0 when there are fewer than two values).
- `drillbits.basics`: `greeting`, `binary_to_decimal`, `byte_order`,
  `largest_number`, `is_prime`, `replace_zeros_with_ones`, `swap_values`,
  and `CallCounter`, whose `increment()` returns the current count and then
  advances it.
- `drillbits.strings`: `string_length` and `reverse_string`, both of which
  stop at the first NUL character.
- `drillbits.linked_list`: `ListNode` and `LinkedList`, together with
  `build_list`, `delete_duplicates`, `detect_cycle`,
  `get_intersection_node`, `merge_two_lists`, `find_nth_from_end`,
  `reverse_list` and `format_list`.
- `drillbits.searching`: `binary_search` and `linear_search`, each
  returning an index or `None`.
- `drillbits.sorting`: in-place `bubble_sort`, `insertion_sort`,
  `quick_sort` (with `partition`) and `selection_sort`.
- `drillbits.concurrency`: `SharedCounter`, `run_mutex_demo`, which returns
  the value each thread saw after its increment, and `run_semaphore_demo`,
  which returns the entry and exit messages in the order they happened.

## Examples

```python
from drillbits.bits import count_set_bits, swap_odd_even_bits, extract_bits
from drillbits.linked_list import LinkedList
from drillbits.sorting import quick_sort
from drillbits.searching import binary_search

count_set_bits(29)                    # 4
swap_odd_even_bits(23)                # 43
extract_bits(0b111110100011, 3, 7)    # 20

items = LinkedList([3, 4, 8, 2, 7])
items.reverse()
str(items)                            # "7 2 8 4 3"

values = [66, 77, 44, 33, 22, 99, 55]
quick_sort(values)
values                                # [22, 33, 44, 55, 66, 77, 99]

binary_search([1, 3, 7, 9, 19, 23, 45, 56], 45)   # 6
```

## Notes

Functions in `drillbits.bits` that work on unsigned values, and the counting
functions there, treat their input as a 32-bit word: negative numbers are
reduced to their 32-bit two's complement pattern first. The single-bit
functions work on Python integers of any size. Invalid bit positions or
ranges raise `ValueError`.

## What it does not do

drillbits is a library only. It installs no command-line program, and its
functions return results instead of printing them.