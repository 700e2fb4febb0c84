# dailyalgos

Plain-Python solutions to a set of classic algorithm puzzles, plus a few small
data structures. The package has no third-party dependencies.

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

### `dailyalgos.linked`

`ListNode` (singly linked list node, iterable over its values) and `TreeNode`
(binary tree node), with helpers:

- `build_list(values)` builds a list, returning `None` for no values;
  `list_values(head)` turns it back into a Python list.
- `build_tree(values)` builds a tree from level-order values, `None` marking a
  missing child.

Algorithms: `modified_list`, `insert_greatest_common_divisors`,
`kth_largest_level_sum`, `is_sub_path`, `spiral_matrix`,
`split_list_to_parts`.

### `dailyalgos.structures`

- `AllOne` – key counter with `inc`, `dec`, `get_max_key`, `get_min_key`
  (the getters return `""` when empty).
- `CircularDeque(k)` – bounded deque with `insert_front`, `insert_last`,
  `delete_front`, `delete_last` (each returns `False` when it cannot act),
  `get_front`, `get_rear` (`-1` when empty), `is_empty`, `is_full`, and `len()`.
- `CustomStack(max_size)` – bounded stack with `push`, `pop` (`-1` when
  empty) and `increment(k, val)` on the bottom `k` items.
- `MyCalendar` and `MyCalendarTwo` – `book(start, end)` on half-open
  intervals, refusing double and triple bookings respectively.

### `dailyalgos.graphs`

`get_ancestors`, `count_sub_islands`, `modified_graph_edges` (returns new
edges, leaving the input unchanged), `max_probability`, `UnionFind` (nodes
`1..n`, with `find`, `unite`, `is_connected`) and `max_num_edges_to_remove`.

### `dailyalgos.numbers`

`find_kth_number`, `lexical_order`, `min_end`, `min_bit_flips`,
`find_complement`, `nearest_palindromic`, `robot_sim`, `largest_number`.

### `dailyalgos.text`

`is_prefix_of_word`, `count_consistent_strings`, `diff_ways_to_compute`,
`fraction_addition`, `uncommon_from_sentences`, `compressed_string`,
`get_lucky`, `min_changes`, `rotate_string`.

### `dailyalgos.partition`

`min_extra_char`, `shortest_palindrome`, `max_unique_split`,
`take_characters`, `strange_printer`.

### `dailyalgos.arrays`

`construct_2d_array`, `count_pairs`, `count_fair_pairs`,
`longest_common_prefix`, `results_array`, `longest_subarray`,
`get_maximum_xor`, `array_rank_transform`, `is_array_special`,
`xor_queries`.

### `dailyalgos.search`

`max_distance`, `maximum_beauty`, `survived_robots_healths`,
`beautiful_subsets`, `find_min_difference`.

## Errors

Functions raise `ValueError` on input they cannot handle, for example an
out-of-range `k`, an empty sequence where one value is needed, or a string
that does not have the expected form (such as `fraction_addition` given
something other than a sum of fractions).

## Examples

```python
from dailyalgos.linked import build_list, list_values, insert_greatest_common_divisors
from dailyalgos.numbers import lexical_order
from dailyalgos.structures import MyCalendar
from dailyalgos.text import fraction_addition

head = insert_greatest_common_divisors(build_list([18, 6, 10, 3]))
print(list_values(head))          # [18, 6, 6, 2, 10, 1, 3]

calendar = MyCalendar()
print(calendar.book(10, 20))      # True
print(calendar.book(15, 25))      # False

print(fraction_addition("-1/2+1/2+1/3"))  # 1/3

print(lexical_order(13))          # [1, 10, 11, 12, 13, 2, 3, 4, 5, 6, 7, 8, 9]
```

## What it does not do

This is a library only: it has no command-line program. Every function works
on Python values passed to it and reads no input files.