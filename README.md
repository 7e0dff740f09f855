# dsakit

Classic interview-style algorithms, written as small and plain Python functions.
The package has no runtime dependencies.

## Modules

- `dsakit.arrays` covers three-sum in three ways (`three_sum_brute`,
  `three_sum_better`, `three_sum`) and the majority element (`majority_brute`,
  `majority_better`, `majority_element`). It also has the longest run of ones
  (`max_consecutive_ones`), the missing number of `1..n`
  (`missing_number_brute`, `missing_number_sum`, `missing_number_xor`) and the
  single unpaired number (`single_number_brute`, `single_number`).
- `dsakit.search` covers searches in sorted data. It has `lower_bound`,
  `upper_bound`, `floor_value`, `ceil_value` and `search_insert_position`. For
  rotated arrays it has search, minimum and rotation count (`search_rotated`,
  `min_rotated`, `rotation_count`). It also has `find_peak_element`, the single
  element of a paired sorted array (`single_element_linear`, `single_element`),
  matrix search (`search_matrix`, `search_sorted_matrix`), the k-th smallest of
  two sorted sequences (`kth_smallest`) and the median of a row-wise sorted
  matrix (`matrix_median`).
- `dsakit.answers` covers binary search over the answer. It has
  `aggressive_cows`, `allocate_pages`, `min_eating_speed` and bouquet days
  (`min_days_linear`, `min_days`). It also has the integer n-th root
  (`nth_root_linear`, `nth_root`), `ship_within_days`, `smallest_divisor` and
  the integer square root (`sqrt_linear`, `int_sqrt`).
- `dsakit.singly` has the singly linked `ListNode`, with `build`, `to_list`,
  `length` and `search`. To delete it has `delete_head`, `delete_tail`,
  `delete_at` and `delete_value`. To insert it has `insert_head`,
  `insert_tail`, `insert_at` and `insert_before`.
- `dsakit.list_ops` covers operations on singly linked lists. It has `reverse`,
  `add_one`, `add_two_numbers`, `delete_middle`, `odd_even_list`,
  `is_palindrome` and `remove_elements`. It also has `reverse_k_group`,
  `rotate_right`, `sort_012` and `swap_pairs`.
- `dsakit.cycles` has `create_cycle`, `cycle_length`, `detect_cycle` (which
  returns the node where the cycle starts) and `get_intersection_node`.
- `dsakit.doubly` has the doubly linked `DNode`, with the same helpers as
  `dsakit.singly` plus `find_tail`. It also has `reverse`, `find_pairs` (pairs
  with a given sum in a sorted list) and `remove_duplicates`.

## Examples

```python
from dsakit.arrays import three_sum, majority_element
from dsakit.search import lower_bound, search_rotated
from dsakit.answers import min_eating_speed
from dsakit import singly, list_ops

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
majority_element([1, 2, 3, 3, 2, 2, 2])  # 2
lower_bound([1, 3, 5, 7, 9], 4)          # 2
search_rotated([4, 5, 6, 7, 0, 1, 2], 0) # 4
min_eating_speed([3, 6, 7, 11], 8)       # 4

head = singly.build([9, 9, 9])
singly.to_list(list_ops.add_one(head))   # [1, 0, 0, 0]
```

The linked-list functions take the head node and return the new head. Most of
them relink nodes in place. `add_two_numbers` is an exception: it builds a new
list. Use `build` to make a list and `to_list` to read one back as a Python
list. Iterating over a node also yields the values from that node onwards.

Where no answer exists, most functions return `-1`, as the functions'
docstrings state. Inputs that cannot be handled raise exceptions. These
include empty sequences where a value is required, positions outside a list,
and targets that are not in a list. The exceptions are `ValueError` or
`IndexError`.

## What it does not do

This is a library only. It has no command-line program. It keeps no state and
does no input or output of its own.

## Running the tests

```
pip install -e ".[test]"
pytest
```