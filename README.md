# algonotes

Classic algorithms and data structures, grouped by topic. Each one is a plain
Python function or a small class, with no dependencies beyond the standard
library.

## Installation

```
pip install algonotes
```

To run the tests:

```
pip install "algonotes[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algonotes.arrays` | `max_area`, `largest_rectangle_area`, `longest_common_prefix`, `rotate_image`, `find_duplicate`, `find_peak_element`, `longest_consecutive`, `length_of_longest_substring`, `merge_sorted`, `next_permutation`, `subarray_sum`, `two_sum` |
| `algonotes.numbers` | `is_palindrome_number`, `reverse_integer` |
| `algonotes.strings` | `repeated_string_match`, `string_to_int`, `count_and_say`, `find_index`, `group_anagrams`, `reverse_words`, `roman_to_int`, `is_anagram`, `max_non_overlapping_substrings` |
| `algonotes.stacks_queues` | `TwoStackQueue`, `TwoQueueStack`, `next_greater_element`, `max_sliding_window`, `is_valid_parentheses` |
| `algonotes.dynamic` | `coin_change_ways`, `edit_distance`, `house_robber`, `job_scheduling`, `knapsack`, `longest_common_subsequence`, `longest_increasing_subsequence`, `min_cost_climbing_stairs`, `min_path_sum`, `word_break` |
| `algonotes.linked_lists` | `ListNode`, `from_values`, `to_values`, `add_two_numbers`, `get_intersection_node`, `detect_cycle`, `merge_two_lists`, `middle_node`, `is_palindrome_list`, `remove_nth_from_end`, `reverse_list` |
| `algonotes.heaps` | `MedianFinder`, `kth_smallest`, `frequency_sort`, `top_k_frequent` |
| `algonotes.graphs` | `Node`, `clone_graph`, `can_finish`, `find_center`, `valid_path`, `is_bipartite`, `max_star_sum`, `num_islands`, `oranges_rotting`, `bfs_of_graph`, `dfs_of_graph`, `has_cycle_bfs`, `has_cycle_dfs`, `topo_sort_dfs`, `topo_sort_kahn` |
| `algonotes.trees` | `TreeNode`, `from_level_order`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `right_side_view`, `build_tree` |
| `algonotes.backtracking` | `palindrome_partitions`, `permutations`, `rat_maze_paths`, `subsets`, `subsets_with_dup`, `word_break_sentences` |

Graphs in `algonotes.graphs` are given as adjacency lists: a sequence whose
item `i` lists the neighbours of vertex `i`.

## Examples

```python
from algonotes.arrays import two_sum, max_area
from algonotes.dynamic import edit_distance, coin_change_ways
from algonotes.heaps import MedianFinder
from algonotes.linked_lists import from_values, to_values, reverse_list
from algonotes.trees import build_tree, inorder_traversal, from_level_order, right_side_view
from algonotes.graphs import topo_sort_kahn

two_sum([2, 7, 11, 15], 9)             # (0, 1)
two_sum([1, 2], 10)                    # None
max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])  # 49
edit_distance("horse", "ros")          # 3
coin_change_ways(5, [1, 2, 5])         # 4

finder = MedianFinder()
for value in (1, 2, 3):
    finder.add_num(value)
finder.find_median()                   # 2.0

to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

root = build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
inorder_traversal(root)                # [9, 3, 15, 20, 7]
right_side_view(from_level_order([1, 2, 3, None, 5, None, 4]))  # [1, 3, 4]

topo_sort_kahn([[1, 2], [3], [3], []])  # [0, 1, 2, 3]
```

## Behaviour worth knowing

- `rotate_image`, `next_permutation` and `merge_sorted` change the list they
  are given and return `None`. `reverse_list`, `merge_two_lists` and
  `remove_nth_from_end` relink the nodes they are given.
- Inputs with no meaningful answer raise `ValueError`: for example an empty
  list for `longest_common_prefix` or `find_peak_element`, a sequence with no
  repeat for `find_duplicate`, a non-Roman character for `roman_to_int`, or an
  out-of-range `k` for `kth_smallest`.
- `TwoStackQueue.pop`/`peek` and `TwoQueueStack.pop`/`top` raise `IndexError`
  when empty; `MedianFinder.find_median` raises `ValueError` before any number
  has been added.
- `reverse_integer` and `string_to_int` work within the signed 32-bit range:
  the first returns 0 on overflow, the second clamps to the range.

## What it does not do

This is a library only: it has no command-line program, and nothing is read
from or written to files.