# algodrills

Small, self-contained algorithm and data-structure drills in plain Python,
with no runtime dependencies. Every drill is a function (or a small class)
that takes ordinary Python values and returns its answer.

## Contents

| Module | What it provides |
| --- | --- |
| `algodrills.warmup` | `sum_multiples_of_3_or_5`, `has_pair_summing_to_100`, `is_perfect_square`, `largest_power_of_two` |
| `algodrills.arrays` | `letter_counts` (counts of `a`..`z`), `insert_at`, `erase_at` |
| `algodrills.linked_list` | `ArrayLinkedList`, a doubly linked list addressed by integers, and `edit_text`, a cursor text editor built on it |
| `algodrills.stacks` | `ArrayStack` and `run_stack_commands` |
| `algodrills.queues` | `ArrayQueue` and `run_queue_commands` |
| `algodrills.deques` | `ArrayDeque` and `run_deque_commands` |
| `algodrills.brackets` | `is_balanced` for `()` / `[]`, and `check_lines` answering `"yes"`/`"no"` per line up to a `"."` line |
| `algodrills.grids` | `bfs_order`, `dfs_order`, `count_pictures`, `shortest_maze_path`, `days_to_ripen`, `fire_escape_time`, `hide_and_seek` |
| `algodrills.recursion` | `z_order_index`, `hanoi_moves`, `mod_pow` |
| `algodrills.backtracking` | `count_subset_sums`, `ordered_selections`, `count_n_queens` |
| `algodrills.simulation` | `max_block_after_five_moves` (2048), `min_blind_spots` (cameras), `min_chicken_distance`, `paste_stickers` |
| `algodrills.sorting` | `merge_sorted`, `merge_sort`, `quick_sort`, `most_frequent`, `counting_sort`, `radix_sort` |
| `algodrills.dynamic` | `min_paint_cost`, `range_sums`, `tiling_count`, `min_steps_to_one`, `steps_to_one_path`, `max_stair_score`, `max_stair_score_by_skips`, `count_sums_of_123` |
| `algodrills.greedy` | `max_rope_load`, `min_coin_count`, `max_meetings` |

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algodrills.warmup import sum_multiples_of_3_or_5, largest_power_of_two
from algodrills.linked_list import ArrayLinkedList, edit_text
from algodrills.stacks import ArrayStack, run_stack_commands
from algodrills.brackets import is_balanced
from algodrills.recursion import mod_pow
from algodrills.backtracking import count_n_queens
from algodrills.sorting import merge_sort
from algodrills.dynamic import min_steps_to_one
from algodrills.greedy import min_coin_count

sum_multiples_of_3_or_5(16)       # 60
largest_power_of_two(5)           # 4

lst = ArrayLinkedList()
first = lst.insert(0, 10)         # address 0 is the head; returns the new node's address (1)
lst.insert(0, 30)
list(lst)                         # [30, 10]
lst.erase(first)
list(lst)                         # [30]

edit_text("abcd", ["P x", "L", "P y"])   # 'abcdyx'

stack = ArrayStack()
stack.push(5)
stack.push(4)
stack.top()                       # 4
len(stack)                        # 2

run_stack_commands(["push 1", "push 2", "top", "size", "pop", "empty"])  # [2, 2, 2, 0]

is_balanced("So when I die (the [first] I will see in (heaven) is a score list).")  # True

mod_pow(10, 11, 12)               # 4
count_n_queens(8)                 # 92
merge_sort([15, 25, 22, 357, 16, 23, -53, 12, 46, 3])
# [-53, 3, 12, 15, 16, 22, 23, 25, 46, 357]
min_steps_to_one(10)              # 3
min_coin_count([1, 5, 10, 50, 100, 500, 1000, 5000, 10000, 50000], 4200)  # 6
```

## Behaviour notes

- `run_stack_commands`, `run_queue_commands` and `run_deque_commands` take
  command strings such as `"push 3"` or `"size"` and return a list of the
  integers those commands print: `-1` for a pop or peek on an empty
  container, `1`/`0` for `empty`. Unknown or malformed commands raise
  `ValueError`.
- `edit_text` takes the starting text and commands `"L"`, `"D"`, `"B"` and
  `"P x"`, and returns the final text as one string.
- The container classes raise `IndexError` when popped or peeked while empty.
- `shortest_maze_path` and `fire_escape_time` return `None` when there is no
  way through; `days_to_ripen` returns `-1` when some tomato never ripens.
- Inputs outside the range a drill is defined for (negative sizes, positions
  off the board, values too large for `counting_sort` or `radix_sort`) raise
  `ValueError`.

## What it does not do

The package has no command-line programs: nothing reads problem input from
standard input or prints answers. Parse the input yourself and call the
functions with Python lists, tuples and strings.