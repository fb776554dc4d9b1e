# contestkit

Classic programming-contest problems, each solved as an ordinary Python
function. You pass in plain Python data (ints, strings, lists of tuples) and
get the answer back as a return value. The problem functions do not read
standard input and do not print.

Invalid input, such as a node number outside `1..n` or sequences of
mismatched length, raises `ValueError`. Where a problem may have no answer,
the function says so in its return value (for example `None`, `False` or
`(0, 0, 0)`, as given in each docstring).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.numeric`: arithmetic and counting problems:
  `king_escapes`, `presents_place`, `max_square_sum`, `max_earnings`,
  `max_colors`, `match_results`, `min_summands`, `cumulative_penalties`,
  `is_rebel`, `rating_increments`, `split_growth` and `max_zeroes`.
- `contestkit.strings`: string problems: `max_rooms`, `cursor_length`,
  `smallest_beautiful`, `group_labs`, `min_replacements`, `swap_to_equal`
  and `pipes_passable`. It also defines `MOD` (10**9 + 7).
- `contestkit.sequences`: array and permutation problems:
  `min_garland_complexity`, `badge_culprits`, `can_sort`, `pair_points`,
  `restore_permutation`, `shortest_dominated`, `distribute_medals` and
  `min_button_presses`.
- `contestkit.grids`: grid walks: `has_path_with_two_turns` (grid given as
  a list of strings with `S`, `T` and `*` cells) and `doll_can_walk`.
- `contestkit.trees`: tree problems on nodes `1..n`: `min_coloring_steps`,
  `deletion_order`, `max_happiness`, `candidates_to_repair`,
  `tag_game_moves`, `max_removable_edges`, `is_valid_bfs`, `path_queries`,
  `paint_tree` and `good_sequences`.
- `contestkit.graphs`: general graph problems on nodes `1..n`:
  `is_cthulhu`, `min_rumor_cost`, `edge_coloring`, `most_diverse_color`
  and `min_trip_price`.
- `contestkit.shell`: `list_directory()` runs `ls` through the shell,
  prints `this value was returned <status>` and returns the exit status.

## Example

```python
from contestkit.numeric import max_square_sum
from contestkit.strings import smallest_beautiful
from contestkit.trees import max_removable_edges

print(max_square_sum([1, 2, 3]))                        # 26
print(smallest_beautiful("1234", 2))                    # 1313
print(max_removable_edges(4, [(2, 4), (4, 1), (3, 1)]))  # 1
```

## Command line

Installing the package adds a `contestkit` command:

```
contestkit --help
```

## What the package does not do

The `contestkit` command only parses its options (`--help`) and exits with
status 0. It does not read problem input from standard input or files and
does not solve problems from the command line; call the functions from
Python instead.