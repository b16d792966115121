# drills

Plain-Python solutions to a collection of classic programming exercises,
grouped by the kind of data they work on. The package needs nothing beyond
the standard library and supports Python 3.10 and later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `drills.strings`

`defang_ip_addr`, `is_palindrome`, `freq_alphabets`, `sort_string`,
`roman_to_int`, `longest_common_prefix`, `is_isomorphic`, `divide_string`,
`is_anagram`, `reverse_vowels`, `can_construct`, `first_uniq_char`,
`length_of_last_word`, `my_atoi`, `reverse_string`.

- `sort_string`, `is_anagram`, `can_construct` and `first_uniq_char` accept
  only the letters `a`-`z` and raise `ValueError` on anything else
  (`is_anagram` returns `False` first if the lengths differ).
- `freq_alphabets` decodes `1`-`9` as `a`-`i` and `10#`-`26#` as `j`-`z`, and
  raises `ValueError` on malformed input.
- `longest_common_prefix` raises `ValueError` for an empty list;
  `divide_string` raises it for a non-positive group size or a fill that is
  not one character.
- `roman_to_int` counts unknown symbols as zero.
- `my_atoi` skips leading spaces and tabs, reads an optional sign and digits,
  and clamps the result to the signed 32-bit range.
- `reverse_string` reverses a mutable sequence in place.

### `drills.lines`

`first_lines(file_name)` returns up to the first ten lines of a file joined
by newlines. Line endings (`\n` or `\r\n`) are dropped, bytes are decoded as
UTF-8 with replacement, and a file that cannot be opened gives `""`.

### `drills.arrays`

`max_profit`, `single_number`, `running_sum`, `min_operations`,
`maximum_wealth`, `majority_element`, `rotate`, `two_sum`,
`contains_duplicate`, `contains_nearby_duplicate`, `remove_element`,
`move_zeroes`, `intersect`, `array_pair_sum`, `plus_one`.

Several of these change the list they are given: `running_sum` and
`plus_one` update it and return it, `rotate` and `move_zeroes` update it and
return `None`, and `remove_element` moves the kept values to the front and
returns how many there are. `max_profit`, `majority_element` and `plus_one`
raise `ValueError` for an empty list; `rotate` does so for an empty list or a
negative step count. `two_sum` returns `[]` when no pair is found, and
`intersect` returns the common values in ascending order.

### `drills.numbers`

`divisor_game`, `generate` (Pascal's triangle, always at least one row),
`number_of_steps`, `kth_character` (raises `ValueError` for `k < 1`),
`read_binary_watch`, `fizz_buzz`, `convert_to_base7`, `climb_stairs`,
`is_palindrome_number`.

### `drills.grids`

- `is_valid_sudoku(board)` checks rows, columns and 3x3 boxes of a board of
  `"1"`-`"9"` and `"."` cells; any other cell raises `ValueError`.
- `island_perimeter(grid)` measures the perimeter of the `1` cells.
- `rotate_image(matrix)` turns a square matrix a quarter turn clockwise, in
  place.

### `drills.nodes`

- `ListNode(val, next=None)` and `TreeNode(val, left=None, right=None)` are
  dataclasses.
- `build_tree(values, root_index=0)` builds a tree from level-order values,
  with `None` marking a missing node.
- `delete_duplicates(head)` unlinks repeated values from a sorted list.
- `middle_node(head)` returns the middle node, the second one when there are
  two.

## Examples

```python
from drills.strings import roman_to_int, longest_common_prefix
from drills.numbers import generate, convert_to_base7
from drills.arrays import two_sum

roman_to_int("MCMXCIV")                              # 1994
longest_common_prefix(["flower", "flow", "flight"])  # "fl"
generate(3)                                          # [[1], [1, 1], [1, 2, 1]]
convert_to_base7(-7)                                 # "-10"
two_sum([2, 7, 11, 15], 9)                           # [0, 1]
```

## What it does not do

The package is a library only: it has no command-line tool. `drills.nodes`
can build binary trees but offers no search or measurement over them.