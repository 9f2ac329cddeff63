# searchdrills

Worked solutions to well-known algorithm exercises, each written as a plain
Python function. You pass the input in as Python values (lists of strings,
lists of lists of integers, tuples) and get the answer back as a value.
Invalid input, such as ragged grids or out-of-range values, raises
`ValueError`.

## Modules

### `searchdrills.regions`: connected regions on grids

- `count_color_regions(board)`: regions of R/G/B letters, as `(normal, colour_blind)`;
  the colour-blind count treats R and G as the same colour.
- `count_cabbage_worms(width, height, positions)`: groups of adjacent cabbages,
  positions given as `(x, y)`.
- `picture_stats(grid)`: `(number of non-zero regions, largest area)`.
- `max_safe_regions(heights)`: most dry regions over every flood level.
- `rectangle_free_areas(rows, cols, rectangles)`: sorted areas left uncovered.
- `housing_complexes(board)`: sorted sizes of the groups of `'1'` cells.

### `searchdrills.shortest`: breadth-first shortest paths

- `maze_distance(board)`: cells passed from top-left to bottom-right, or `None`.
- `tomato_days(grid)` and `tomato_days_3d(boxes)`: days until all tomatoes
  ripen, or `-1`.
- `hide_and_seek(start, target)`: fewest steps using `x-1`, `x+1`, `2x`
  within `0..100000`.
- `elevator_presses(floors, start, goal, up, down)`: fewest presses, or `None`
  when the stairs must be used.
- `knight_moves(size, start, target)`: fewest knight moves.

### `searchdrills.escape`

- `fire_escape(board)` (`J` and `F`) and `building_fire_escape(board)`
  (`@` and `*`): time to leave ahead of the fire, or `None`.
- `dungeon_escape(levels)`: minutes from `S` to `E` in a 3-D stack, or `None`.

### `searchdrills.sequences`

Sequences of length `m`, returned as tuples in ascending lexicographic order:
`permutations_n_m`, `combinations_n_m`, `products_n_m`, `multisets_n_m` (drawn
from `1..n`), and `permutations_of`, `products_of`, `multisets_of`,
`distinct_permutations_of`, `distinct_combinations_of`,
`distinct_products_of`, `distinct_multisets_of` (drawn from a given list; the
`distinct_` forms list each resulting sequence once).

### `searchdrills.combinatorics`

- `count_subset_sums(numbers, target)`: non-empty subsets summing to `target`.
- `passwords(length, letters)`: sorted-letter passwords with at least one vowel
  and two consonants.
- `lotto_sets(numbers)`: every choice of six numbers.
- `n_queens(n)`: number of non-attacking queen placements.

### `searchdrills.placement`

- `garden_flowers(board, green, red)`: most flowers from placing culture media.
- `seven_princesses(board)`: connected groups of seven with at least four `'S'`.

### `searchdrills.recursion`

- `hanoi_moves(n)`: list of `(from_peg, to_peg)` moves from peg 1 to peg 3.
- `mod_pow(base, exponent, modulus)`.
- `recursion_chatbot(depth)`: the nested question-and-answer story as text.
- `count_paper_ternary(board)` and `count_paper_binary(board)`: counts of
  uniform pieces after recursive cutting.

### `searchdrills.games`

- `puyo_chains(board)`: number of chain rounds.
- `game_2048_max(board)`: largest tile within five moves.
- `truck_crossing_time(bridge_length, max_load, trucks)`.

### `searchdrills.boards`

- `tetromino_max(board)`, `laboratory_safe_area(board)`,
  `robot_cleaner(board, row, col, direction)`, `cctv_blind_spots(board)`,
  `stickers_coverage(rows, cols, stickers)`, `snake_game(size, apples, turns)`.

### `searchdrills.puzzles`

- `operator_insertion(numbers, counts)`: `(largest, smallest)` result.
- `team_split(board)`, `count_slopes(board, length)`,
  `gear_score(wheels, commands)`, `chicken_distance(board, keep)`.

## Installation

```
pip install .
```

## Example

```python
from searchdrills.shortest import hide_and_seek
from searchdrills.combinatorics import n_queens

hide_and_seek(5, 17)   # 4
n_queens(8)            # 92
```

## What it does not do

The package is a library of functions only. It has no command-line program
and does not read problem input from standard input or print answers; parse
the input yourself and call the functions.

## Running the tests

```
pip install ".[test]"
pytest
```