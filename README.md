# algosolve

A library of solutions to classic competitive-programming problems. Each problem
is one plain function that takes Python values and returns Python values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Conventions

- Where a problem may have no answer, the function returns `None`. This applies to
  `three_sum`, `two_sum`, `min_coins`, `palindrome_reorder`,
  `reorder_no_adjacent` and `raab_game`. `sell_tickets` puts `None` in its result
  for each customer who gets no ticket.
- Positions in results are 1-based wherever the problem speaks of positions
  (`three_sum`, `two_sum`, `nearest_smaller_positions`, `josephus_order`).
- Counts that can grow large are returned modulo 10^9 + 7:
  `count_bit_strings`, `count_dice_combinations`, `count_coin_combinations`,
  `count_grid_paths` and `count_distinct_value_subsequences`.
- Input that has no meaningful answer, such as an empty list where one value
  is needed, a position outside the street, or a malformed path description,
  raises `ValueError`.

## Modules

### `algosolve.two_pointers`

- `three_sum(values, target)`, `two_sum(values, target)`: positions of values
  summing to `target`, as a tuple, or `None`.
- `count_apartment_matches(applicants, apartments, tolerance)`: how many
  applicants get an apartment whose size is within `tolerance` of the wanted size.
- `count_gondolas(weights, limit)`: fewest gondolas holding at most two children
  each under a weight limit.
- `count_subarrays_with_distinct_at_most(values, k)`: subarrays with at most `k`
  distinct values.
- `longest_unique_segment(values)`: length of the longest run of distinct values.
- `count_unique_subarrays(values)`: subarrays whose values are all distinct.

### `algosolve.binary_search`

- `min_largest_part_sum(values, parts)`: smallest possible largest sum when the
  values are split into at most `parts` contiguous parts.
- `min_production_time(machine_times, products)`: shortest time for the machines
  to make `products` items.

### `algosolve.dp`

- `max_pages(prices, pages, budget)`: most pages buyable, each book at most once.
- `count_coin_combinations(coins, target)`: unordered combinations summing to
  `target`.
- `count_dice_combinations(n)`: ordered dice throws summing to `n`.
- `min_coins(coins, target)`: fewest coins summing to `target`, or `None`.
- `count_grid_paths(grid)`: right/down paths from the top-left to the
  bottom-right cell of a grid of strings, where `*` marks a trap.
- `count_digit_removal_steps(n)`: steps to reach zero by subtracting the largest
  digit each time.

### `algosolve.number_theory`

- `mod_pow(base, exp, mod)`: modular power by repeated squaring.
- `count_bit_strings(n)`: number of bit strings of length `n`.
- `trailing_zeros(n)`: trailing zeros of `n!`.
- `digit_at(k)`: the `k`-th digit of `123456789101112...`.
- `count_distinct_value_subsequences(values)`: non-empty subsequences whose
  values are all distinct.
- `can_empty_piles(a, b)`: whether two coin piles can be emptied by taking one
  coin from one pile and two from the other on each move.

### `algosolve.greedy`

- `smallest_missing_sum(coins)`: smallest positive sum no subset of coins makes.
- `min_stick_cost(lengths)`: least total change to make all sticks equal.
- `min_reading_time(times)`: least time for two readers to read every book.
- `max_task_reward(tasks)`: best total of deadline minus finish time over
  `(duration, deadline)` tasks.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous subarray.
- `max_movies(movies)`: how many `(start, end)` movies one person can watch.
- `max_movies_with_members(movies, members)`: the same for a club of `members`.
- `max_customers(visits)`: most customers present at once.
- `allocate_rooms(visits)`: returns `(room_count, rooms)`, the room number of
  each visit in input order.
- `count_towers(cubes)`: fewest towers built from cubes in the given order.
- `sell_tickets(prices, max_prices)`: the price each customer pays, or `None`.

### `algosolve.sequences`

- `count_divisible_subarrays(values)`: subarrays whose sum is divisible by the
  number of values.
- `count_subarrays_with_sum(values, target)`: subarrays summing to `target`.
- `max_subarray_sum_in_range(values, a, b)`: largest sum of a subarray whose
  length is between `a` and `b`.
- `nearest_smaller_positions(values)`: for each value, the position of the
  nearest smaller value to its left, or 0.
- `josephus_order(n, k)`: removal order of people `1..n` when every
  `(k+1)`-th is removed.

### `algosolve.ranges`

- `nested_range_counts(ranges)`: returns `(contains, contained)`, two lists in
  input order counting, for each `(left, right)` range, the ranges it contains
  and the ranges that contain it.
- `traffic_light_passages(length, positions)`: the longest light-free passage
  after each light is added.

### `algosolve.backtracking`

- `count_queen_placements(grid)`: ways to place one queen per row on free `.`
  cells of a square grid without attacks.
- `min_apple_difference(weights)`: smallest weight difference between two groups.
- `distinct_permutations(s)`: every distinct reordering of `s`, sorted.
- `hanoi_moves(n)`: the `(from, to)` moves shifting `n` disks from stack 1 to 3.
- `count_grid_path_descriptions(description)`: 7x7 grid paths from the top-left
  to the bottom-left corner matching a 48-move description of `U`, `D`, `L`,
  `R` and `?`.

### `algosolve.strings`

- `palindrome_reorder(s)`: a palindrome of the letters of `s`, or `None`.
- `reorder_no_adjacent(s)`: the alphabetically smallest reordering of an
  uppercase string with no equal neighbours, or `None`.

### `algosolve.constructive`

- `binary_strings(n)`: the `n`-bit forms of 1 through `2**n`; the all-zero
  string comes last.
- `gray_code(n)`: the reflected Gray code of `n` bits.
- `mex_grid(n)`: an `n x n` grid where each cell is the smallest value missing
  above it and to its left.
- `recolor_grid(grid)`: recolours every cell with `A`-`D` so it differs from its
  old colour and its upper and left neighbours.
- `raab_game(n, a, b)`: `(first, second)` card orders so the players win `a` and
  `b` rounds, or `None`.

### `algosolve.grids`

- `knight_distances(n)`: fewest knight moves from the top-left corner to every
  square of an `n x n` board.

## Examples

```python
from algosolve.number_theory import count_bit_strings, trailing_zeros, digit_at, can_empty_piles
from algosolve.backtracking import hanoi_moves, distinct_permutations

count_bit_strings(3)                 # 8
trailing_zeros(20)                   # 4
digit_at(19)                         # 4
can_empty_piles(2, 1)                # True
hanoi_moves(2)                       # [(1, 2), (1, 3), (2, 3)]
len(distinct_permutations("aabac"))  # 20
```

## What this package does not do

There is no command-line program. The package does not read problem input from
standard input or files and does not print answers; callers pass Python values
to the functions and format the results themselves.