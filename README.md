# aocsolve

Solvers for daily programming puzzles from the 2023 season (days 17–25) and
the 2024 season (days 1–17). Each day has its own module, named
`y<year>_day<nn>`. Each module takes the puzzle input as a string.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Usage

Every module has `part_one(text)`. Every module except `y2023_day25` also has
`part_two(text)`. Each function returns the answer for its half of the puzzle.

```python
from pathlib import Path

from aocsolve import y2024_day01

text = Path("input.txt").read_text()
print(y2024_day01.part_one(text))
print(y2024_day01.part_two(text))
```

Some modules expect the input to end with a newline, as puzzle input files do.
In those modules, any text after the last newline is not treated as part of
the grid. This applies to `y2024_day04`, `y2024_day06`, `y2024_day08`,
`y2024_day10`, `y2024_day12`, `y2024_day15` and `y2024_day16`.

Some modules also expose the building blocks behind their answers, for
example:

- `y2023_day17.min_heat_loss(grid, max_consecutive, moves_needed_before_turn)`
  runs a constrained shortest-path search over a grid of digits.
- `y2023_day19.count_accepted(workflows, name, ranges)` counts the rating
  combinations that a set of parsed workflows accepts.
- `y2023_day20.parse_network(text)` builds a `Network`. Its `press()` method
  yields every pulse sent by one button press.
- `y2023_day21.part_one(text, steps=64)` counts the garden plots that can be
  reached in exactly `steps` steps.
- `y2023_day22.settle(bricks)` lets parsed bricks fall. It returns the settled
  bricks and, for each brick, the bricks directly beneath it.
- `y2024_day11.blink_count(stones, blinks)` counts the stones left after a
  number of blinks.
- `y2024_day14.safety_factor(robots, width, height, seconds)` computes the
  quadrant product for a floor of any size.
- `y2024_day17.Computer.run(program)` runs a program on the three-register
  machine and returns its output, separated by commas.

## Limitations

- The package has no command-line program. It does not read input files;
  the caller passes the input text in.
- `y2023_day24.part_two` writes a script with `z3_script(hailstones)` and runs
  an external `z3` executable on it. If `z3` is not on the `PATH`, or it
  fails, the function returns `0`.
- `y2024_day14.part_two` returns `0` if no row of eight adjacent robots ever
  appears.
- `y2024_day17.part_two` keeps searching until it finds a value of register A
  that works. If the program has no such value, the search never ends.