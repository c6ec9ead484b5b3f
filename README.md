# aoc2022

Solutions to a selection of the 2022 Advent of Code puzzles:

| Day | Module            | Title                    |
|-----|-------------------|--------------------------|
| 1   | `aoc2022.day01`   | Calorie Counting         |
| 2   | `aoc2022.day02`   | Rock Paper Scissors      |
| 3   | `aoc2022.day03`   | Rucksack Reorganization  |
| 4   | `aoc2022.day04`   | Camp Cleanup             |
| 5   | `aoc2022.day05`   | Supply Stacks            |
| 6   | `aoc2022.day06`   | Tuning Trouble           |
| 7   | `aoc2022.day07`   | No Space Left On Device  |
| 10  | `aoc2022.day10`   | Cathode-Ray Tube         |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Input layout

Both commands work on a directory (by default `inputs`, or the one given as
the first argument) that holds one subdirectory per day, named `day01`,
`day02`, … `day10`. Each day's puzzle input lives in `main.input` inside its
directory:

```
inputs/
  day01/main.input
  day02/main.input
  ...
  day10/main.input
```

## Fetching puzzle inputs

Puzzle inputs are personal to each account, so they are downloaded with your
session cookie. Put it in a `.env` file in the working directory:

```
AOC_SESSION=token
```

Blank lines and lines starting with `#` are ignored, and surrounding double
quotes around a value are stripped. Create the day directories you want, then
run:

```
aoc2022-inputs [directory] [--env PATH]
```

Every `dayXX` directory whose `main.input` is missing gets its input
downloaded and saved with trailing whitespace removed; inputs that already
exist are left alone. Progress is reported on standard error. A missing `.env`
file, a missing `AOC_SESSION` entry or a failed download is reported as an
error and the command exits with status 1. If `AOC_SESSION` is present but
empty, downloads are skipped with a warning.

## Running the solutions

```
aoc2022 [directory]
```

reads every day's `main.input` and prints one line per solved day, naming the
day and title and showing the answers to both parts, for example:

```
Solution(day=1, title='Calorie Counting') evaluates to: { part 1 -> 24000, part 2 -> 45000 }
```

The day 10 answer to part 2 is a picture drawn in `#` and `.` characters,
printed on its own lines. If an input file can't be read or an input can't be
parsed, the command prints the error and exits with status 1.

## Using the solvers from Python

Each day module offers `part1(text)` and `part2(text)`, which take the puzzle
input as a string:

```python
from aoc2022 import day01

text = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"
print(day01.part1(text))  # 24000
print(day01.part2(text))  # 45000
```

Malformed input raises `ValueError`.

`aoc2022.cli.all_solutions()` returns the `Solutions` collection that the
`aoc2022` command evaluates; each `Solution` has `evaluate(text)`, returning
both answers, and `describe(text)`, returning the summary line shown above.
The download helpers (`read_env_file`, `input_url`, `download_input`,
`find_days`, `ensure_inputs`) are in `aoc2022.inputs`.

## What it does not do

Only the days listed above are solved; there are no solutions for days 8, 9
or 11 onwards. The commands do not time the solutions.