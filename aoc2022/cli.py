"""Run every solved day on its input and print the results."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from aoc2022 import day01, day02, day03, day04, day05, day06, day07, day10
from aoc2022.inputs import INPUT_NAME
from aoc2022.util import Solution, Solutions, read_file


def all_solutions() -> Solutions:
    """Every solved day, in order."""
    return Solutions(
        all=[
            Solution(1, "Calorie Counting", day01.part1, day01.part2),
            Solution(2, "Rock Paper Scissors", day02.part1, day02.part2),
            Solution(3, "Rucksack Reorganization", day03.part1, day03.part2),
            Solution(4, "Camp Cleanup", day04.part1, day04.part2),
            Solution(5, "Supply Stacks", day05.part1, day05.part2),
            Solution(6, "Tuning Trouble", day06.part1, day06.part2),
            Solution(7, "No Space Left On Device", day07.part1, day07.part2),
            Solution(10, "Cathode-Ray Tube", day10.part1, day10.part2),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Evaluate all solutions against ``<directory>/dayXX/main.input``."""
    parser = argparse.ArgumentParser(prog="aoc2022", description="Print every day's answers.")
    parser.add_argument("directory", nargs="?", default="inputs", type=Path)
    args = parser.parse_args(argv)

    solutions = all_solutions()
    try:
        inputs = {
            solution.day: read_file(args.directory / f"day{solution.day:02d}" / INPUT_NAME)
            for solution in solutions.all
        }
        output = solutions.render(inputs)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0