"""Day 10: Cathode-Ray Tube."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from aoc2022.util import AsciiImage

ROW_WIDTH = 40
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)


@dataclass(frozen=True)
class Noop:
    """Do nothing for one cycle."""


@dataclass(frozen=True)
class Addx:
    """Add ``value`` to the X register after two cycles."""

    value: int


Instruction = Union[Noop, Addx]


def parse(text: str) -> list[Instruction]:
    """Read one instruction per line."""
    instructions: list[Instruction] = []
    for line in text.splitlines():
        _, space, value = line.partition(" ")
        if not space:
            instructions.append(Noop())
            continue
        try:
            instructions.append(Addx(int(value)))
        except ValueError:
            raise ValueError(f"Couldn't read instruction value: {value}") from None
    return instructions


def evaluate(instructions: list[Instruction]) -> list[int]:
    """The X register during each cycle, the first cycle at index 0."""
    values = [1]
    for instruction in instructions:
        last = values[-1]
        if isinstance(instruction, Addx):
            values.extend((last, last + instruction.value))
        else:
            values.append(last)
    values.pop()
    return values


def render(values: list[int]) -> AsciiImage:
    """Draw the screen: a pixel is lit when the sprite covers its column."""
    rows = (values[start:start + ROW_WIDTH] for start in range(0, len(values), ROW_WIDTH))
    return AsciiImage(
        "\n".join(
            "".join("#" if abs(sprite - column) <= 1 else "." for column, sprite in enumerate(row))
            for row in rows
        )
    )


def part1(text: str) -> Optional[int]:
    """Sum of signal strengths at the sampled cycles."""
    values = evaluate(parse(text))
    return sum(values[cycle - 1] * cycle for cycle in SAMPLE_CYCLES)


def part2(text: str) -> Optional[AsciiImage]:
    """The image drawn on the screen."""
    return render(evaluate(parse(text)))