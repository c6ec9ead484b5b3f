"""Day 5: Supply Stacks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

_CELL = r"(?:\[[^\W\d_]\]|   )"
_ROW = re.compile(rf"{_CELL}(?: {_CELL})*")
_WORD = r" ?[^\W\d_]+ "
_INSTRUCTION = re.compile(rf"{_WORD}([0-9]+){_WORD}([0-9]+){_WORD}([0-9]+)")


@dataclass(frozen=True)
class Crate:
    """A single lettered crate."""

    c: str

    def __str__(self) -> str:
        return f"[{self.c}]"


@dataclass
class Stack:
    """A pile of crates, bottom first."""

    crates: list[Crate] = field(default_factory=list)

    def pop(self, count: int) -> list[Crate]:
        """Remove and return the top ``count`` crates, keeping their order."""
        if count < 0 or count > len(self.crates):
            raise ValueError(f"Can't take {count} crates from a stack of {len(self.crates)}")
        cut = len(self.crates) - count
        taken = self.crates[cut:]
        del self.crates[cut:]
        return taken

    def push(self, crates: list[Crate]) -> None:
        """Place crates on top, the last one ending up topmost."""
        self.crates.extend(crates)

    def __str__(self) -> str:
        return " ".join(str(crate) for crate in self.crates)


@dataclass
class Stacks:
    """All the stacks on the dock, in order."""

    stacks: list[Stack] = field(default_factory=list)

    def transfer(self, count: int, source: int, target: int) -> None:
        """Move ``count`` crates at once from one stack to another."""
        crates = self.stacks[source].pop(count)
        self.stacks[target].push(crates)

    def tops(self) -> str:
        """The letters of the top crate of each non-empty stack."""
        return "".join(stack.crates[-1].c for stack in self.stacks if stack.crates)

    def __str__(self) -> str:
        return "\n".join(f"{index}: {stack}" for index, stack in enumerate(self.stacks))


@dataclass(frozen=True)
class Instruction:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (zero-based)."""

    count: int
    source: int
    target: int


def _parse_row(line: str) -> Optional[list[Optional[Crate]]]:
    if not _ROW.fullmatch(line):
        return None
    cells = (line[start:start + 3] for start in range(0, len(line), 4))
    return [None if cell == "   " else Crate(cell[1]) for cell in cells]


def _parse_instruction(line: str) -> Instruction:
    match = _INSTRUCTION.fullmatch(line)
    if match is None:
        raise ValueError(f"Couldn't parse instruction: {line!r}")
    count, source, target = (int(group) for group in match.groups())
    if max(count, source, target) > 255:
        raise ValueError(f"Number out of range in instruction: {line!r}")
    if source == 0 or target == 0:
        raise ValueError(f"Stack numbers start at 1: {line!r}")
    return Instruction(count, source - 1, target - 1)


def parse(text: str) -> tuple[list[list[Optional[Crate]]], list[Instruction]]:
    """Split the drawing into rows of crates (top first) and the list of moves."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    rows: list[list[Optional[Crate]]] = []
    position = 0
    # Every row of the drawing must be followed by a line ending.
    while position < len(lines) - 1:
        row = _parse_row(lines[position])
        if row is None:
            break
        rows.append(row)
        position += 1
    if not rows:
        raise ValueError("No rows of crates found")
    if position + 2 >= len(lines) or lines[position + 1] != "":
        raise ValueError("Expected a label line and a blank line after the crates")
    instructions = [_parse_instruction(line) for line in lines[position + 2:]]
    return rows, instructions


def transpose(rows: list[list[Optional[Crate]]]) -> Stacks:
    """Turn rows of the drawing (top first) into stacks (bottom first)."""
    if not rows:
        raise ValueError("No rows to transpose")
    width = max(len(row) for row in rows)
    return Stacks(
        [
            Stack([row[column] for row in reversed(rows) if column < len(row) and row[column] is not None])
            for column in range(width)
        ]
    )


def part1(text: str) -> Optional[str]:
    """Top crates after moving crates one at a time."""
    rows, instructions = parse(text)
    stacks = transpose(rows)
    for instruction in instructions:
        for _ in range(instruction.count):
            stacks.transfer(1, instruction.source, instruction.target)
    return stacks.tops()


def part2(text: str) -> Optional[str]:
    """Top crates after moving each batch of crates at once."""
    rows, instructions = parse(text)
    stacks = transpose(rows)
    for instruction in instructions:
        stacks.transfer(instruction.count, instruction.source, instruction.target)
    return stacks.tops()