"""Day 1: Calorie Counting."""

from __future__ import annotations

from typing import Optional


def parse(text: str) -> list[int]:
    """Total each blank-line separated group and return the totals, largest first."""
    totals = []
    for chunk in text.split("\n\n"):
        total = 0
        for line in chunk.split("\n"):
            try:
                total += int(line.strip())
            except ValueError:
                raise ValueError(f"Parsing error for line: `{line}`") from None
        totals.append(total)
    return sorted(totals, reverse=True)


def part1(text: str) -> Optional[int]:
    """The largest group total."""
    totals = parse(text)
    return totals[0] if totals else None


def part2(text: str) -> Optional[int]:
    """The sum of the three largest group totals."""
    totals = parse(text)
    if len(totals) < 3:
        raise ValueError(f"Need at least three groups, found {len(totals)}")
    return sum(totals[:3])