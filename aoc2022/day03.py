"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

from typing import Optional


def char_to_priority(c: str) -> Optional[int]:
    """Priority of an item: a-z are 1-26, A-Z are 27-52, anything else has none."""
    code = ord(c)
    if 65 <= code <= 90:
        return code - 65 + 27
    if 97 <= code <= 122:
        return code - 97 + 1
    return None


def _priority(c: str) -> int:
    priority = char_to_priority(c)
    if priority is None:
        raise ValueError(f"Couldn't find priority of char {c}")
    return priority


def part1(text: str) -> Optional[int]:
    """Sum of priorities of the item shared by both halves of each rucksack."""
    total = 0
    for line in text.split():
        middle = len(line) // 2
        left, right = line[:middle], line[middle:]
        common = list(dict.fromkeys(c for c in left if c in right))
        if len(common) != 1:
            raise ValueError(f"Couldn't parse line: {line}, common chars: {common}")
        total += _priority(common[0])
    return total


def part2(text: str) -> Optional[int]:
    """Sum of priorities of the badge item shared by each group of three."""
    lines = text.split()
    total = 0
    for start in range(0, len(lines), 3):
        group = lines[start:start + 3]
        common = set.intersection(*(set(r) for r in group)) if len(group) == 3 else set()
        if not common:
            raise ValueError(f"No common item type found in line: {group}")
        total += _priority(min(common))
    return total