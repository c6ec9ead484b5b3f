"""Day 6: Tuning Trouble."""

from __future__ import annotations

from typing import Optional


def find_marker(text: str, width: int) -> int:
    """Characters read up to and including the first window of distinct characters."""
    windows = max(len(text) - width + 1, 0)
    for start in range(windows):
        if len(set(text[start:start + width])) == width:
            return start + width
    return windows + width


def part1(text: str) -> Optional[int]:
    """Position of the end of the start-of-packet marker."""
    return find_marker(text, 4)


def part2(text: str) -> Optional[int]:
    """Position of the end of the start-of-message marker."""
    return find_marker(text, 14)