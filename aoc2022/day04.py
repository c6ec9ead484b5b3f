"""Day 4: Camp Cleanup."""

from __future__ import annotations

from typing import Optional

Span = tuple[int, int]


def _contains(span: Span, value: int) -> bool:
    low, high = span
    return low <= value <= high


def _parse_span(text: str) -> Span:
    bounds = text.split("-")
    numbers = []
    for bound in bounds:
        try:
            numbers.append(int(bound))
        except ValueError:
            raise ValueError(f"Can't parse number: {bound}") from None
    if len(numbers) != 2:
        raise ValueError(f"Input formatting incorrect for range: {text}")
    return numbers[0], numbers[1]


def parse(text: str) -> list[tuple[Span, Span]]:
    """Read each line as a pair of inclusive (start, end) ranges."""
    pairs = []
    for line in text.split():
        spans = [_parse_span(part) for part in line.strip().split(",")]
        if len(spans) != 2:
            raise ValueError(f"Expected two ranges in line: {line}")
        pairs.append((spans[0], spans[1]))
    return pairs


def part1(text: str) -> Optional[int]:
    """Count pairs in which one range fully contains the other."""
    return sum(
        1
        for first, second in parse(text)
        if (_contains(first, second[0]) and _contains(first, second[1]))
        or (_contains(second, first[0]) and _contains(second, first[1]))
    )


def part2(text: str) -> Optional[int]:
    """Count pairs whose ranges overlap at all."""
    return sum(
        1
        for first, second in parse(text)
        if _contains(first, second[0])
        or _contains(first, second[1])
        or _contains(second, first[0])
        or _contains(second, first[1])
    )