"""Shared types for describing and evaluating daily puzzle solutions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class AsciiImage:
    """A multi-line picture made of characters, shown as-is rather than escaped."""

    text: str

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"\n{self.text}\n"


@dataclass(frozen=True, repr=False)
class Solution(Generic[T, U]):
    """A day's puzzle: its number, title and the two functions that solve it."""

    day: int
    title: str
    part1: Callable[[str], Optional[T]]
    part2: Callable[[str], Optional[U]]

    def __repr__(self) -> str:
        return f"Solution(day={self.day}, title={self.title!r})"

    def evaluate(self, text: str) -> tuple[Optional[T], Optional[U]]:
        """Run both parts on the puzzle input."""
        return self.part1(text), self.part2(text)

    def describe(self, text: str) -> str:
        """Run both parts and return a one-line summary of the results."""
        first, second = self.evaluate(text)
        return f"{self!r} evaluates to: {{ part 1 -> {first!r}, part 2 -> {second!r} }}"


@dataclass
class Solutions:
    """An ordered collection of solutions."""

    all: list[Solution[Any, Any]] = field(default_factory=list)

    def render(self, inputs: Mapping[int, str]) -> str:
        """Describe every solution using its day's input; one line each."""
        return "".join(f"{solution.describe(inputs[solution.day])}\n" for solution in self.all)


def read_file(path: str | Path) -> str:
    """Read a text file, raising OSError with the path in the message on failure."""
    path = Path(path)
    try:
        return path.read_text()
    except OSError as exc:
        raise OSError(f"Couldn't read file, with path {str(path)!r}") from exc