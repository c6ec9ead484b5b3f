"""Day 2: Rock Paper Scissors."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

_CODES = {"A": 0, "X": 0, "B": 1, "Y": 1, "C": 2, "Z": 2}


class Move(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @classmethod
    def from_code(cls, code: str) -> "Move":
        """Decode a letter from the strategy guide."""
        try:
            return cls(_CODES[code])
        except KeyError:
            raise ValueError(f"Input '{code}' can't be parsed") from None

    def winner_of(self, other: "Move") -> Optional["Move"]:
        """The winning move of the two, or None for a draw."""
        difference = (self - other) % 3
        if difference == 0:
            return None
        return self if difference == 1 else other

    def loser_over(self) -> "Move":
        """The move this one beats."""
        return Move((self - 1) % 3)

    def winner_over(self) -> "Move":
        """The move that beats this one."""
        return Move((self + 1) % 3)


def parse(text: str) -> list[tuple[Move, Move]]:
    """Read each line as a pair of moves."""
    pairs = []
    for line in text.splitlines():
        codes = line.strip().split(" ")
        moves = [Move.from_code(code) for code in codes]
        if len(moves) != 2:
            raise ValueError(f"Couldn't parse line: '{line}'")
        pairs.append((moves[0], moves[1]))
    return pairs


def score(pairs: list[tuple[Move, Move]]) -> int:
    """Total score for the second player across all rounds."""
    total = 0
    for theirs, mine in pairs:
        winner = theirs.winner_of(mine)
        if winner is None:
            outcome = 3
        elif winner == theirs:
            outcome = 0
        else:
            outcome = 6
        total += int(mine) + 1 + outcome
    return total


def part1(text: str) -> Optional[int]:
    """Score with the second column read as a move."""
    return score(parse(text))


def part2(text: str) -> Optional[int]:
    """Score with the second column read as lose, draw or win."""
    chosen = []
    for theirs, wanted in parse(text):
        if wanted is Move.ROCK:
            mine = theirs.loser_over()
        elif wanted is Move.PAPER:
            mine = theirs
        else:
            mine = theirs.winner_over()
        chosen.append((theirs, mine))
    return score(chosen)