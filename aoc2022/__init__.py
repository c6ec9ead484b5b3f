"""Solutions to a selection of the 2022 Advent of Code puzzles, and an input downloader."""

__version__ = "0.1.0"