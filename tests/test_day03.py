import pytest

from aoc2022.day03 import char_to_priority, part1, part2

SAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw"""


def test_sample_1():
    assert part1(SAMPLE) == 157


def test_sample_2():
    assert part2(SAMPLE) == 70


@pytest.mark.parametrize(
    "c, priority",
    [("a", 1), ("z", 26), ("A", 27), ("Z", 52), ("p", 16), ("L", 38)],
)
def test_char_to_priority(c, priority):
    assert char_to_priority(c) == priority


@pytest.mark.parametrize("c", ["1", " ", "[", "é"])
def test_char_to_priority_none(c):
    assert char_to_priority(c) is None


def test_part1_rejects_no_common_item():
    with pytest.raises(ValueError, match="Couldn't parse line"):
        part1("abcd")


def test_part1_rejects_two_common_items():
    with pytest.raises(ValueError):
        part1("abab")


def test_part2_rejects_incomplete_group():
    with pytest.raises(ValueError, match="No common item"):
        part2("ab\nab")