import pytest

from aoc2022.day10 import Addx, Noop, evaluate, parse, part1, part2, render
from aoc2022.util import AsciiImage

SAMPLE = """addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop"""


def test_sample_1():
    assert part1(SAMPLE) == 13140


def test_sample_2():
    expected = AsciiImage(
        "\n".join(
            [
                "##..##..##..##..##..##..##..##..##..##..",
                "###...###...###...###...###...###...###.",
                "####....####....####....####....####....",
                "#####.....#####.....#####.....#####.....",
                "######......######......######......####",
                "#######.......#######.......#######.....",
            ]
        )
    )
    assert part2(SAMPLE) == expected


def test_parse_instructions():
    assert parse("noop\naddx 3\naddx -5") == [Noop(), Addx(3), Addx(-5)]


def test_parse_bad_value_raises():
    with pytest.raises(ValueError):
        parse("addx five")


def test_evaluate_small_program():
    assert evaluate([Noop(), Addx(3), Addx(-5)]) == [1, 1, 1, 4, 4]


def test_sample_has_240_cycles():
    assert len(evaluate(parse(SAMPLE))) == 240


def test_render_single_row():
    assert render([1, 1, 1, 1]).text == "###."


def test_short_program_raises():
    with pytest.raises(IndexError):
        part1("noop")