import pytest

from aoc2022.util import AsciiImage, Solution, Solutions, read_file


def _count_lines(text):
    return len(text.splitlines())


def _first_char(text):
    return text[:1] or None


def _solution(day=1, title="Sample"):
    return Solution(day=day, title=title, part1=_count_lines, part2=_first_char)


def test_ascii_image_repr_wraps_in_newlines():
    image = AsciiImage("#.\n.#")
    assert repr(image) == "\n#.\n.#\n"
    assert str(image) == "#.\n.#"


def test_ascii_image_equality():
    assert AsciiImage("##") == AsciiImage("##")
    assert AsciiImage("##") != AsciiImage("..")


def test_evaluate_runs_both_parts():
    solution = _solution()
    assert solution.evaluate("ab\ncd") == (2, "a")


def test_evaluate_allows_missing_answers():
    solution = _solution()
    assert solution.evaluate("") == (0, None)


def test_repr_shows_day_and_title_only():
    solution = _solution(day=7, title="Sample")
    text = repr(solution)
    assert "7" in text
    assert "'Sample'" in text
    assert "part1" not in text


def test_describe_contains_results():
    solution = _solution()
    text = solution.describe("xy\nz")
    assert text.startswith(repr(solution))
    assert "part 1 -> 2" in text
    assert "part 2 -> 'x'" in text


def test_solutions_render_one_line_per_solution():
    first = _solution(day=1, title="One")
    second = _solution(day=2, title="Two")
    inputs = {1: "a", 2: "b\nc"}
    rendered = Solutions(all=[first, second]).render(inputs)
    assert rendered.splitlines() == [first.describe("a"), second.describe("b\nc")]
    assert rendered.endswith("\n")


def test_solutions_render_empty():
    assert Solutions().render({}) == ""


def test_solutions_render_missing_input_raises():
    with pytest.raises(KeyError):
        Solutions(all=[_solution(day=3)]).render({})


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "main.input"
    path.write_text("1000\n2000")
    assert read_file(path) == "1000\n2000"


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(OSError, match="Couldn't read file"):
        read_file(tmp_path / "absent.input")