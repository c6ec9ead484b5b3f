"""Downloading missing puzzle inputs into each day's directory."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from urllib import request

YEAR = 2022
BASE_URL = "https://adventofcode.com"
INPUT_NAME = "main.input"
TOKEN_KEY = "AOC_SESSION"

_DAY_DIR = re.compile(r"day(\+?\d+)")


class InputError(Exception):
    """Raised when puzzle inputs can't be located or fetched."""


def _warn(message: str) -> None:
    print(f"warning: {message}", file=sys.stderr)


def _strip_quotes(value: str) -> str:
    inner = value[1:] if value.startswith('"') else value
    return inner[:-1] if inner.endswith('"') else value


def read_env_file(path: str | Path = ".env") -> dict[str, str]:
    """Read ``KEY=value`` lines, skipping blanks and ``#`` comments."""
    values: dict[str, str] = {}
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            key, equals, value = line.partition("=")
            if not equals:
                continue
            values[key.rstrip()] = _strip_quotes(value.lstrip())
    return values


def input_url(day: int) -> str:
    """Where the input for ``day`` is published."""
    return f"{BASE_URL}/{YEAR}/day/{day}/input"


def download_input(day: int, session_token: str, destination: str | Path) -> Path:
    """Fetch the input for ``day`` and save it, without trailing whitespace."""
    destination = Path(destination)
    req = request.Request(input_url(day), headers={"Cookie": f"session={session_token}"})
    try:
        with request.urlopen(req) as response:
            body = response.read().decode("utf-8")
    except OSError as exc:
        _warn(f"Failed to download input for Day {day}: {exc}")
        raise InputError(f"Failed to download input for Day {day}: {exc}") from exc
    destination.write_text(body.rstrip(), encoding="utf-8")
    _warn(f"Successfully downloaded and saved '{destination}'")
    return destination


def find_days(directory: str | Path) -> list[tuple[int, Path]]:
    """The ``dayXX`` subdirectories of ``directory`` with their day numbers, in day order."""
    days = []
    for entry in Path(directory).iterdir():
        if not entry.is_dir() or len(entry.name) != 5:
            continue
        match = _DAY_DIR.fullmatch(entry.name)
        if match is None:
            continue
        day = int(match.group(1))
        if day <= 255:
            days.append((day, entry))
    return sorted(days)


def ensure_inputs(directory: str | Path, env_path: str | Path = ".env") -> list[Path]:
    """Download the input of every day directory that lacks one; return the files written."""
    try:
        variables = read_env_file(env_path)
    except OSError as exc:
        _warn(f"Error reading .env file: {exc}. Input files will not be downloaded.")
        raise InputError(f"Error reading .env file: {exc}") from exc
    if TOKEN_KEY not in variables:
        _warn(f".env file exists, but doesn't contain the {TOKEN_KEY} token.")
        raise InputError(f"No {TOKEN_KEY} token present in the .env file.")
    session_token = variables[TOKEN_KEY]

    downloaded = []
    for day, path in find_days(directory):
        input_path = path / INPUT_NAME
        if input_path.exists():
            continue
        _warn(f"Input file '{input_path}' not found. Attempting download...")
        if not session_token:
            _warn(
                f"Skipping download for Day {day} because {TOKEN_KEY} token is missing or empty."
            )
            continue
        downloaded.append(download_input(day, session_token, input_path))
    return downloaded


def main(argv: list[str] | None = None) -> int:
    """Fetch every missing input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="aoc2022-inputs", description="Download missing puzzle inputs."
    )
    parser.add_argument("directory", nargs="?", default="inputs", type=Path)
    parser.add_argument("--env", default=".env", type=Path, help="file holding the session token")
    args = parser.parse_args(argv)
    try:
        ensure_inputs(args.directory, args.env)
    except (InputError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0