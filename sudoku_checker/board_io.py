"""
Reading and writing puzzles in the comma-separated text format.

A puzzle file is 9 lines of 9 comma-separated cells, each a digit 1-9 or a
blank for an unknown cell:

    5,3, , ,7, , , , ,
    6, , ,1,9,5, , , ,
    ...

A trailing comma after the ninth cell is allowed. Solution files hold the
filled rows followed by a blank line and "Guesses: <N>".
"""

import sys
from pathlib import Path

from .grid import SIZE, Grid, MalformedInputError, load_grid


def _parse_token(token: str, line_no: int, col: int) -> int | None:
    token = token.strip()
    if not token:
        return None
    if len(token) == 1 and token in "123456789":
        return int(token)
    raise MalformedInputError(f"Line {line_no}, cell {col + 1}: expected a digit 1-9 or blank, got {token!r}")


def parse_board(text: str) -> list[list[int | None]]:
    """
    Decode puzzle text into 9 rows of 9 cells (None for unknown).

    Raises:
        MalformedInputError: on a wrong number of lines/cells or a bad token
    """
    rows = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        tokens = line.split(",")
        if tokens[-1] == "":
            # trailing comma after the last cell
            tokens.pop()
        if len(tokens) != SIZE:
            raise MalformedInputError(f"Line {line_no} has {len(tokens)} cells, expected {SIZE}")
        rows.append([_parse_token(token, line_no, col) for col, token in enumerate(tokens)])

    if len(rows) != SIZE:
        raise MalformedInputError(f"Puzzle has {len(rows)} rows, expected {SIZE}")
    return rows


def read_board(path: str | Path) -> Grid:
    text = Path(path).read_text(encoding="utf-8")
    return load_grid(parse_board(text))


def format_solution(grid: Grid, guesses: int) -> str:
    lines = [", ".join(str(v) for v in row) for row in grid.to_rows()]
    lines.append("")
    lines.append(f"Guesses: {guesses}")
    return "\n".join(lines) + "\n"


def write_solution(grid: Grid, guesses: int, path: str | Path | None = None) -> None:
    """Write the solution file, or print it to stdout when no path is given."""
    text = format_solution(grid, guesses)
    if path is None:
        sys.stdout.write(text)
        return
    Path(path).write_text(text, encoding="utf-8")


def format_board(grid: Grid) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(grid.to_rows()):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
