"""Tests for the comma-separated puzzle format."""

import pytest

from sudoku_checker.board_io import format_board, format_solution, parse_board, read_board, write_solution
from sudoku_checker.grid import MalformedInputError, load_grid

from .puzzles import EASY, EASY_SOLUTION, to_rows, to_string, to_text


def test_parse_board_reads_blanks_as_unknown():
    rows = parse_board(to_text(EASY))
    assert rows == to_rows(EASY)
    assert rows[0][:3] == [5, 3, None]


def test_parse_board_without_trailing_commas_and_with_blank_lines():
    text = "\n\n" + "\n".join(line.rstrip(",") for line in to_text(EASY).splitlines()) + "\n\n"
    assert to_string(parse_board(text)) == EASY


def test_parse_board_rejects_short_line():
    lines = to_text(EASY).splitlines()
    lines[3] = "8, , , ,6, , , ,"  # eight cells, trailing comma
    with pytest.raises(MalformedInputError, match="Line 4 has 8 cells"):
        parse_board("\n".join(lines))


@pytest.mark.parametrize("token", ["x", "0", "12", "-"])
def test_parse_board_rejects_bad_token(token):
    lines = to_text(EASY).splitlines()
    lines[0] = f"5,3,{token}, ,7, , , , ,"
    with pytest.raises(MalformedInputError, match="Line 1, cell 3"):
        parse_board("\n".join(lines))


def test_parse_board_rejects_missing_rows():
    lines = to_text(EASY).splitlines()[:8]
    with pytest.raises(MalformedInputError, match="8 rows"):
        parse_board("\n".join(lines))


def test_read_board(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(to_text(EASY), encoding="utf-8")
    grid = read_board(path)
    assert to_string(grid.to_rows()) == EASY


def test_format_solution_ends_with_guess_count():
    grid = load_grid(to_rows(EASY_SOLUTION))
    text = format_solution(grid, 3)
    lines = text.splitlines()
    assert lines[0] == "5, 3, 4, 6, 7, 8, 9, 1, 2"
    assert lines[9] == ""
    assert lines[-1] == "Guesses: 3"
    # the solution rows parse back as a puzzle
    assert to_string(parse_board("\n".join(lines[:9]))) == EASY_SOLUTION


def test_write_solution_to_file_and_stdout(tmp_path, capsys):
    grid = load_grid(to_rows(EASY_SOLUTION))
    path = tmp_path / "solution.txt"

    write_solution(grid, 0, path)
    write_solution(grid, 0)

    assert path.read_text(encoding="utf-8") == format_solution(grid, 0)
    assert capsys.readouterr().out == format_solution(grid, 0)


def test_format_board_marks_unknowns_and_boxes():
    pretty = format_board(load_grid(to_rows(EASY)))
    lines = pretty.splitlines()
    assert len(lines) == 11
    assert lines[0] == "5 3 . | . 7 . | . . ."
    assert set(lines[3]) == {"-"}
