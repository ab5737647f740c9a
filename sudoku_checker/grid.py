"""Grid state for the solver: placed values, candidate sets and the 27 constraint groups."""

from __future__ import annotations

from typing import Sequence

import numpy as np

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))


class MalformedInputError(ValueError):
    """Raised when a puzzle does not decode into a 9x9 grid of digits and blanks."""


def box_of(row: int, col: int) -> int:
    return BOX * (row // BOX) + col // BOX


def _box_cells(box: int) -> list[tuple[int, int]]:
    return [(BOX * (box // BOX) + p // BOX, BOX * (box % BOX) + p % BOX) for p in range(SIZE)]


def _build_groups() -> list[tuple[np.ndarray, np.ndarray]]:
    """
    Index arrays for every group: 0-8 rows, 9-17 columns, 18-26 boxes.

    Each entry is a (rows, cols) pair usable for fancy indexing into the
    value matrix or the candidate cube.
    """
    groups = []
    for r in range(SIZE):
        groups.append((np.full(SIZE, r), np.arange(SIZE)))
    for c in range(SIZE):
        groups.append((np.arange(SIZE), np.full(SIZE, c)))
    for s in range(SIZE):
        cells = _box_cells(s)
        groups.append((np.array([r for r, _ in cells]), np.array([c for _, c in cells])))
    return groups


GROUPS = _build_groups()


def cell_groups(row: int, col: int) -> tuple[int, int, int]:
    """Return the (row, column, box) group ids containing a cell."""
    return row, SIZE + col, 2 * SIZE + box_of(row, col)


def group_kind(group: int) -> str:
    return ("row", "column", "box")[group // SIZE]


def group_name(group: int) -> str:
    """Human-readable, 1-based label such as 'column 4'."""
    return f"{group_kind(group)} {group % SIZE + 1}"


class Grid:
    """
    The live 9x9 board.

    values[r, c] holds the placed digit (0 when unplaced) and
    candidates[r, c, d - 1] is True while digit d is still possible there.
    Placed cells always have an empty candidate set.
    """

    def __init__(self, values: np.ndarray, candidates: np.ndarray):
        self.values = values
        self.candidates = candidates

    @property
    def counts(self) -> np.ndarray:
        """Candidate count per cell, always in step with the candidate sets."""
        return self.candidates.sum(axis=2)

    def candidate_count(self, row: int, col: int) -> int:
        return int(self.candidates[row, col].sum())

    def candidate_digits(self, row: int, col: int) -> list[int]:
        return [int(i) + 1 for i in np.flatnonzero(self.candidates[row, col])]

    def is_full(self) -> bool:
        return bool(np.all(self.values != 0))

    def copy(self) -> Grid:
        return Grid(self.values.copy(), self.candidates.copy())

    def restore(self, snapshot: Grid) -> None:
        """Overwrite this grid in place with the state held by a snapshot."""
        np.copyto(self.values, snapshot.values)
        np.copyto(self.candidates, snapshot.candidates)

    def to_rows(self) -> list[list[int]]:
        return [[int(v) for v in row] for row in self.values]

    def __repr__(self) -> str:
        return f"Grid(placed={int(np.count_nonzero(self.values))}, open_candidates={int(self.candidates.sum())})"


def _read_cell(cell, row: int, col: int) -> int:
    if cell is None:
        return 0
    if isinstance(cell, bool) or not isinstance(cell, (int, np.integer)):
        raise MalformedInputError(f"Row {row + 1}, column {col + 1}: expected a digit 1-9 or blank, got {cell!r}")
    if not 0 <= cell <= SIZE:
        raise MalformedInputError(f"Row {row + 1}, column {col + 1}: digit {cell} out of range 1-9")
    return int(cell)


def _length(seq) -> int:
    try:
        return len(seq)
    except TypeError:
        raise MalformedInputError(f"Expected a sequence of cells, got {seq!r}") from None


def load_grid(rows: Sequence[Sequence[int | None]]) -> Grid:
    """
    Build the initial grid from 9 rows of 9 cells.

    Cells are digits 1-9, or None/0 for an unknown cell. Known cells start
    with no candidates, unknown cells with all nine.

    Raises:
        MalformedInputError: if the shape is not 9x9 or a cell is not a digit/blank
    """
    if isinstance(rows, (str, bytes)) or _length(rows) != SIZE:
        raise MalformedInputError(f"Expected {SIZE} rows, got {_length(rows)}")

    values = np.zeros((SIZE, SIZE), dtype=np.int8)
    for r, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or _length(row) != SIZE:
            raise MalformedInputError(f"Row {r + 1} has {_length(row)} cells, expected {SIZE}")
        for c, cell in enumerate(row):
            values[r, c] = _read_cell(cell, r, c)

    candidates = np.zeros((SIZE, SIZE, SIZE), dtype=bool)
    candidates[values == 0] = True
    return Grid(values, candidates)
