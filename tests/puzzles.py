"""Puzzles shared by the tests, as 81-character strings (0 = unknown)."""

# 30 givens, solvable by singles alone
EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# 17 givens
MINIMAL = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
MINIMAL_SOLUTION = "693784512487512936125963874932651487568247391741398625319475268856129743274836159"

# 21 givens, needs more than singles and naked subsets
HARD = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"
HARD_SOLUTION = "812753649943682175675491283154237896369845721287169534521974368438526917796318452"

EMPTY = "0" * 81


def to_rows(puzzle):
    """Split an 81-character puzzle into 9 rows, None for unknown cells."""
    return [[int(ch) or None for ch in puzzle[i:i + 9]] for i in range(0, 81, 9)]


def to_string(rows):
    return "".join(str(v or 0) for row in rows for v in row)


def to_text(puzzle):
    """Render a puzzle in the comma-separated file format."""
    lines = []
    for row in to_rows(puzzle):
        lines.append(",".join(str(v) if v else " " for v in row) + ",")
    return "\n".join(lines) + "\n"
