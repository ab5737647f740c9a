"""
Sudoku Checker - propagation-first Sudoku solver

This package contains modules for:
- Grid state and the row/column/box constraint groups
- Candidate elimination and forced placements
- Backtracking search with snapshot rollback
- Solution checks and the comma-separated text format
"""

from .checks import is_valid_solution
from .grid import Grid, MalformedInputError, load_grid
from .solver import Outcome, SolveResult, solve, solve_puzzle

__version__ = "1.3.0"

__all__ = [
    "Grid",
    "MalformedInputError",
    "Outcome",
    "SolveResult",
    "is_valid_solution",
    "load_grid",
    "solve",
    "solve_puzzle",
]
