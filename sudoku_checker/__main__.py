"""
Entry point for running the sudoku_checker module as a package.

Usage:
    python -m sudoku_checker path/to/puzzle.txt [path/to/solution.txt]
"""

from .checker import main

if __name__ == '__main__':
    main()
