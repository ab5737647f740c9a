"""
Sudoku Checker - Main Application Module
"""

import argparse
import os
import sys

from .board_io import format_board, read_board, write_solution
from .checks import find_conflicts, is_valid_solution
from .grid import MalformedInputError, load_grid
from .solver import Outcome, solve


class SudokuChecker:
    """
    Main class for the Sudoku Checker application.

    This class runs the pipeline for one puzzle file: load the grid, check
    the givens, solve, verify the result and write the solution file.
    """

    def __init__(self, verbose=True, debug=False):
        """
        Initialize the Sudoku Checker.

        Args:
            verbose (bool): Print progress for each pipeline step
            debug (bool): Also print every guess and backtrack made by the solver
        """
        self.verbose = verbose
        self.debug = debug

    def _log(self, message):
        if self.verbose:
            print(message)

    def process_file(self, input_path, output_path=None):
        """
        Solve the puzzle stored in input_path.

        Pipeline steps:
        1. Load and parse the puzzle text
        2. Check the givens for clashes
        3. Propagate and search for a solution
        4. Verify the filled grid and write it out

        Args:
            input_path (str): Path to the puzzle file
            output_path (str | None): Solution file, or None for stdout

        Returns:
            dict: outcome, guess count, puzzle and solution rows, given conflicts

        Raises:
            MalformedInputError: if the puzzle file is not a 9x9 grid of digits/blanks
        """
        self._log(f"\n{'='*60}")
        self._log(f"Processing: {os.path.basename(input_path)}")
        self._log(f"{'='*60}")

        self._log("\n[1/4] Loading puzzle...")
        grid = read_board(input_path)
        puzzle = grid.to_rows()
        given_count = sum(1 for row in puzzle for v in row if v)
        self._log(f"      Givens: {given_count}")
        if self.verbose:
            print(format_board(grid))

        self._log("\n[2/4] Checking givens...")
        conflicts = find_conflicts(grid)
        if conflicts:
            for note in conflicts:
                self._log(f"        - {note}")
        else:
            self._log("      ✓ No clashing givens")

        self._log("\n[3/4] Solving...")
        outcome, guesses = solve(grid, debug=self.debug)

        self._log("\n[4/4] Verifying solution...")
        result = {
            'outcome': outcome,
            'guesses': guesses,
            'puzzle': puzzle,
            'solution': None,
            'conflicts': conflicts,
        }
        if outcome is not Outcome.SOLVED or not is_valid_solution(grid):
            self._log(f"      ✗ Could not compute a solution ({guesses} guesses tried)")
            return result

        result['solution'] = grid.to_rows()
        self._log(f"      ✓ Solved with {guesses} guesses")
        if self.verbose:
            print(format_board(grid))

        write_solution(grid, guesses, output_path)
        if output_path is not None:
            self._log(f"\nSolution saved to: {output_path}")
        return result


def main(argv=None):
    """
    Main entry point for the Sudoku Checker application.

    Handles command-line arguments and solves one puzzle file.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Checker - propagation and backtracking solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle and print the solution:
    python -m sudoku_checker puzzles/easy.txt

  Write the solution to a file:
    python -m sudoku_checker puzzles/hard.txt solution.txt

  Show every guess and backtrack:
    python -m sudoku_checker puzzles/hard.txt solution.txt --debug
        """
    )

    parser.add_argument('input',
                        help='Puzzle file (9 lines of 9 comma-separated cells)')
    parser.add_argument('output', nargs='?', default=None,
                        help='Solution file (default: stdout)')
    parser.add_argument('--pretty', action='store_true',
                        help='Also print the solved board as a grid')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print progress')
    parser.add_argument('--debug', action='store_true',
                        help='Print every guess and backtrack')

    args = parser.parse_args(argv)

    if not os.path.exists(args.input):
        print(f"Error: Puzzle file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    # Progress would interleave with the solution when it goes to stdout
    verbose = not args.quiet and args.output is not None
    checker = SudokuChecker(verbose=verbose, debug=args.debug)

    try:
        result = checker.process_file(args.input, args.output)
    except MalformedInputError as e:
        print(f"Error: Improper input formatting: {e}", file=sys.stderr)
        print("Each cell must be a digit (1-9) if filled, or a space if empty, "
              "separated by commas.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nError during processing: {str(e)}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if result['solution'] is None:
        print("Could not compute a solution", file=sys.stderr)
        for note in result['conflicts']:
            print(f"  - {note}", file=sys.stderr)
        sys.exit(1)

    if args.pretty:
        print(format_board(load_grid(result['solution'])))


if __name__ == '__main__':
    main()
