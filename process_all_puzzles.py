#!/usr/bin/env python3
"""
Solve every puzzle file in a directory and print a summary.
"""

import argparse
import glob
import os
import sys

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_checker.checker import SudokuChecker
from sudoku_checker.grid import MalformedInputError


def main():
    """Process all .txt puzzles in the given directory."""
    parser = argparse.ArgumentParser(description='Solve all puzzle files in a directory')
    parser.add_argument('directory', nargs='?', default='puzzles',
                        help='Directory containing *.txt puzzles (default: puzzles)')
    parser.add_argument('--output', '-o', default='output',
                        help='Directory for solution files (default: output)')
    args = parser.parse_args()

    puzzle_files = sorted(glob.glob(os.path.join(args.directory, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {args.directory}!")
        return

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    os.makedirs(args.output, exist_ok=True)
    checker = SudokuChecker(verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
        output_path = os.path.join(args.output, f"{base_name}_solution.txt")
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            result = checker.process_file(puzzle_path, output_path)
        except (MalformedInputError, OSError) as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)
            continue

        if result['solution'] is not None:
            print(f"      ✓ Solved with {result['guesses']} guesses")
            results['solved'].append(puzzle_path)
        else:
            print("      ✗ No solution")
            results['unsolved'].append(puzzle_path)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    print(f"\nSolutions saved to: {args.output}/")


if __name__ == '__main__':
    main()
