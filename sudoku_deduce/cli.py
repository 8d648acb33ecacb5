"""Command-line interface for the propagation solver."""

import argparse
import json
import logging
import sys
import time
import tracemalloc
from typing import List, Optional

from tqdm import tqdm

from .core.board import SudokuBoard
from .core.errors import SudokuError, InvalidInput
from .core.grid import SudokuGrid
from .solvers import PropagationSolver


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given as an 81-character string
  python -m sudoku_deduce.cli solve "53..7....6..195...."

  # Solve a 9-line puzzle file
  python -m sudoku_deduce.cli solve --file puzzle.txt --verbose

  # Solve one compact puzzle per line and save the results
  python -m sudoku_deduce.cli batch puzzles.txt --output results.json
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    solve_parser.add_argument(
        "puzzle", nargs="?", default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells). "
             "Read from stdin if neither this nor --file is given."
    )
    solve_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="File holding the puzzle as 9 lines of 9 characters"
    )
    solve_parser.add_argument(
        "--max-passes", type=int, default=None,
        help="Give up after this many propagation passes"
    )
    solve_parser.add_argument(
        "--pretty", action="store_true",
        help="Print the solution with box separators"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show solving statistics and debug logging"
    )

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve many puzzles from a file")
    batch_parser.add_argument(
        "file", type=str,
        help="File with one 81-character puzzle per line"
    )
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for results (JSON format)"
    )
    batch_parser.add_argument(
        "--max-passes", type=int, default=None,
        help="Give up on a puzzle after this many propagation passes"
    )
    batch_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "solve":
        return cmd_solve(args)
    return cmd_batch(args)


def _read_puzzle(args) -> str:
    if args.file:
        with open(args.file) as f:
            return f.read()
    if args.puzzle is not None:
        return args.puzzle
    return sys.stdin.read()


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        grid = SudokuGrid(_read_puzzle(args))
    except (OSError, InvalidInput) as e:
        print(f"Error reading puzzle: {e}", file=sys.stderr)
        return 1

    tracemalloc.start()
    start_time = time.perf_counter()
    try:
        grid.solve(max_passes=args.max_passes)
    except SudokuError as e:
        print(f"✗ {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            print("Partial grid:", file=sys.stderr)
            print(grid, file=sys.stderr)
        return 1
    finally:
        elapsed = time.perf_counter() - start_time
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    if args.pretty:
        print(grid.to_board())
    else:
        print(grid)

    if args.verbose:
        print(f"✓ Solved in {elapsed:.4f}s")
        print(f"  Passes: {grid.passes}")
        print(f"  Memory: {peak / 1024:.2f} KB")
    return 0


def cmd_batch(args) -> int:
    """Handle the batch command."""
    try:
        with open(args.file) as f:
            puzzles = [line.strip() for line in f]
    except OSError as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        return 1
    puzzles = [p for p in puzzles if p and not p.startswith("#")]

    solver = PropagationSolver(max_passes=args.max_passes)
    results = []

    for idx, puzzle in enumerate(tqdm(puzzles, desc="Solving", disable=args.no_progress), 1):
        result = {"index": idx, "puzzle": puzzle}
        try:
            board = SudokuBoard.from_string(puzzle)
        except InvalidInput as e:
            result.update(solved=False, failure="InvalidInput", error=str(e))
            results.append(result)
            continue

        solution, stats = solver.solve(board)
        result.update(stats.to_dict())
        result["solution"] = solution.to_string() if solution is not None else None
        results.append(result)

    solved = sum(1 for r in results if r["solved"])
    print(f"\nSolved {solved}/{len(results)} puzzles")
    failures = {}
    for r in results:
        if not r["solved"]:
            failures[r["failure"]] = failures.get(r["failure"], 0) + 1
    for kind, count in sorted(failures.items()):
        print(f"  {kind}: {count}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
