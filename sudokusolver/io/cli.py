"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import random

from ..core.errors import SolvingError
from ..core.solver import MAX_ITERATIONS_DEFAULT, solve
from ..templates import TEMPLATE_REGISTRY
from . import parser
from .render import render_grid

LOG_FORMAT = "%(name)s [%(levelname)s] : %(message)s"


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-solver", description="Solves Sudoku puzzles!")
    ap.add_argument("--templates", action="store_true",
                    help="List all the available sudoku grid templates.")
    ap.add_argument("-g", "--grid", metavar="TEMPLATE | DATA | FILE",
                    help="Name of template, direct or file data (numbers separated by commas) "
                         "of the sudoku grid to solve.")
    ap.add_argument("--max-solving-iterations", "--max_solving_iterations",
                    dest="max_iterations", type=_positive_int, metavar="MAX_ITERATIONS",
                    help="Maximum number of iterations before the solving process gives up "
                         f"(default is {MAX_ITERATIONS_DEFAULT}).")
    ap.add_argument("--seed", type=int, help="Seed for the 'random' template.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log solver progress.")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.templates:
        print("Here are the available templates:")
        for name, template in TEMPLATE_REGISTRY.items():
            print(f"'{name}': {template.description}")
        return 0

    if args.grid is None:
        ap.error("the following arguments are required: -g/--grid")

    try:
        puzzle = parser.resolve_grid(args.grid, random.Random(args.seed))
    except (ValueError, OSError) as exc:
        ap.error(str(exc))

    if args.max_iterations is not None:
        max_iterations = args.max_iterations
    elif puzzle.max_iterations is not None:
        max_iterations = puzzle.max_iterations
    else:
        max_iterations = MAX_ITERATIONS_DEFAULT

    print(f"String representation of the grid: {render_grid(puzzle.grid)}")
    print("Lets try to solve this sudoku...")
    try:
        solved = solve(puzzle.grid, max_iterations)
    except SolvingError as exc:
        print(f"Failed to solve the sudoku: {exc}")
        return 1

    print(f"Solved the given grid! Here it is: {render_grid(solved)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
