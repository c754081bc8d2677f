"""Failure outcomes of a solve run."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_GRID = "invalid_grid"
    UNSOLVABLE = "unsolvable"
    ITERATION_COUNT_OVERFLOW = "iteration_count_overflow"


class SolvingError(Exception):
    """Base class for every way a solve can fail."""
    kind: ErrorKind
    message: str = "The sudoku could not be solved."

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidGrid(SolvingError):
    kind = ErrorKind.INVALID_GRID
    message = "The supplied sudoku grid is invalid!"


class Unsolvable(SolvingError):
    kind = ErrorKind.UNSOLVABLE
    message = "The supplied sudoku is unsolvable!"


class IterationCountOverflow(SolvingError):
    kind = ErrorKind.ITERATION_COUNT_OVERFLOW
    message = "The solving process was abnormally long and therefore interrupted."

    def __init__(self, max_iterations: int) -> None:
        super().__init__()
        self.max_iterations = max_iterations
