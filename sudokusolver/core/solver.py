"""Iterative backtracking solver.

The search keeps no call stack. The working grid together with the cursor
position and its direction is the whole search state: a free cell's current
value records the last candidate tried there, so retreating onto it resumes
the candidate scan from that value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidGrid, IterationCountOverflow, Unsolvable
from .grid import SIZE, Grid

log = logging.getLogger(__name__)

MAX_ITERATIONS_DEFAULT = 1_000_000


class Direction(str, Enum):
    ADVANCING = "advancing"
    RETREATING = "retreating"


@dataclass
class Cursor:
    """Row-major position in the grid."""
    x: int = 0
    y: int = 0

    def advance(self) -> bool:
        """Move one cell forward. False when already on the last cell."""
        if self.x < SIZE - 1:
            self.x += 1
        elif self.y < SIZE - 1:
            self.x = 0
            self.y += 1
        else:
            return False
        return True

    def retreat(self) -> bool:
        """Move one cell back. False when already on the first cell."""
        if self.x > 0:
            self.x -= 1
        elif self.y > 0:
            self.x = SIZE - 1
            self.y -= 1
        else:
            return False
        return True

    def step(self, direction: Direction) -> bool:
        if direction is Direction.ADVANCING:
            return self.advance()
        return self.retreat()


def _first_candidate(grid: Grid, x: int, y: int, start: int) -> Optional[int]:
    for value in range(start, SIZE + 1):
        if grid.can_place(x, y, value):
            return value
    return None


class Solver:
    """Bounded backtracking search over a private copy of the input grid.

    ``iterations`` holds the number of counted steps of the last run.
    """

    def __init__(self, max_iterations: int = MAX_ITERATIONS_DEFAULT) -> None:
        self.max_iterations = max_iterations
        self.iterations = 0

    def solve(self, grid: Grid) -> Grid:
        self.iterations = 0
        if not grid.is_fully_valid():
            log.debug("rejecting invalid grid")
            raise InvalidGrid()

        solved = grid.copy()
        cursor = Cursor()
        direction = Direction.ADVANCING
        log.debug("solving with a budget of %d iterations", self.max_iterations)

        while self.iterations < self.max_iterations:
            x, y = cursor.x, cursor.y
            # presets are read from the untouched input, never from the copy
            if grid.get(x, y) == 0:
                if direction is Direction.ADVANCING:
                    value = _first_candidate(solved, x, y, 1)
                    if value is None:
                        direction = Direction.RETREATING
                    else:
                        solved.set(x, y, value)
                else:
                    value = _first_candidate(solved, x, y, solved.get(x, y))
                    if value is None:
                        solved.set(x, y, 0)
                    else:
                        solved.set(x, y, value)
                        direction = Direction.ADVANCING

            if not cursor.step(direction):
                if direction is Direction.ADVANCING:
                    log.debug("solved after %d iterations", self.iterations)
                    return solved
                log.debug("unsolvable after %d iterations", self.iterations)
                raise Unsolvable()

            self.iterations += 1

        log.debug("gave up after %d iterations", self.iterations)
        raise IterationCountOverflow(self.max_iterations)


def solve(grid: Grid, max_iterations: int = MAX_ITERATIONS_DEFAULT) -> Grid:
    """Solve ``grid`` and return the completed copy.

    Raises ``InvalidGrid``, ``Unsolvable`` or ``IterationCountOverflow``; the
    grid passed in is never modified.
    """
    return Solver(max_iterations).solve(grid)
