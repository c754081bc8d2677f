"""Random starting grids.

A random fill is rarely a valid sudoku, so ``valid_random`` keeps drawing
until one passes the validity check or the attempt budget runs out.
"""

from __future__ import annotations

import logging
import random

from ..core.grid import CELLS, Grid
from . import Template, register_template

log = logging.getLogger(__name__)

RANDOM_ATTEMPTS_DEFAULT = 10_000
# one cell in FILL_ODDS gets a digit
FILL_ODDS = 5


def randomly_filled(rng: random.Random) -> Grid:
    """Scatter random digits over a blank grid. The result may be invalid."""
    cells = [0] * CELLS
    for i in range(CELLS):
        if rng.randrange(FILL_ODDS) == 0:
            cells[i] = rng.randint(1, 9)
    return Grid(cells)


def valid_random(rng: random.Random, attempts: int = RANDOM_ATTEMPTS_DEFAULT) -> Grid:
    """First valid random fill, or an empty grid once ``attempts`` are used up."""
    for attempt in range(attempts):
        grid = randomly_filled(rng)
        if grid.is_fully_valid():
            log.debug("valid random grid after %d attempts", attempt + 1)
            return grid
    log.warning("no valid random grid in %d attempts, using an empty grid", attempts)
    return Grid.empty()


@register_template
class RandomTemplate(Template):
    name = "random"
    description = "a randomly generated valid grid."

    def build(self, rng):
        return valid_random(rng)
