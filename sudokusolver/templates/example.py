from ..core.grid import Grid
from . import Template, register_template

EXAMPLE_CELLS = [
    5, 3, 0,   0, 7, 0,   0, 0, 0,
    6, 0, 0,   1, 9, 5,   0, 0, 0,
    0, 9, 8,   0, 0, 0,   0, 6, 0,

    8, 0, 0,   0, 6, 0,   0, 0, 3,
    4, 0, 0,   8, 0, 3,   0, 0, 1,
    7, 0, 0,   0, 2, 0,   0, 0, 6,

    0, 6, 0,   0, 0, 0,   2, 8, 0,
    0, 0, 0,   4, 1, 9,   0, 0, 5,
    0, 0, 0,   0, 8, 0,   0, 7, 9,
]


def example_grid() -> Grid:
    return Grid.from_cells(EXAMPLE_CELLS)


@register_template
class ExampleTemplate(Template):
    name = "example"
    description = "a hard-coded example sudoku grid."

    def build(self, rng):
        return example_grid()
