"""Console rendering of a grid."""

from __future__ import annotations

from ..core.grid import SIZE, Grid

BORDER = "|-----------------|"


def render_grid(grid: Grid) -> str:
    """Draw the grid as a bordered 9x9 box, ``_`` standing for blanks."""
    lines = ["", BORDER]
    for y in range(SIZE):
        blocks = [
            "".join(str(v) if v else "_" for v in grid.row(y)[start:start + 3])
            for start in (0, 3, 6)
        ]
        lines.append("| " + " | ".join(blocks) + " |")
        if (y + 1) % 3 == 0:
            lines.append(BORDER)
    return "\n".join(lines) + "\n"
