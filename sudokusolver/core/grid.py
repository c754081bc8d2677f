"""9x9 Sudoku grid and its row/column/group queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

SIZE = 9
CELLS = SIZE * SIZE
DIGITS = range(1, SIZE + 1)


@dataclass
class Grid:
    """Flat row-major cell values, 0 meaning blank.

    Cells are addressed by ``(x, y)`` where ``x`` is the column and ``y`` the
    row, both in ``0..8``.
    """
    cells: List[int] = field(default_factory=lambda: [0] * CELLS)

    def __post_init__(self) -> None:
        if len(self.cells) != CELLS:
            raise ValueError(f"a grid needs exactly {CELLS} values, got {len(self.cells)}")
        for value in self.cells:
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= SIZE:
                raise ValueError(f"grid values must be integers in 0..{SIZE}, got {value!r}")

    @classmethod
    def empty(cls) -> Grid:
        return cls()

    @classmethod
    def from_cells(cls, values: Iterable[int]) -> Grid:
        return cls(list(values))

    def copy(self) -> Grid:
        return Grid(list(self.cells))

    def get(self, x: int, y: int) -> int:
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            return 0
        return self.cells[y * SIZE + x]

    def set(self, x: int, y: int, value: int) -> None:
        self.cells[y * SIZE + x] = value

    def row(self, y: int) -> List[int]:
        return [self.get(x, y) for x in range(SIZE)]

    def column(self, x: int) -> List[int]:
        return [self.get(x, y) for y in range(SIZE)]

    def group(self, x: int, y: int) -> List[int]:
        """Values of the 3x3 block containing ``(x, y)``, row by row."""
        start_x = x - x % 3
        start_y = y - y % 3
        return [
            self.get(start_x + dx, start_y + dy)
            for dy in range(3)
            for dx in range(3)
        ]

    def can_place(self, x: int, y: int, value: int) -> bool:
        """Whether ``value`` is missing from the row, column and group of ``(x, y)``.

        The cell itself is assumed to be blank; its current content is not
        looked at separately.
        """
        return (
            value not in self.row(y)
            and value not in self.column(x)
            and value not in self.group(x, y)
        )

    def is_empty(self) -> bool:
        return not any(self.cells)

    def is_fully_valid(self) -> bool:
        """Check that no digit repeats in any row, column or group.

        An all-blank grid is not considered valid.
        """
        if self.is_empty():
            return False
        for y in range(SIZE):
            for x in range(SIZE):
                value = self.get(x, y)
                if value == 0:
                    continue
                # value is already in each unit, so count rather than test membership
                if self.row(y).count(value) > 1:
                    return False
                if self.column(x).count(value) > 1:
                    return False
                if self.group(x, y).count(value) > 1:
                    return False
        return True

    def is_solved(self) -> bool:
        return 0 not in self.cells and self.is_fully_valid()
