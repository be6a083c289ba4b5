"""Cell addressing and obstruction queries over a square grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from gridseek.search.errors import CellOutOfRange, InvalidOffset

CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
)


class GridSurface(Protocol):
    size: int

    def is_blocked(self, index: int) -> bool:
        """Return True when the cell at ``index`` cannot be entered."""


@dataclass(frozen=True)
class Cell:
    index: int
    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise CellOutOfRange(f"grid size must be positive, got {self.size}")
        if not 0 <= self.index < self.size * self.size:
            raise CellOutOfRange(
                f"cell {self.index} outside a {self.size}x{self.size} grid"
            )

    @classmethod
    def from_xy(cls, x: int, y: int, size: int) -> "Cell":
        if not (0 <= x < size and 0 <= y < size):
            raise CellOutOfRange(f"({x}, {y}) outside a {size}x{size} grid")
        return cls(y * size + x, size)

    @property
    def x(self) -> int:
        return self.index % self.size

    @property
    def y(self) -> int:
        return self.index // self.size


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class GridIndex:
    """Pure queries against a grid surface; no search state lives here."""

    def __init__(self, surface: GridSurface) -> None:
        self._surface = surface

    @property
    def size(self) -> int:
        return self._surface.size

    def cell(self, index: int) -> Cell:
        return Cell(index, self.size)

    def neighbor(self, cell: Cell, dx: int, dy: int) -> Cell | None:
        self._check_cell(cell)
        if (dx, dy) not in CARDINAL_OFFSETS:
            raise InvalidOffset(f"({dx}, {dy}) is not a cardinal unit offset")
        x = cell.x + dx
        y = cell.y + dy
        if x < 0 or x >= self.size or y < 0 or y >= self.size:
            return None
        return Cell(y * self.size + x, self.size)

    def neighbors(self, cell: Cell) -> list[Cell]:
        """In-bounds cardinal neighbors in offset order, obstructed included."""
        found = []
        for dx, dy in CARDINAL_OFFSETS:
            candidate = self.neighbor(cell, dx, dy)
            if candidate is not None:
                found.append(candidate)
        return found

    def is_obstructed(self, cell: Cell) -> bool:
        self._check_cell(cell)
        return self._surface.is_blocked(cell.index)

    def _check_cell(self, cell: Cell) -> None:
        if cell.size != self.size:
            raise CellOutOfRange(
                f"cell from a {cell.size}x{cell.size} grid used on a "
                f"{self.size}x{self.size} grid"
            )
