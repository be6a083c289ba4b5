"""In-memory square board of free and blocked tiles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

DEFAULT_DENSITY = 0.3
BLOCKED_SYMBOL = "#"
FREE_SYMBOL = "."


@dataclass
class BlockGrid:
    size: int
    blocked: set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Grid size must be at least 1, got {self.size}.")
        for index in self.blocked:
            self.check_index(index)

    @classmethod
    def random(
        cls,
        size: int,
        *,
        density: float = DEFAULT_DENSITY,
        rng: random.Random | None = None,
        keep_free: Iterable[int] = (),
    ) -> "BlockGrid":
        grid = cls(size)
        grid.randomize(density=density, rng=rng, keep_free=keep_free)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "BlockGrid":
        size = len(rows)
        blocked: set[int] = set()
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {y} has {len(row)} tiles; expected {size} for a square grid."
                )
            for x, ch in enumerate(row):
                if ch == BLOCKED_SYMBOL:
                    blocked.add(y * size + x)
                elif ch != FREE_SYMBOL:
                    raise ValueError(f"Unknown tile {ch!r} at {x},{y}.")
        return cls(size, blocked)

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def is_blocked(self, index: int) -> bool:
        return index in self.blocked

    def set_blocked(self, index: int, blocked: bool) -> None:
        self.check_index(index)
        if blocked:
            self.blocked.add(index)
        else:
            self.blocked.discard(index)

    def toggle(self, index: int) -> bool:
        """Flip a tile and return its new blocked state."""
        now_blocked = not self.is_blocked(index)
        self.set_blocked(index, now_blocked)
        return now_blocked

    def clear_blocks(self) -> None:
        self.blocked.clear()

    def randomize(
        self,
        *,
        density: float = DEFAULT_DENSITY,
        rng: random.Random | None = None,
        keep_free: Iterable[int] = (),
    ) -> None:
        if not 0 <= density < 1:
            raise ValueError(f"Obstacle density must be in [0, 1), got {density}.")
        rng = rng or random.Random()
        keep = set(keep_free)
        self.blocked = {
            index
            for index in range(self.cell_count)
            if rng.random() < density and index not in keep
        }

    def rows(self) -> list[str]:
        return [
            "".join(
                BLOCKED_SYMBOL if self.is_blocked(y * self.size + x) else FREE_SYMBOL
                for x in range(self.size)
            )
            for y in range(self.size)
        ]

    def check_index(self, index: int) -> None:
        if not 0 <= index < self.cell_count:
            raise IndexError(f"Tile {index} outside a {self.size}x{self.size} grid.")
