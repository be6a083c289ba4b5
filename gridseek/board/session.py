"""Interactive board state: endpoint picking, walls and search overlay."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Generator, Iterable

from gridseek.board.tiles import DEFAULT_DENSITY, BlockGrid
from gridseek.search.contracts import EventKind, SearchEvent, SearchResult
from gridseek.search.driver import PathFinder

logger = logging.getLogger(__name__)


class TileState(str, Enum):
    FREE = "free"
    BLOCKED = "blocked"
    START = "start"
    END = "end"
    DISCOVERED = "discovered"
    ON_PATH = "on_path"


@dataclass
class BoardSession:
    tiles: BlockGrid
    start: int | None = None
    end: int | None = None
    picking_start: bool = True
    overlay: dict[int, EventKind] = field(default_factory=dict)
    last_result: SearchResult | None = None

    @classmethod
    def generate(
        cls,
        size: int,
        *,
        density: float = DEFAULT_DENSITY,
        rng: random.Random | None = None,
        keep_free: Iterable[int] = (),
    ) -> "BoardSession":
        tiles = BlockGrid.random(size, density=density, rng=rng, keep_free=keep_free)
        return cls(tiles=tiles)

    @property
    def size(self) -> int:
        return self.tiles.size

    def pick(self, index: int) -> TileState | None:
        """Designate start or end alternately; blocked tiles are ignored."""
        self.tiles.check_index(index)
        if self.tiles.is_blocked(index):
            return None
        if self.picking_start:
            self.start = index
            picked = TileState.START
        else:
            self.end = index
            picked = TileState.END
        self.picking_start = not self.picking_start
        self._reset_search()
        return picked

    def toggle_block(self, index: int) -> bool:
        now_blocked = self.tiles.toggle(index)
        if now_blocked:
            if self.start == index:
                self.start = None
            if self.end == index:
                self.end = None
        self._reset_search()
        return now_blocked

    def clear(self) -> None:
        self.start = None
        self.end = None
        self.picking_start = True
        self._reset_search()

    def randomize(
        self, *, density: float = DEFAULT_DENSITY, rng: random.Random | None = None
    ) -> None:
        self.clear()
        self.tiles.randomize(density=density, rng=rng)
        logger.info(
            "Board randomized: %d of %d tiles blocked",
            len(self.tiles.blocked),
            self.tiles.cell_count,
        )

    def resize(
        self,
        size: int,
        *,
        density: float = DEFAULT_DENSITY,
        rng: random.Random | None = None,
    ) -> None:
        self.clear()
        self.tiles = BlockGrid.random(size, density=density, rng=rng)
        logger.info("Board resized to %dx%d", size, size)

    def begin_search(self) -> Generator[SearchEvent, None, None]:
        """Validate endpoints now and return a lazily driven event stream.

        Each event is painted onto the overlay as it is consumed, so the
        caller controls the pacing.
        """
        finder = PathFinder(self.tiles, self.start, self.end)
        self._reset_search()
        return self._drive(finder)

    def find_path(self) -> SearchResult:
        for _ in self.begin_search():
            pass
        return self.last_result

    def apply_event(self, event: SearchEvent) -> None:
        self.overlay[event.cell] = event.kind

    def tile_state(self, index: int) -> TileState:
        if index == self.start:
            return TileState.START
        if index == self.end:
            return TileState.END
        if self.tiles.is_blocked(index):
            return TileState.BLOCKED
        kind = self.overlay.get(index)
        if kind == EventKind.ON_PATH:
            return TileState.ON_PATH
        if kind == EventKind.DISCOVERED:
            return TileState.DISCOVERED
        return TileState.FREE

    def _drive(self, finder: PathFinder) -> Generator[SearchEvent, None, None]:
        for event in finder.iter_events():
            self.apply_event(event)
            yield event
        self.last_result = finder.result()

    def _reset_search(self) -> None:
        self.overlay.clear()
        self.last_result = None
