"""Best-first search driver with incremental discovery events.

The driver expands one node per ``step()`` so callers can pace a
visualization between expansions. Scoring is fixed: unit step cost,
4-connected moves and a Manhattan heuristic. Closed nodes are never
reopened; with a consistent heuristic the first pop of the end cell still
carries the shortest cost.
"""

from __future__ import annotations

import logging
from typing import Iterator

from gridseek.search.contracts import (
    EventKind,
    EventSink,
    SearchEvent,
    SearchResult,
    SearchStatus,
)
from gridseek.search.errors import CellOutOfRange, InvalidEndpoints
from gridseek.search.frontier import Frontier, SearchNode
from gridseek.search.grid_index import (
    CARDINAL_OFFSETS,
    Cell,
    GridIndex,
    GridSurface,
    manhattan_distance,
)

logger = logging.getLogger(__name__)

STEP_COST = 1


class PathFinder:
    def __init__(
        self,
        grid: GridIndex | GridSurface,
        start: Cell | int | None,
        end: Cell | int | None,
        *,
        sink: EventSink | None = None,
    ) -> None:
        if start is None or end is None:
            raise InvalidEndpoints("You must specify a starting and ending node!")
        self._grid = grid if isinstance(grid, GridIndex) else GridIndex(grid)
        self._start = self._as_cell(start)
        self._end = self._as_cell(end)
        if self._start == self._end:
            raise InvalidEndpoints("start and end must be different cells")
        self._sink = sink
        self._status = SearchStatus.IDLE
        self._frontier = Frontier()
        self._nodes: dict[int, SearchNode] = {}
        self._terminal: SearchNode | None = None
        self._expanded = 0

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def end(self) -> Cell:
        return self._end

    @property
    def frontier(self) -> Frontier:
        return self._frontier

    @property
    def finished(self) -> bool:
        return self._status in (SearchStatus.SUCCEEDED, SearchStatus.EXHAUSTED)

    def node(self, index: int) -> SearchNode | None:
        return self._nodes.get(index)

    def step(self) -> list[SearchEvent]:
        """Expand one node and return the events it produced, in order."""
        if self.finished:
            return []
        if self._status == SearchStatus.IDLE:
            self._begin()
        events: list[SearchEvent] = []

        if not self._frontier:
            self._finish(SearchStatus.EXHAUSTED)
            return events

        current = self._frontier.select_best()
        self._frontier.close(current)
        self._expanded += 1

        if current.index == self._end.index:
            self._terminal = current
            self._finish(SearchStatus.SUCCEEDED)
            for index in self._intermediate_path():
                self._emit(events, index, EventKind.ON_PATH)
            return events

        for dx, dy in CARDINAL_OFFSETS:
            neighbor = self._grid.neighbor(current.cell, dx, dy)
            if neighbor is None:
                continue
            if self._grid.is_obstructed(neighbor):
                continue
            if self._frontier.is_closed(neighbor.index):
                continue

            tentative = current.g_cost + STEP_COST
            known = self._nodes.get(neighbor.index)
            if known is not None and tentative >= known.g_cost:
                continue
            candidate = SearchNode(
                cell=neighbor,
                g_cost=tentative,
                h_cost=manhattan_distance(neighbor, self._end),
                parent=current.index,
            )
            if self._frontier.discover(candidate):
                self._nodes[neighbor.index] = candidate
                self._emit(events, neighbor.index, EventKind.DISCOVERED)

        if not self._frontier:
            self._finish(SearchStatus.EXHAUSTED)
        return events

    def iter_events(self) -> Iterator[SearchEvent]:
        """Yield events one at a time until the search terminates.

        Closing the generator early abandons the search; nothing else needs
        to be released.
        """
        while not self.finished:
            yield from self.step()

    def run(self) -> SearchResult:
        for _ in self.iter_events():
            pass
        return self.result()

    def reconstruct_path(self) -> list[int]:
        """Cells from the end back toward the start, start excluded."""
        if self._terminal is None:
            return []
        path: list[int] = []
        node: SearchNode | None = self._terminal
        while node is not None and node.index != self._start.index:
            path.append(node.index)
            node = self._nodes.get(node.parent) if node.parent is not None else None
        return path

    def result(self) -> SearchResult:
        found = self._status == SearchStatus.SUCCEEDED
        return SearchResult(
            status=self._status,
            start=self._start.index,
            end=self._end.index,
            path=self.reconstruct_path() if found else [],
            cost=self._terminal.g_cost if found else None,
            expanded=self._expanded,
            discovered=len(self._nodes) - 1 if self._nodes else 0,
        )

    def _begin(self) -> None:
        start = SearchNode(
            cell=self._start,
            g_cost=0,
            h_cost=manhattan_distance(self._start, self._end),
        )
        self._nodes[start.index] = start
        self._frontier.discover(start)
        self._status = SearchStatus.RUNNING
        logger.debug(
            "Search started: %s -> %s on a %dx%d grid",
            self._start.index,
            self._end.index,
            self._grid.size,
            self._grid.size,
        )

    def _finish(self, status: SearchStatus) -> None:
        self._status = status
        if status == SearchStatus.SUCCEEDED:
            logger.info(
                "Path found: cost=%d expanded=%d", self._terminal.g_cost, self._expanded
            )
        else:
            logger.info("No path exists: expanded=%d", self._expanded)

    def _intermediate_path(self) -> list[int]:
        return [index for index in self.reconstruct_path() if index != self._end.index]

    def _emit(self, events: list[SearchEvent], index: int, kind: EventKind) -> None:
        event = SearchEvent(cell=index, kind=kind)
        events.append(event)
        if self._sink is not None:
            self._sink(event)

    def _as_cell(self, value: Cell | int) -> Cell:
        if isinstance(value, Cell):
            if value.size != self._grid.size:
                raise CellOutOfRange(
                    f"endpoint from a {value.size}x{value.size} grid used on a "
                    f"{self._grid.size}x{self._grid.size} grid"
                )
            return value
        return self._grid.cell(value)
