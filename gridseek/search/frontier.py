"""Open/closed set bookkeeping for best-first grid search."""

from __future__ import annotations

from dataclasses import dataclass

from gridseek.search.errors import EmptyFrontier
from gridseek.search.grid_index import Cell


@dataclass
class SearchNode:
    """Arena record for one cell; ``parent`` is a cell index, not a reference."""

    cell: Cell
    g_cost: int | None = None
    h_cost: int | None = None
    parent: int | None = None

    @property
    def index(self) -> int:
        return self.cell.index

    @property
    def f_cost(self) -> int:
        if self.g_cost is None or self.h_cost is None:
            raise ValueError(f"node {self.index} has not been scored yet")
        return self.g_cost + self.h_cost


class Frontier:
    def __init__(self) -> None:
        self.open: dict[int, SearchNode] = {}
        self.closed: set[int] = set()

    def __len__(self) -> int:
        return len(self.open)

    def __bool__(self) -> bool:
        return bool(self.open)

    def is_open(self, index: int) -> bool:
        return index in self.open

    def is_closed(self, index: int) -> bool:
        return index in self.closed

    def select_best(self) -> SearchNode:
        """Return the first open node, in insertion order, with minimum f cost."""
        if not self.open:
            raise EmptyFrontier("cannot select from an empty open set")
        best: SearchNode | None = None
        for node in self.open.values():
            if best is None or node.f_cost < best.f_cost:
                best = node
        return best

    def discover(self, node: SearchNode) -> bool:
        """Open ``node`` or improve its open entry; True when newly opened."""
        if node.index in self.closed:
            return False
        existing = self.open.get(node.index)
        if existing is None:
            self.open[node.index] = node
            return True
        if node.g_cost < existing.g_cost:
            existing.g_cost = node.g_cost
            existing.h_cost = node.h_cost
            existing.parent = node.parent
        return False

    def close(self, node: SearchNode) -> None:
        self.open.pop(node.index, None)
        self.closed.add(node.index)
