"""Grid pathfinding core."""

from gridseek.search.contracts import (
    EventKind,
    EventSink,
    SearchEvent,
    SearchResult,
    SearchStatus,
)
from gridseek.search.driver import PathFinder
from gridseek.search.errors import (
    CellOutOfRange,
    EmptyFrontier,
    GridIndexError,
    InvalidEndpoints,
    InvalidOffset,
    SearchError,
)
from gridseek.search.frontier import Frontier, SearchNode
from gridseek.search.grid_index import (
    CARDINAL_OFFSETS,
    Cell,
    GridIndex,
    GridSurface,
    manhattan_distance,
)

__all__ = [
    "CARDINAL_OFFSETS",
    "Cell",
    "CellOutOfRange",
    "EmptyFrontier",
    "EventKind",
    "EventSink",
    "Frontier",
    "GridIndex",
    "GridIndexError",
    "GridSurface",
    "InvalidEndpoints",
    "InvalidOffset",
    "PathFinder",
    "SearchError",
    "SearchEvent",
    "SearchNode",
    "SearchResult",
    "SearchStatus",
    "manhattan_distance",
]
