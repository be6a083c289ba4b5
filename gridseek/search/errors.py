"""Error taxonomy for the search core."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search core failures."""


class InvalidEndpoints(SearchError, ValueError):
    """Start or end missing, or both name the same cell."""


class GridIndexError(SearchError):
    """Caller contract violation against the grid index."""


class InvalidOffset(GridIndexError, ValueError):
    pass


class CellOutOfRange(GridIndexError, IndexError):
    pass


class EmptyFrontier(SearchError, RuntimeError):
    """Raised when selecting from an empty open set."""
