"""Board surface and interactive session state."""

from gridseek.board.session import BoardSession, TileState
from gridseek.board.tiles import DEFAULT_DENSITY, BlockGrid

__all__ = [
    "BlockGrid",
    "BoardSession",
    "DEFAULT_DENSITY",
    "TileState",
]
