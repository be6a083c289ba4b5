"""Textual widgets for the board view."""

from __future__ import annotations

from typing import Callable

from rich.console import Group, RenderableType
from textual.events import Click
from textual.message import Message
from textual.widget import Widget

from gridseek.board.session import BoardSession
from gridseek.render.board_view import TILE_WIDTH, render_board_lines


def cell_at_offset(x: int | None, y: int | None, *, size: int) -> int | None:
    """Map a content offset inside the board widget to a cell index."""
    if x is None or y is None:
        return None
    if x < 0 or y < 0:
        return None
    column = x // TILE_WIDTH
    if column >= size or y >= size:
        return None
    return y * size + column


class BoardClicked(Message):
    """Message emitted when a click lands on a board tile."""

    def __init__(self, *, index: int, button: int, ctrl: bool = False) -> None:
        super().__init__()
        self.index = index
        self.button = button
        self.ctrl = ctrl


class BoardWidget(Widget):
    """Render a board session and emit click events."""

    def __init__(
        self,
        session: Callable[[], BoardSession],
        *,
        cursor: Callable[[], int | None] | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._session = session
        self._cursor = cursor

    def render(self) -> RenderableType:
        cursor = self._cursor() if self._cursor else None
        return Group(*render_board_lines(self._session(), cursor=cursor))

    def on_click(self, event: Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        x, y = offset
        index = cell_at_offset(x, y, size=self._session().size)
        if index is None:
            return
        self.post_message(BoardClicked(index=index, button=event.button, ctrl=event.ctrl))
