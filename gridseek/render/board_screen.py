"""Interactive Textual screen for editing the board and animating searches."""

from __future__ import annotations

import logging
import random
from typing import Generator

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Static

from gridseek.board.session import BoardSession
from gridseek.config import MAX_SIZE, MIN_SIZE, FinderConfig
from gridseek.render.board_view import render_summary
from gridseek.render.textual_widgets import BoardClicked, BoardWidget
from gridseek.search.contracts import SearchEvent
from gridseek.search.errors import InvalidEndpoints

logger = logging.getLogger(__name__)

RIGHT_WIDTH = 34
MIN_FRAME_SECONDS = 0.001
MIDDLE_BUTTON = 2
RESIZE_STEP = 5

HELP_TEXT = (
    "click=pick start/end | middle or ctrl+click=wall | f=find path | "
    "r=reset | n=randomize | +/-=resize | q=quit"
)


class BoardScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #board {
        height: 1fr;
        width: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    def __init__(
        self,
        *,
        session: BoardSession,
        config: FinderConfig,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.session = session
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.message = ""
        self._pending: Generator[SearchEvent, None, None] | None = None
        self._timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            with Horizontal(id="main"):
                yield BoardWidget(lambda: self.session, id="board")
                yield Static(id="summary")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self.query_one("#summary", Static).styles.width = RIGHT_WIDTH
        self._refresh_ui()

    def on_unmount(self) -> None:
        self._stop_animation()

    def on_board_clicked(self, event: BoardClicked) -> None:
        self._stop_animation()
        if event.button == MIDDLE_BUTTON or event.ctrl:
            blocked = self.session.toggle_block(event.index)
            self.message = "Wall added." if blocked else "Wall removed."
        else:
            picked = self.session.pick(event.index)
            self.message = f"Picked {picked.value}." if picked else ""
        self._refresh_ui()

    def on_key(self, event: Key) -> None:
        key = event.key
        if key == "f":
            self.find_path()
        elif key == "r":
            self._stop_animation()
            self.session.clear()
            self.message = "Board reset."
        elif key == "n":
            self._stop_animation()
            self.session.randomize(density=self.config.obstacle_density, rng=self.rng)
            self.message = "Board randomized."
        elif key in {"plus", "minus"}:
            self._stop_animation()
            delta = RESIZE_STEP if key == "plus" else -RESIZE_STEP
            size = max(MIN_SIZE, min(MAX_SIZE, self.session.size + delta))
            self.session.resize(size, density=self.config.obstacle_density, rng=self.rng)
            self.message = f"Resized to {size}x{size}."
        else:
            return
        event.stop()
        self._refresh_ui()

    def find_path(self) -> None:
        self._stop_animation()
        try:
            self._pending = self.session.begin_search()
        except InvalidEndpoints as exc:
            self.message = str(exc)
            logger.info("Search refused: %s", exc)
            return
        self.message = "Searching..."
        interval = max(self.config.step_delay, MIN_FRAME_SECONDS)
        self._timer = self.set_interval(interval, self._advance)

    def _advance(self) -> None:
        if self._pending is None:
            return
        if next(self._pending, None) is None:
            self._stop_animation()
            result = self.session.last_result
            if result is not None:
                self.message = (
                    f"Path cost {result.cost}." if result.found else "No route found."
                )
        self._refresh_ui()

    def _stop_animation(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        if self._pending is not None:
            self._pending.close()
            self._pending = None

    def _refresh_ui(self) -> None:
        self.query_one("#board", BoardWidget).refresh()
        self.query_one("#summary", Static).update(
            Panel(render_summary(self.session), title="Search")
        )
        status = Group(Text(HELP_TEXT, style="bold"), Text(self.message))
        self.query_one("#status-bar", Static).update(status)
