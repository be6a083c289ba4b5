"""Textual app hosting the interactive board."""

from __future__ import annotations

import random

from textual.app import App

from gridseek.board.session import BoardSession
from gridseek.config import FinderConfig
from gridseek.render.board_screen import BoardScreen


class GridSeekApp(App):
    """Generate a board from config and run the board screen on it."""

    TITLE = "Grid Seek"
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, config: FinderConfig, *, rng: random.Random | None = None) -> None:
        super().__init__()
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.session = BoardSession.generate(
            config.size, density=config.obstacle_density, rng=self.rng
        )

    def on_mount(self) -> None:
        self.push_screen(
            BoardScreen(session=self.session, config=self.config, rng=self.rng)
        )
