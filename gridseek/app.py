"""Application entry points for the headless and interactive finders."""

from __future__ import annotations

import logging
import random

from rich.console import Console

from gridseek.board.session import BoardSession
from gridseek.config import FinderConfig
from gridseek.render.board_view import render_board
from gridseek.render.textual_app import GridSeekApp
from gridseek.search.contracts import SearchResult
from gridseek.search.grid_index import Cell

logger = logging.getLogger(__name__)


def build_session(
    config: FinderConfig,
    *,
    rng: random.Random | None = None,
    keep_free: tuple[int, ...] = (),
) -> BoardSession:
    return BoardSession.generate(
        config.size,
        density=config.obstacle_density,
        rng=rng or random.Random(config.seed),
        keep_free=keep_free,
    )


def run_headless(
    config: FinderConfig,
    *,
    start: tuple[int, int] | None = None,
    end: tuple[int, int] | None = None,
    console: Console | None = None,
) -> SearchResult:
    """Run one search on a generated board and print the rendered outcome."""
    last = config.size - 1
    start_cell = Cell.from_xy(*(start or (0, 0)), config.size)
    end_cell = Cell.from_xy(*(end or (last, last)), config.size)
    session = build_session(config, keep_free=(start_cell.index, end_cell.index))
    session.pick(start_cell.index)
    session.pick(end_cell.index)

    result = session.find_path()
    logger.info("Headless search finished with status %s", result.status.value)
    (console or Console()).print(render_board(session))
    return result


def run_interactive(config: FinderConfig) -> None:
    GridSeekApp(config).run()
