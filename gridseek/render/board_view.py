"""Rich rendering of a board session."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridseek.board.session import BoardSession, TileState
from gridseek.search.contracts import SearchStatus

TILE_WIDTH = 2

TILE_STYLES = {
    TileState.FREE: "on grey93",
    TileState.BLOCKED: "on grey11",
    TileState.START: "bold black on yellow",
    TileState.END: "bold black on yellow",
    TileState.DISCOVERED: "on light_sky_blue1",
    TileState.ON_PATH: "on plum2",
}

TILE_LABELS = {
    TileState.START: "S",
    TileState.END: "E",
}

CURSOR_STYLE = "reverse"


def render_board_lines(
    session: BoardSession, *, cursor: int | None = None
) -> list[Text]:
    size = session.size
    lines: list[Text] = []
    for y in range(size):
        line = Text()
        for x in range(size):
            index = y * size + x
            state = session.tile_state(index)
            label = TILE_LABELS.get(state, "").ljust(TILE_WIDTH)
            style = TILE_STYLES[state]
            if index == cursor:
                style = f"{style} {CURSOR_STYLE}"
            line.append(label, style=style)
        lines.append(line)
    return lines


def render_summary(session: BoardSession) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Grid", f"{session.size}x{session.size}")
    table.add_row("Blocked", str(len(session.tiles.blocked)))
    table.add_row("Start", _format_cell(session, session.start))
    table.add_row("End", _format_cell(session, session.end))
    table.add_row("Next pick", "start" if session.picking_start else "end")

    result = session.last_result
    if result is None:
        table.add_row("Status", "-")
        return table
    table.add_row("Status", result.status.value)
    if result.status == SearchStatus.SUCCEEDED:
        table.add_row("Cost", str(result.cost))
    else:
        table.add_row("Route", "No route found.")
    table.add_row("Expanded", str(result.expanded))
    table.add_row("Discovered", str(result.discovered))
    return table


def render_board(session: BoardSession) -> RenderableType:
    board = Group(*render_board_lines(session))
    return Group(
        Panel(board, title="Grid", expand=False),
        Panel(render_summary(session), title="Search", expand=False),
    )


def _format_cell(session: BoardSession, index: int | None) -> str:
    if index is None:
        return "-"
    return f"{index % session.size}, {index // session.size}"
