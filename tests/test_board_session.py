import random

import pytest

from gridseek.board.session import BoardSession, TileState
from gridseek.board.tiles import BlockGrid
from gridseek.search.contracts import EventKind, SearchStatus
from gridseek.search.errors import InvalidEndpoints


def _session(rows: list[str]) -> BoardSession:
    return BoardSession(tiles=BlockGrid.from_rows(rows))


def test_pick_alternates_between_start_and_end() -> None:
    session = _session(["...", "...", "..."])
    assert session.pick(0) == TileState.START
    assert session.pick(8) == TileState.END
    assert session.pick(4) == TileState.START
    assert (session.start, session.end) == (4, 8)
    assert session.picking_start is False


def test_pick_outside_grid_raises() -> None:
    session = _session(["...", "...", "..."])
    with pytest.raises(IndexError):
        session.pick(99)
    with pytest.raises(IndexError):
        session.pick(-1)
    assert session.start is None
    assert session.picking_start is True


def test_pick_ignores_blocked_tiles() -> None:
    session = _session([".#", ".."])
    assert session.pick(1) is None
    assert session.start is None
    assert session.picking_start is True


def test_blocking_an_endpoint_undesignates_it() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    session.pick(8)
    assert session.toggle_block(8) is True
    assert session.end is None
    assert session.tile_state(8) == TileState.BLOCKED


def test_find_path_paints_overlay() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    session.pick(8)
    result = session.find_path()

    assert result.status == SearchStatus.SUCCEEDED
    assert session.last_result == result
    assert [session.tile_state(i) for i in (5, 2, 1)] == [TileState.ON_PATH] * 3
    assert session.tile_state(3) == TileState.DISCOVERED
    assert session.tile_state(0) == TileState.START
    assert session.tile_state(8) == TileState.END


def test_begin_search_is_paced_by_the_consumer() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    session.pick(8)
    stream = session.begin_search()
    assert session.overlay == {}

    first = next(stream)
    assert session.overlay == {first.cell: EventKind.DISCOVERED}
    assert session.last_result is None
    stream.close()


def test_begin_search_requires_both_endpoints() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    with pytest.raises(InvalidEndpoints):
        session.begin_search()
    assert session.overlay == {}


def test_no_route_leaves_no_path_paint() -> None:
    session = _session(["...", "###", "..."])
    session.pick(0)
    session.pick(8)
    result = session.find_path()
    assert result.status == SearchStatus.EXHAUSTED
    assert EventKind.ON_PATH not in session.overlay.values()


def test_clear_resets_endpoints_and_overlay() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    session.pick(8)
    session.find_path()
    session.clear()

    assert (session.start, session.end) == (None, None)
    assert session.picking_start is True
    assert session.overlay == {}
    assert session.last_result is None


def test_randomize_and_resize_replace_the_board() -> None:
    session = _session(["...", "...", "..."])
    session.pick(0)
    session.randomize(density=0.5, rng=random.Random(4))
    assert session.start is None

    session.resize(7, density=0.0, rng=random.Random(4))
    assert session.size == 7
    assert session.tiles.blocked == set()
