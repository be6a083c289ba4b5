import pytest

from gridseek.search.errors import EmptyFrontier
from gridseek.search.frontier import Frontier, SearchNode
from gridseek.search.grid_index import Cell


def _node(index: int, g: int, h: int, parent: int | None = None) -> SearchNode:
    return SearchNode(cell=Cell(index, 4), g_cost=g, h_cost=h, parent=parent)


def test_select_best_prefers_lowest_f_cost() -> None:
    frontier = Frontier()
    frontier.discover(_node(1, 2, 3))
    frontier.discover(_node(2, 1, 2))
    frontier.discover(_node(3, 4, 0))
    assert frontier.select_best().index == 2


def test_select_best_tie_breaks_on_insertion_order() -> None:
    for _ in range(5):
        frontier = Frontier()
        frontier.discover(_node(9, 1, 3))
        frontier.discover(_node(4, 2, 2))
        frontier.discover(_node(6, 3, 1))
        assert frontier.select_best().index == 9


def test_select_best_does_not_remove() -> None:
    frontier = Frontier()
    frontier.discover(_node(1, 0, 1))
    frontier.select_best()
    assert len(frontier) == 1


def test_select_best_on_empty_open_set_is_an_error() -> None:
    with pytest.raises(EmptyFrontier):
        Frontier().select_best()


def test_discover_improves_existing_entry_in_place() -> None:
    frontier = Frontier()
    existing = _node(5, 6, 2, parent=1)
    assert frontier.discover(_node(3, 1, 7))
    assert frontier.discover(existing)

    assert not frontier.discover(_node(5, 3, 2, parent=4))
    assert frontier.open[5] is existing
    assert (existing.g_cost, existing.parent) == (3, 4)
    assert list(frontier.open) == [3, 5]


def test_discover_keeps_cheaper_existing_entry() -> None:
    frontier = Frontier()
    existing = _node(5, 2, 2, parent=1)
    frontier.discover(existing)
    frontier.discover(_node(5, 4, 2, parent=9))
    assert (existing.g_cost, existing.parent) == (2, 1)


def test_closed_cells_are_never_reopened() -> None:
    frontier = Frontier()
    node = _node(2, 3, 1)
    frontier.discover(node)
    frontier.close(node)

    assert not frontier.discover(_node(2, 1, 1))
    assert not frontier.is_open(2)
    assert frontier.is_closed(2)
    assert not frontier


def test_f_cost_requires_scores() -> None:
    with pytest.raises(ValueError):
        SearchNode(cell=Cell(0, 2)).f_cost
