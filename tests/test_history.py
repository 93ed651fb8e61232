"""Tests for the placement history (undo/redo)."""

import pytest

from chaosgame.model.geometry_primitives import Point
from chaosgame.model.history import HistoryManager, START_LABEL


def _history_with(n, count):
    history = HistoryManager(n)
    for i in range(count):
        assert history.place_anchor(Point(i / 10, -i / 10))
    return history


def test_anchors_get_sequential_labels():
    history = _history_with(4, 4)
    assert [p.label for p in history.anchors] == ["A", "B", "C", "D"]
    assert all(p.bordered for p in history.anchors)


def test_anchor_beyond_n_rejected():
    history = _history_with(3, 3)
    assert not history.place_anchor(Point(0.5, 0.5))
    assert len(history.anchors) == 3


def test_start_point_only_after_all_anchors():
    history = _history_with(3, 2)
    assert not history.place_start(Point(0.0, 0.0))
    history.place_anchor(Point(0.9, 0.9))
    assert history.place_start(Point(0.0, 0.0))
    assert history.start.label == START_LABEL
    assert not history.place_start(Point(0.1, 0.1))


@pytest.mark.parametrize("n", [3, 4, 7])
def test_undo_then_redo_restores_order(n):
    history = _history_with(n, n)
    original = [(p.x, p.y, p.label) for p in history.anchors]

    for _ in range(n):
        assert history.undo()
    assert history.anchors == ()

    for _ in range(n):
        assert history.redo()
    assert [(p.x, p.y, p.label) for p in history.anchors] == original


def test_undo_on_empty_is_noop():
    history = HistoryManager(3)
    assert not history.undo()
    assert history.undone == ()


def test_redo_on_empty_is_noop():
    history = _history_with(3, 2)
    assert not history.redo()
    assert len(history.points) == 2


def test_new_placement_clears_redo():
    history = _history_with(3, 2)
    history.undo()
    assert len(history.undone) == 1
    history.place_anchor(Point(0.3, 0.3))
    assert history.undone == ()
    assert not history.redo()


def test_redo_relabels_by_position():
    history = _history_with(3, 3)
    history.place_start(Point(0.0, 0.0))
    history.undo()  # start
    history.undo()  # C
    history.redo()
    assert history.anchors[-1].label == "C"
    history.redo()
    assert history.start.label == START_LABEL


def test_capacity_invariant():
    history = _history_with(3, 3)
    history.place_start(Point(0.0, 0.0))
    history.undo()
    history.undo()
    assert len(history.points) + len(history.undone) <= 4


def test_invalid_n():
    with pytest.raises(ValueError):
        HistoryManager(0)
