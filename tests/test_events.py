"""Tests for building host drag events from a board."""

from dragboard.core.events import build_drag_event
from dragboard.core.models import Board

from conftest import make_column


BOARD = Board(id=1, title="B", columns=(make_column(1, "a", "b"), make_column(2, "c")))


def column_of(node):
    return node["data"]["current"]["columnId"]


def test_task_target_uses_its_column():
    event = build_drag_event(BOARD, "a", "c")

    assert event["active"]["id"] == "a"
    assert column_of(event["active"]) == 1
    assert event["over"]["id"] == "c"
    assert column_of(event["over"]) == 2


def test_column_target_is_its_own_column():
    event = build_drag_event(BOARD, "a", 2)

    assert column_of(event["over"]) == 2


def test_unknown_target_has_no_over():
    assert build_drag_event(BOARD, "a", "ghost")["over"] is None
    assert build_drag_event(BOARD, "a", None)["over"] is None


def test_unknown_active_has_no_column():
    assert column_of(build_drag_event(BOARD, "ghost", "a")["active"]) is None


def test_no_board():
    event = build_drag_event(None, "a", "b")

    assert event["over"] is None
