"""
Tests for the reorder engine.

Covers:
- provisional_move: cross-column append, hover idempotence, no-op rules
- final_reorder: within-column array move, no-op rules
- array_move
- insert_task / remove_task / remove_column
"""

from dragboard.core import engine
from dragboard.core.models import Task
from dragboard.core.session import DragSession, SessionKind

from conftest import make_column, task_ids


def session(active_id, active_column_id, over_id, over_column_id, kind=SessionKind.VALID):
    return DragSession(
        kind=kind,
        active_id=active_id,
        active_column_id=active_column_id,
        over_id=over_id,
        over_column_id=over_column_id,
    )


# --- array_move ---

def test_array_move_forward_shifts_items_back():
    assert engine.array_move(["a", "b", "c"], 0, 2) == ("b", "c", "a")


def test_array_move_backward_shifts_items_forward():
    assert engine.array_move(["a", "b", "c", "d"], 3, 1) == ("a", "d", "b", "c")


def test_array_move_same_index_keeps_order():
    assert engine.array_move(("a", "b"), 1, 1) == ("a", "b")


# --- provisional_move ---

def test_provisional_move_appends_to_target_column(columns):
    """Task a dragged over column 2 leaves column 1 and lands last in column 2."""
    result = engine.provisional_move(columns, session("a", 1, 2, 2))

    assert task_ids(result) == {1: ["b"], 2: ["c", "a"]}


def test_provisional_move_over_task_still_appends(columns):
    """Hovering a task in another column does not infer an index."""
    three = columns + (make_column(3, "d", "e", "f"),)

    result = engine.provisional_move(three, session("a", 1, "d", 3))

    assert task_ids(result)[3] == ["d", "e", "f", "a"]


def test_provisional_move_does_not_mutate_input(columns):
    before = task_ids(columns)

    engine.provisional_move(columns, session("a", 1, 2, 2))

    assert task_ids(columns) == before


def test_provisional_move_reuses_untouched_columns(columns):
    three = columns + (make_column(3, "d"),)

    result = engine.provisional_move(three, session("a", 1, 2, 2))

    assert result[2] is three[2]


def test_provisional_move_keeps_task_object(columns):
    moved = columns[0].tasks[0]

    result = engine.provisional_move(columns, session("a", 1, 2, 2))

    assert result[1].tasks[-1] is moved


def test_provisional_move_same_column_is_noop(columns):
    assert engine.provisional_move(columns, session("a", 1, "b", 1)) is columns


def test_provisional_move_without_over_column_is_noop(columns):
    assert engine.provisional_move(columns, session("a", 1, "zzz", None)) is columns


def test_provisional_move_repeated_hover_is_idempotent(columns):
    """Second identical event finds the task gone from its old column."""
    stale = session("a", 1, 2, 2)
    once = engine.provisional_move(columns, stale)

    twice = engine.provisional_move(once, stale)

    assert twice is once


def test_provisional_move_after_landing_is_noop(columns):
    """Once the task sits in column 2 the host reports column 2 as active."""
    once = engine.provisional_move(columns, session("a", 1, 2, 2))

    again = engine.provisional_move(once, session("a", 2, 2, 2))

    assert again is once


def test_provisional_move_unknown_column_is_noop(columns):
    assert engine.provisional_move(columns, session("a", 1, 99, 99)) is columns
    assert engine.provisional_move(columns, session("a", 99, 2, 2)) is columns


def test_provisional_move_ignores_non_valid_sessions(columns):
    assert engine.provisional_move(columns, DragSession(kind=SessionKind.NONE)) is columns
    assert engine.provisional_move(columns, session("a", 1, "a", 2, kind=SessionKind.SELF)) is columns


def test_provisional_move_into_empty_column(columns):
    with_empty = columns + (make_column(3),)

    result = engine.provisional_move(with_empty, session("c", 2, 3, 3))

    assert task_ids(result) == {1: ["a", "b"], 2: [], 3: ["c"]}


# --- final_reorder ---

def test_final_reorder_moves_first_onto_last():
    columns = (make_column(1, "a", "b", "c"),)

    result = engine.final_reorder(columns, session("a", 1, "c", 1))

    assert task_ids(result) == {1: ["b", "c", "a"]}


def test_final_reorder_moves_last_onto_first():
    columns = (make_column(1, "a", "b", "c"),)

    result = engine.final_reorder(columns, session("c", 1, "a", 1))

    assert task_ids(result) == {1: ["c", "a", "b"]}


def test_final_reorder_across_columns_is_noop(columns):
    assert engine.final_reorder(columns, session("a", 1, "c", 2)) is columns


def test_final_reorder_self_is_noop(columns):
    self_session = session("a", 1, "a", 1, kind=SessionKind.SELF)

    assert engine.final_reorder(columns, self_session) is columns


def test_final_reorder_missing_task_is_noop(columns):
    assert engine.final_reorder(columns, session("a", 1, "ghost", 1)) is columns
    assert engine.final_reorder(columns, session("ghost", 1, "a", 1)) is columns


def test_final_reorder_over_column_itself_is_noop(columns):
    """Dropping on the column (not a task) has no over index."""
    assert engine.final_reorder(columns, session("a", 1, 1, 1)) is columns


def test_final_reorder_leaves_other_columns_alone(columns):
    result = engine.final_reorder(columns, session("b", 1, "a", 1))

    assert task_ids(result) == {1: ["b", "a"], 2: ["c"]}
    assert result[1] is columns[1]


# --- insert / remove ---

def test_insert_task_appends(columns):
    result = engine.insert_task(columns, 2, Task(id="n", title="New"))

    assert task_ids(result)[2] == ["c", "n"]


def test_insert_task_rejects_duplicate_id(columns):
    assert engine.insert_task(columns, 2, Task(id="a")) is columns


def test_insert_task_unknown_column_is_noop(columns):
    assert engine.insert_task(columns, 42, Task(id="n")) is columns


def test_remove_task(columns):
    result = engine.remove_task(columns, "b")

    assert task_ids(result) == {1: ["a"], 2: ["c"]}


def test_remove_unknown_task_is_noop(columns):
    assert engine.remove_task(columns, "ghost") is columns


def test_remove_column_drops_its_tasks(columns):
    result = engine.remove_column(columns, 1)

    assert task_ids(result) == {2: ["c"]}


def test_remove_unknown_column_is_noop(columns):
    assert engine.remove_column(columns, 42) is columns
