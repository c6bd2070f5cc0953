"""
Randomized checks of the board invariants.

Drives the dispatcher with seeded random drag events (valid, stale,
duplicated and self-targeted) and checks after every event that:
- the multiset of task ids never changes
- every task id is owned by exactly one column
- column ids stay unique
"""

import random
from collections import Counter

import pytest

from dragboard.core import engine
from dragboard.core.config import Settings
from dragboard.core.dispatcher import CommandDispatcher
from dragboard.core.events import build_drag_event
from dragboard.core.models import Board, Snapshot
from dragboard.core.session import DragSession
from dragboard.core.store import BoardStore

from conftest import make_column


def all_task_ids(columns):
    return [task.id for column in columns for task in column.tasks]


def random_board(rng):
    ids = iter(f"t{n}" for n in range(100))
    columns = []
    for column_id in range(1, rng.randint(2, 5) + 1):
        columns.append(make_column(column_id, *[next(ids) for _ in range(rng.randint(0, 5))]))
    return Board(id="b", title="Random", columns=tuple(columns))


def random_event(rng, board, stale_events):
    task_ids = list(board.task_ids())
    targets = task_ids + [column.id for column in board.columns] + [None, "ghost"]
    roll = rng.random()
    if stale_events and roll < 0.2:
        return rng.choice(stale_events)
    if not task_ids:
        return {"active": None, "over": None}
    return build_drag_event(board, rng.choice(task_ids), rng.choice(targets))


@pytest.mark.parametrize("seed", range(25))
def test_random_drag_sequences_preserve_invariants(seed):
    rng = random.Random(seed)
    board = random_board(rng)
    store = BoardStore(Snapshot(boards=(board,)))
    dispatcher = CommandDispatcher(store, Settings(revert_on_cancel=bool(seed % 2)))
    expected = Counter(all_task_ids(board.columns))
    seen_events = []

    for _ in range(60):
        event = random_event(rng, store.snapshot.board, seen_events)
        seen_events.append(event)
        action = rng.choice(["over", "over", "end", "start", "cancel"])
        if action == "over":
            dispatcher.on_drag_over(event)
        elif action == "end":
            dispatcher.on_drag_end(event)
        elif action == "start":
            dispatcher.on_drag_start(event)
        else:
            dispatcher.on_drag_cancel(event)

        columns = store.get_columns()
        ids = all_task_ids(columns)
        assert Counter(ids) == expected
        assert len(ids) == len(set(ids))
        column_ids = [column.id for column in columns]
        assert len(column_ids) == len(set(column_ids))


@pytest.mark.parametrize("seed", range(10))
def test_provisional_move_twice_equals_once(seed):
    rng = random.Random(seed)
    board = random_board(rng)
    task_ids = list(board.task_ids())
    if not task_ids:
        pytest.skip("empty board")
    target = rng.choice(board.columns).id
    session = DragSession.from_event(build_drag_event(board, rng.choice(task_ids), target))

    once = engine.provisional_move(board.columns, session)

    assert engine.provisional_move(once, session) == once


@pytest.mark.parametrize("seed", range(10))
def test_self_drag_never_changes_columns(seed):
    rng = random.Random(seed)
    board = random_board(rng)
    for task_id in board.task_ids():
        session = DragSession.from_event(build_drag_event(board, task_id, task_id))
        assert engine.provisional_move(board.columns, session) is board.columns
        assert engine.final_reorder(board.columns, session) is board.columns
