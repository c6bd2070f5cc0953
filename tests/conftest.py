"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dragboard.core.models import Board, Column, Snapshot, Task


def make_column(column_id, *task_ids, title=None):
    """Build a column whose tasks are titled after their ids."""
    return Column(
        id=column_id,
        title=title or f"Column {column_id}",
        tasks=tuple(Task(id=t, title=f"Task {t}") for t in task_ids),
    )


def task_ids(columns):
    """Task ids per column, e.g. {1: ["a", "b"], 2: ["c"]}."""
    return {column.id: [task.id for task in column.tasks] for column in columns}


@pytest.fixture
def columns():
    """Two columns: 1 -> a, b and 2 -> c."""
    return (make_column(1, "a", "b"), make_column(2, "c"))


@pytest.fixture
def snapshot(columns):
    """Two boards; the first holds the `columns` fixture and is selected."""
    return Snapshot(
        boards=(
            Board(id="work", title="Work", columns=columns),
            Board(id="home", title="Home", columns=(make_column(10, "x"),)),
        ),
        selected_board_index=0,
    )


@pytest.fixture
def board_file(tmp_path, snapshot):
    """Seed file holding the `snapshot` fixture."""
    path = tmp_path / "board.json"
    path.write_text(snapshot.to_json(), encoding="utf-8")
    return path
