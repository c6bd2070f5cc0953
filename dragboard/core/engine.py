"""
FILE: dragboard/core/engine.py
PURPOSE: Pure reordering rules for columns and tasks
EXPORTS:
  - array_move(items, from_index, to_index) -> tuple
  - provisional_move(columns, session) -> tuple[Column, ...]
  - final_reorder(columns, session) -> tuple[Column, ...]
  - insert_task(columns, column_id, task) -> tuple[Column, ...]
  - remove_task(columns, task_id) -> tuple[Column, ...]
  - remove_column(columns, column_id) -> tuple[Column, ...]
DEPENDENCIES:
  - logging (stdlib)
  - dragboard.core.models (Column, Task)
  - dragboard.core.session (DragSession)
NOTES:
  - Inputs are never mutated; untouched columns are reused as-is
  - Every no-op returns the very same tuple object, so callers can skip
    redundant store writes with an identity check
  - A task is moved, never copied: each task id stays in exactly one column
"""

import logging
from typing import Sequence, Tuple

from .models import Column, Identifier, Task
from .session import DragSession

logger = logging.getLogger(__name__)

Columns = Tuple[Column, ...]


def array_move(items: Sequence, from_index: int, to_index: int) -> tuple:
    """
    Move one element to a new index, shifting the elements in between.

    Examples:
        >>> array_move("abc", 0, 2)
        ('b', 'c', 'a')
        >>> array_move("abc", 2, 0)
        ('c', 'a', 'b')
    """
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return tuple(moved)


def _index_of_column(columns: Columns, column_id: Identifier) -> int:
    for index, column in enumerate(columns):
        if column.id == column_id:
            return index
    return -1


def provisional_move(columns: Columns, session: DragSession) -> Columns:
    """
    Transfer the active task to the end of the column under the pointer.

    Called on every "drag over" event. Once the task has landed in the
    hovered column the session reports that column as the active one, so
    repeated events while hovering the same column change nothing.

    Args:
        columns: Current columns of the selected board
        session: Normalized drag session

    Returns:
        New columns tuple, or `columns` itself when nothing moves
    """
    if not session.is_actionable:
        return columns
    if session.over_column_id is None or session.over_column_id == session.active_column_id:
        return columns

    source_index = _index_of_column(columns, session.active_column_id)
    target_index = _index_of_column(columns, session.over_column_id)
    if source_index < 0 or target_index < 0:
        logger.debug(
            "Provisional move skipped: column %r or %r not on board",
            session.active_column_id,
            session.over_column_id,
        )
        return columns

    source = columns[source_index]
    task_index = source.index_of(session.active_id)
    if task_index < 0:
        # Stale or duplicated event: the task already left this column.
        logger.debug(
            "Provisional move skipped: task %r not in column %r",
            session.active_id,
            source.id,
        )
        return columns

    task = source.tasks[task_index]
    target = columns[target_index]

    moved = list(columns)
    moved[source_index] = source.with_tasks(source.tasks[:task_index] + source.tasks[task_index + 1:])
    moved[target_index] = target.with_tasks(target.tasks + (task,))
    logger.debug("Task %r moved from column %r to column %r", task.id, source.id, target.id)
    return tuple(moved)


def final_reorder(columns: Columns, session: DragSession) -> Columns:
    """
    Place the active task at the index of the task it was dropped on.

    Only acts when both tasks share a column; cross-column placement has
    already been settled by provisional_move.
    """
    if not session.is_actionable:
        return columns
    if session.active_column_id != session.over_column_id:
        return columns

    column_index = _index_of_column(columns, session.active_column_id)
    if column_index < 0:
        return columns

    column = columns[column_index]
    from_index = column.index_of(session.active_id)
    to_index = column.index_of(session.over_id)
    if from_index < 0 or to_index < 0:
        logger.debug(
            "Final reorder skipped: %r or %r not in column %r",
            session.active_id,
            session.over_id,
            column.id,
        )
        return columns

    reordered = list(columns)
    reordered[column_index] = column.with_tasks(array_move(column.tasks, from_index, to_index))
    logger.debug("Task %r reordered in column %r: %d -> %d", session.active_id, column.id, from_index, to_index)
    return tuple(reordered)


def insert_task(columns: Columns, column_id: Identifier, task: Task) -> Columns:
    """Append `task` to a column; no-op if the column is missing or the id is taken."""
    index = _index_of_column(columns, column_id)
    if index < 0:
        return columns
    if any(column.index_of(task.id) >= 0 for column in columns):
        logger.debug("Task %r already on board, not inserted", task.id)
        return columns

    inserted = list(columns)
    inserted[index] = columns[index].with_tasks(columns[index].tasks + (task,))
    return tuple(inserted)


def remove_task(columns: Columns, task_id: Identifier) -> Columns:
    """Drop a task from whichever column owns it; no-op for unknown ids."""
    for index, column in enumerate(columns):
        task_index = column.index_of(task_id)
        if task_index >= 0:
            removed = list(columns)
            removed[index] = column.with_tasks(column.tasks[:task_index] + column.tasks[task_index + 1:])
            return tuple(removed)
    return columns


def remove_column(columns: Columns, column_id: Identifier) -> Columns:
    """Drop a column together with the tasks it owns; no-op for unknown ids."""
    index = _index_of_column(columns, column_id)
    if index < 0:
        return columns
    return columns[:index] + columns[index + 1:]
