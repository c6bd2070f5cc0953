"""
FILE: dragboard/core/events.py
PURPOSE: Build drag events the way a pointer-driven host would deliver them
EXPORTS:
  - build_drag_event(board, active_id, target_id) -> dict
DEPENDENCIES:
  - dragboard.core.models (Board, Identifier)
NOTES:
  - Used by the terminal hosts (REPL, CLI) in place of a pointer sensor
  - Output uses the drag-library shape: {"id", "data": {"current": {"columnId"}}}
  - A target may be a task (its column is looked up) or a column itself
  - Unknown targets produce "over": None, i.e. pointer outside any drop zone
"""

from typing import Any, Dict, Optional

from .models import Board, Identifier


def _node(item_id: Identifier, column_id: Optional[Identifier]) -> Dict[str, Any]:
    return {"id": item_id, "data": {"current": {"columnId": column_id}}}


def build_drag_event(
    board: Optional[Board],
    active_id: Identifier,
    target_id: Optional[Identifier],
) -> Dict[str, Any]:
    """
    Describe "task `active_id` is over `target_id`" against the current board.

    Tasks take precedence over columns when an id matches both.
    """
    active_column = board.column_of_task(active_id) if board else None
    active = _node(active_id, active_column.id if active_column else None)

    over = None
    if board is not None and target_id is not None:
        target_column = board.column_of_task(target_id)
        if target_column is not None:
            over = _node(target_id, target_column.id)
        elif board.find_column(target_id) is not None:
            over = _node(target_id, target_id)

    return {"active": active, "over": over}
