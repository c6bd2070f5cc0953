"""
FILE: dragboard/core/loader.py
PURPOSE: Read seed board data and event scripts from JSON files
EXPORTS:
  - parse_snapshot(data, selected_board_index) -> Snapshot
  - load_snapshot(path, selected_board_index) -> Snapshot
  - load_events(path) -> List[dict]
DEPENDENCIES:
  - json, pathlib (stdlib)
  - dragboard.core.models (Snapshot, Board)
  - dragboard.core.exceptions (InvalidBoardDataError, InvalidEventError)
NOTES:
  - Files are only read, never written (no persistence)
  - Seed data accepts a bare list of boards or {"boards": [...], "selectedBoardIndex": n}
  - Duplicate column or task ids on a board are rejected here, at the boundary
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import InvalidBoardDataError, InvalidEventError
from .models import Board, Snapshot


def _check_unique_ids(board: Board, source) -> None:
    seen_columns = set()
    seen_tasks = set()
    for column in board.columns:
        if column.id in seen_columns:
            raise InvalidBoardDataError(
                f"Duplicate column id {column.id!r} on board {board.title!r}", source
            )
        seen_columns.add(column.id)
        for task in column.tasks:
            if task.id in seen_tasks:
                raise InvalidBoardDataError(
                    f"Task {task.id!r} appears more than once on board {board.title!r}", source
                )
            seen_tasks.add(task.id)


def parse_snapshot(
    data: Any,
    selected_board_index: Optional[int] = None,
    source=None,
) -> Snapshot:
    """
    Convert decoded JSON into a Snapshot.

    Args:
        data: List of boards or {"boards": [...], "selectedBoardIndex": n}
        selected_board_index: Overrides the index stored in the data
        source: Label (usually the file path) used in error messages

    Raises:
        InvalidBoardDataError: If the structure is wrong or ids repeat
    """
    if isinstance(data, list):
        data = {"boards": data}
    if not isinstance(data, dict):
        raise InvalidBoardDataError("Expected a list of boards or an object with 'boards'", source)

    try:
        snapshot = Snapshot.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise InvalidBoardDataError(f"Malformed board data ({e.__class__.__name__}: {e})", source) from e

    for board in snapshot.boards:
        _check_unique_ids(board, source)

    if selected_board_index is not None:
        snapshot = Snapshot(boards=snapshot.boards, selected_board_index=selected_board_index)
    return snapshot


def load_snapshot(path: Union[str, Path], selected_board_index: Optional[int] = None) -> Snapshot:
    """Read a seed file. Raises InvalidBoardDataError for unreadable or invalid files."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise InvalidBoardDataError(f"Cannot read board file: {e.strerror}", path) from e
    except json.JSONDecodeError as e:
        raise InvalidBoardDataError(f"Invalid JSON: {e}", path) from e

    return parse_snapshot(data, selected_board_index, source=path)


def load_events(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read an event script (a JSON list of event objects)."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            events = json.load(f)
    except OSError as e:
        raise InvalidEventError(f"{path}: Cannot read event file: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise InvalidEventError(f"{path}: Invalid JSON: {e}") from e

    if not isinstance(events, list):
        raise InvalidEventError(f"{path}: Expected a list of events")
    return events
