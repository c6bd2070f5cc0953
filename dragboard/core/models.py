"""
FILE: dragboard/core/models.py
PURPOSE: Immutable domain models for boards, columns, tasks and store snapshots
EXPORTS:
  - Identifier (type alias)
  - Task (frozen dataclass)
  - Column (frozen dataclass)
  - Board (frozen dataclass)
  - Snapshot (frozen dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - types (stdlib)
  - json (stdlib)
  - typing (stdlib)
NOTES:
  - All models have from_dict() for seed data conversion
  - All models have to_dict() / to_json() for serialization
  - Sequences are tuples and Task.extra is a read-only mapping, so a
    snapshot can never change underfoot
  - Seed ids must be int or str; anything else raises ValueError
  - Position is encoded only by tuple order (no rank field)
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union
import json

Identifier = Union[int, str]


def _identifier(value: Any) -> Identifier:
    """Check a seed id. Raises ValueError unless it is an int or a str."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"id must be an integer or a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Task:
    """A single work item. Unknown seed fields are kept in `extra`."""

    id: Identifier
    title: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Convert a seed mapping to a Task object."""
        extra = {k: v for k, v in data.items() if k not in ("id", "title")}
        return cls(id=_identifier(data["id"]), title=str(data.get("title", "")), extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, **self.extra}

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Column:
    """A named, ordered group of tasks."""

    id: Identifier
    title: str = ""
    tasks: Tuple[Task, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tasks", tuple(self.tasks))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Column":
        """Convert a seed mapping to a Column object."""
        return cls(
            id=_identifier(data["id"]),
            title=str(data.get("title", "")),
            tasks=tuple(Task.from_dict(t) for t in data.get("tasks") or ()),
        )

    def index_of(self, task_id: Identifier) -> int:
        """Position of the task in this column, or -1 when absent."""
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        return -1

    def find_task(self, task_id: Identifier) -> Optional[Task]:
        index = self.index_of(task_id)
        return self.tasks[index] if index >= 0 else None

    def with_tasks(self, tasks) -> "Column":
        return replace(self, tasks=tuple(tasks))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "tasks": [task.to_dict() for task in self.tasks],
        }

    def to_json(self) -> str:
        """Serialize column to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Board:
    """A titled board owning an ordered sequence of columns."""

    id: Identifier
    title: str = ""
    columns: Tuple[Column, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Board":
        """
        Convert a seed mapping to a Board object.

        Accepts "name" as an alias for "title".
        """
        return cls(
            id=data.get("id", data.get("name", "")),
            title=str(data.get("title", data.get("name", ""))),
            columns=tuple(Column.from_dict(c) for c in data.get("columns") or ()),
        )

    def find_column(self, column_id: Identifier) -> Optional[Column]:
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def column_of_task(self, task_id: Identifier) -> Optional[Column]:
        """Return the column currently owning the task, if any."""
        for column in self.columns:
            if column.index_of(task_id) >= 0:
                return column
        return None

    def task_ids(self) -> Iterator[Identifier]:
        for column in self.columns:
            for task in column.tasks:
                yield task.id

    def with_columns(self, columns) -> "Board":
        return replace(self, columns=tuple(columns))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "columns": [column.to_dict() for column in self.columns],
        }

    def to_json(self) -> str:
        """Serialize board to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Snapshot:
    """Everything the store publishes: all boards plus the selected index."""

    boards: Tuple[Board, ...] = ()
    selected_board_index: int = 0

    def __post_init__(self):
        object.__setattr__(self, "boards", tuple(self.boards))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Snapshot":
        return cls(
            boards=tuple(Board.from_dict(b) for b in data.get("boards") or ()),
            selected_board_index=int(data.get("selectedBoardIndex", 0)),
        )

    @property
    def board(self) -> Optional[Board]:
        """The selected board, or None when the index is out of range."""
        if 0 <= self.selected_board_index < len(self.boards):
            return self.boards[self.selected_board_index]
        return None

    def with_board(self, board: Board) -> "Snapshot":
        """Return a snapshot with the selected board swapped for `board`."""
        index = self.selected_board_index
        boards = self.boards[:index] + (board,) + self.boards[index + 1:]
        return replace(self, boards=boards)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "boards": [board.to_dict() for board in self.boards],
            "selectedBoardIndex": self.selected_board_index,
        }

    def to_json(self) -> str:
        """Serialize snapshot to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
