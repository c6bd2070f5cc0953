"""
FILE: dragboard/core/store.py
PURPOSE: In-memory board store with a single, immutable mutation path
EXPORTS:
  - BoardStore (class)
DEPENDENCIES:
  - logging (stdlib)
  - dragboard.core.models (Snapshot, Board, Column, Task)
  - dragboard.core.ids (IdAllocator)
  - dragboard.core.engine (insert_task, remove_task, remove_column)
NOTES:
  - update() is the only writer; every other mutator is built on it
  - Snapshots are never modified in place, so a reader holding one is safe
  - Invalid board selection turns every mutator into a no-op
  - Subscribers are called with each newly published snapshot
"""

import logging
from typing import Callable, List, Optional, Tuple

from . import engine
from .ids import IdAllocator
from .models import Column, Identifier, Snapshot, Task

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class BoardStore:
    """
    Holds the list of boards and the selected board index.

    Example:
        >>> store = BoardStore(Snapshot(boards=(Board(id=1, title="Work"),)))
        >>> store.add_column("Todo")
        >>> [c.title for c in store.get_columns()]
        ['Todo']
    """

    def __init__(self, snapshot: Optional[Snapshot] = None, allocator: Optional[IdAllocator] = None):
        self._snapshot = snapshot if snapshot is not None else Snapshot()
        self._allocator = allocator or IdAllocator()
        self._listeners: List[Listener] = []

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    # -------------------- mutation entry point --------------------

    def update(self, transform: Callable[[Snapshot], Snapshot]) -> bool:
        """
        Apply `transform` to the current snapshot and publish the result.

        Returns:
            True if a new snapshot was published, False if `transform`
            handed back the current snapshot unchanged
        """
        previous = self._snapshot
        current = transform(previous)
        if current is previous:
            return False

        self._snapshot = current
        logger.debug("Published snapshot (board %d)", current.selected_board_index)
        for listener in list(self._listeners):
            listener(current)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------- selected board --------------------

    def get_columns(self) -> Tuple[Column, ...]:
        """Columns of the selected board, or () when no board is selected."""
        board = self._snapshot.board
        return board.columns if board is not None else ()

    def replace_columns(self, new_columns) -> bool:
        """Swap the selected board's columns for `new_columns`."""

        def transform(snapshot: Snapshot) -> Snapshot:
            board = snapshot.board
            if board is None:
                logger.debug("replace_columns ignored: no board at index %d", snapshot.selected_board_index)
                return snapshot
            if new_columns is board.columns:
                return snapshot
            return snapshot.with_board(board.with_columns(new_columns))

        return self.update(transform)

    def _update_columns(self, change: Callable[[Tuple[Column, ...]], Tuple[Column, ...]]) -> bool:
        columns = self.get_columns()
        if self._snapshot.board is None:
            return False
        changed = change(columns)
        if changed is columns:
            return False
        return self.replace_columns(changed)

    def add_column(self, title: str) -> bool:
        """Append an empty column with a freshly allocated id."""
        board = self._snapshot.board
        if board is None:
            logger.debug("add_column ignored: no board selected")
            return False
        column = Column(id=self._allocator.allocate(c.id for c in board.columns), title=title)
        return self.replace_columns(board.columns + (column,))

    def add_task(self, column_id: Identifier, title: str) -> bool:
        """Append a new task to a column of the selected board."""
        board = self._snapshot.board
        if board is None:
            return False
        task = Task(id=self._allocator.allocate(board.task_ids()), title=title)
        return self._update_columns(lambda columns: engine.insert_task(columns, column_id, task))

    def remove_task(self, task_id: Identifier) -> bool:
        return self._update_columns(lambda columns: engine.remove_task(columns, task_id))

    def remove_column(self, column_id: Identifier) -> bool:
        return self._update_columns(lambda columns: engine.remove_column(columns, column_id))

    def select_board(self, index: int) -> bool:
        """Change the selected board index. Out-of-range indices are accepted."""

        def transform(snapshot: Snapshot) -> Snapshot:
            if snapshot.selected_board_index == index:
                return snapshot
            return Snapshot(boards=snapshot.boards, selected_board_index=index)

        return self.update(transform)
