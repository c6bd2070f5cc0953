"""
FILE: dragboard/core/dispatcher.py
PURPOSE: Route drag events and the "add column" action into the board store
EXPORTS:
  - CommandDispatcher (class)
DEPENDENCIES:
  - logging (stdlib)
  - dragboard.core.session (DragSession)
  - dragboard.core.engine (provisional_move, final_reorder)
  - dragboard.core.store (BoardStore)
  - dragboard.core.config (Settings)
  - dragboard.core.exceptions (InvalidEventError)
NOTES:
  - Store is written only when the engine returns a different columns tuple
  - Cancelled drags keep their provisional moves unless revert_on_cancel is set
  - A drag end with no drop target is handled as a cancel
  - dispatch() is for scripted events (CLI replay); hosts may call the
    on_* slots directly
"""

import logging
from typing import Any, Mapping, Optional, Tuple

from . import engine
from .config import Settings
from .constants import (
    EVENT_ADD_COLUMN,
    EVENT_CANCEL,
    EVENT_END,
    EVENT_OVER,
    EVENT_START,
    EVENT_TYPES,
)
from .exceptions import InvalidEventError
from .models import Column
from .session import DragSession, SessionKind
from .store import BoardStore

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Glue between a host input adapter and the board store."""

    def __init__(self, store: BoardStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or Settings()
        self._pre_drag_columns: Optional[Tuple[Column, ...]] = None

    def _apply(self, event, step) -> bool:
        session = DragSession.from_event(event)
        if not session.is_actionable:
            return False

        columns = self.store.get_columns()
        new_columns = step(columns, session)
        if new_columns is columns:
            return False
        return self.store.replace_columns(new_columns)

    def on_drag_start(self, event: Optional[Mapping[str, Any]] = None) -> None:
        """Remember the columns as they were before the gesture."""
        self._pre_drag_columns = self.store.get_columns()

    def on_drag_over(self, event: Optional[Mapping[str, Any]]) -> bool:
        """Handle a "drag is over a target" event. Returns True if the store changed."""
        return self._apply(event, engine.provisional_move)

    def on_drag_end(self, event: Optional[Mapping[str, Any]]) -> bool:
        """Handle the end of a drag gesture. Returns True if the store changed."""
        if DragSession.from_event(event).kind is SessionKind.NONE:
            # Released outside any drop target: same as an abandoned drag.
            return self.on_drag_cancel(event)
        changed = self._apply(event, engine.final_reorder)
        self._pre_drag_columns = None
        return changed

    def on_drag_cancel(self, event: Optional[Mapping[str, Any]] = None) -> bool:
        """
        Handle an abandoned drag.

        Provisional moves stay in place by default. With
        `settings.revert_on_cancel` the columns captured by on_drag_start
        are restored.
        """
        pre_drag, self._pre_drag_columns = self._pre_drag_columns, None
        if not self.settings.revert_on_cancel or pre_drag is None:
            logger.debug("Drag cancelled; provisional state kept")
            return False
        logger.debug("Drag cancelled; restoring pre-drag columns")
        return self.store.replace_columns(pre_drag)

    def on_add_column(self) -> bool:
        title = f"{self.settings.new_column_prefix} {len(self.store.get_columns())}"
        return self.store.add_column(title)

    def dispatch(self, event: Mapping[str, Any]) -> bool:
        """
        Route a scripted event by its "type" field.

        Raises:
            InvalidEventError: If the event is not a mapping or its type is unknown
        """
        if not isinstance(event, Mapping):
            raise InvalidEventError(f"Event must be an object, got {type(event).__name__}", event)

        kind = event.get("type")
        if kind not in EVENT_TYPES:
            raise InvalidEventError(
                f"Unknown event type {kind!r}. Must be one of: {', '.join(EVENT_TYPES)}",
                event,
            )

        if kind == EVENT_START:
            self.on_drag_start(event)
            return False
        if kind == EVENT_OVER:
            return self.on_drag_over(event)
        if kind == EVENT_END:
            return self.on_drag_end(event)
        if kind == EVENT_CANCEL:
            return self.on_drag_cancel(event)
        return self.on_add_column()
