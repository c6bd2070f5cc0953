"""
FILE: dragboard/core/session.py
PURPOSE: Normalize raw drag events into a DragSession
EXPORTS:
  - SessionKind (enum: NONE, SELF, VALID)
  - DragSession (frozen dataclass)
DEPENDENCIES:
  - dataclasses, enum, logging, typing (stdlib)
  - dragboard.core.models (Identifier)
NOTES:
  - Accepts the short event form {"active": {"id", "columnId"}, "over": ...}
    and the drag-library form with the column id under data.current.columnId
  - Never raises: a missing target is a steady state, not a failure
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from .models import Identifier

logger = logging.getLogger(__name__)


class SessionKind(Enum):
    """Outcome of normalizing a drag event."""

    NONE = "none"      # no drop target under the pointer
    SELF = "self"      # active item hovering over itself
    VALID = "valid"


def _column_id_of(node: Mapping[str, Any]) -> Optional[Identifier]:
    if "columnId" in node:
        return node["columnId"]
    data = node.get("data")
    if not isinstance(data, Mapping):
        return None
    current = data.get("current")
    if not isinstance(current, Mapping):
        return None
    return current.get("columnId")


@dataclass(frozen=True)
class DragSession:
    """
    Normalized description of one drag event.

    Attributes:
        kind: NONE, SELF or VALID
        active_id: Id of the dragged task
        active_column_id: Column the dragged task currently belongs to
        over_id: Id of the task or column under the pointer
        over_column_id: Column of the item under the pointer
    """

    kind: SessionKind
    active_id: Optional[Identifier] = None
    active_column_id: Optional[Identifier] = None
    over_id: Optional[Identifier] = None
    over_column_id: Optional[Identifier] = None

    @property
    def is_actionable(self) -> bool:
        return self.kind is SessionKind.VALID

    @classmethod
    def from_event(cls, event: Optional[Mapping[str, Any]]) -> "DragSession":
        """
        Build a session from a raw drag event.

        Returns a NONE session when the event is not a mapping or has no
        `active` or no `over`,
        a SELF session when both refer to the same id, VALID otherwise.
        """
        if not isinstance(event, Mapping):
            logger.debug("Malformed drag event discarded: %r", type(event).__name__)
            return cls(kind=SessionKind.NONE)
        active = event.get("active")
        over = event.get("over")

        if not isinstance(active, Mapping) or not isinstance(over, Mapping):
            logger.debug("Drag event without target discarded")
            return cls(kind=SessionKind.NONE)

        active_id = active.get("id")
        over_id = over.get("id")
        kind = SessionKind.VALID
        if active_id == over_id:
            logger.debug("Drag event over itself discarded (id=%r)", active_id)
            kind = SessionKind.SELF

        return cls(
            kind=kind,
            active_id=active_id,
            active_column_id=_column_id_of(active),
            over_id=over_id,
            over_column_id=_column_id_of(over),
        )
