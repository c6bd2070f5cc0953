"""
Tests for drag event normalization.

Covers the NONE / SELF / VALID tri-state and both event shapes.
"""

from dragboard.core.session import DragSession, SessionKind


def library_node(item_id, column_id):
    return {"id": item_id, "data": {"current": {"columnId": column_id}}}


def test_library_shaped_event_is_valid():
    event = {"active": library_node("a", 1), "over": library_node("c", 2)}

    session = DragSession.from_event(event)

    assert session.kind is SessionKind.VALID
    assert session.is_actionable
    assert (session.active_id, session.active_column_id) == ("a", 1)
    assert (session.over_id, session.over_column_id) == ("c", 2)


def test_short_event_shape_is_valid():
    event = {"active": {"id": "a", "columnId": 1}, "over": {"id": 2, "columnId": 2}}

    session = DragSession.from_event(event)

    assert session.kind is SessionKind.VALID
    assert session.over_column_id == 2


def test_missing_over_is_none():
    session = DragSession.from_event({"active": library_node("a", 1), "over": None})

    assert session.kind is SessionKind.NONE
    assert not session.is_actionable


def test_missing_active_is_none():
    assert DragSession.from_event({"over": library_node("a", 1)}).kind is SessionKind.NONE


def test_empty_event_is_none():
    assert DragSession.from_event(None).kind is SessionKind.NONE
    assert DragSession.from_event({}).kind is SessionKind.NONE


def test_non_mapping_event_is_none():
    assert DragSession.from_event(["active", "over"]).kind is SessionKind.NONE
    assert DragSession.from_event("a").kind is SessionKind.NONE


def test_same_ids_are_self():
    event = {"active": library_node("a", 1), "over": library_node("a", 1)}

    session = DragSession.from_event(event)

    assert session.kind is SessionKind.SELF
    assert not session.is_actionable


def test_missing_data_current_gives_no_column():
    """A droppable without data is tolerated, not an error."""
    event = {"active": library_node("a", 1), "over": {"id": "zone", "data": {}}}

    session = DragSession.from_event(event)

    assert session.kind is SessionKind.VALID
    assert session.over_column_id is None


def test_non_mapping_data_gives_no_column():
    event = {"active": {"id": "a", "data": None}, "over": {"id": "b", "data": {"current": None}}}

    session = DragSession.from_event(event)

    assert session.active_column_id is None
    assert session.over_column_id is None
