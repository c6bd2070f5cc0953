"""
FILE: dragboard/repl/commands/drag.py
PURPOSE: Drag gesture handlers for REPL (over, end, drag, cancel)
NOTES:
  - Each command builds the event a pointer sensor would deliver, from the
    board as it is right now, and hands it to the dispatcher
  - 'over' starts a drag implicitly; 'end' and 'cancel' finish it
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.events import build_drag_event
from ...core.exceptions import InvalidInputError
from ...formatting import parse_identifier


def _parse_drag_args(result: ParseResult, usage: str):
    if len(result.args) < 2:
        raise InvalidInputError(f"Usage: {usage}")
    return parse_identifier(result.args[0]), parse_identifier(result.args[1])


def _current_event(task_id, target_id):
    return build_drag_event(repl_context.board, task_id, target_id)


def _start_if_needed(task_id) -> None:
    if repl_context.active_drag != task_id:
        repl_context.dispatcher.on_drag_start(_current_event(task_id, None))
        repl_context.active_drag = task_id


def handle_over_command(result: ParseResult) -> None:
    """
    Handle 'over' command - hover a task over a task or column.

    Usage:
        over <task_id> <target_id>
    """
    task_id, target_id = _parse_drag_args(result, "over <task_id> <target_id>")
    _start_if_needed(task_id)
    if not repl_context.dispatcher.on_drag_over(_current_event(task_id, target_id)):
        console.print("[dim]Nothing moved[/dim]")


def handle_end_command(result: ParseResult) -> None:
    """
    Handle 'end' command - drop a task onto a task or column.

    Usage:
        end <task_id> <target_id>
    """
    task_id, target_id = _parse_drag_args(result, "end <task_id> <target_id>")
    repl_context.active_drag = None
    if not repl_context.dispatcher.on_drag_end(_current_event(task_id, target_id)):
        console.print("[dim]Order unchanged[/dim]")


def handle_drag_command(result: ParseResult) -> None:
    """
    Handle 'drag' command - a whole gesture: start, hover, drop.

    Usage:
        drag <task_id> <target_id>
    """
    task_id, target_id = _parse_drag_args(result, "drag <task_id> <target_id>")
    dispatcher = repl_context.dispatcher
    dispatcher.on_drag_start(_current_event(task_id, None))
    moved = dispatcher.on_drag_over(_current_event(task_id, target_id))
    reordered = dispatcher.on_drag_end(_current_event(task_id, target_id))
    repl_context.active_drag = None
    if not (moved or reordered):
        console.print("[dim]Nothing moved[/dim]")


def handle_cancel_command(result: ParseResult) -> None:
    """
    Handle 'cancel' command - abandon the drag in progress.

    Usage:
        cancel
    """
    if repl_context.active_drag is None:
        console.print("[dim]No drag in progress[/dim]")
        return
    repl_context.active_drag = None
    if repl_context.dispatcher.on_drag_cancel():
        console.print("[green]Drag cancelled, board restored[/green]")
    else:
        console.print("[dim]Drag cancelled[/dim]")
