"""
FILE: dragboard/cli/commands/board.py
PURPOSE: Board commands (show, add-column, replay)
"""

from pathlib import Path
from typing import Optional

import typer

from ..main import app, console, error_console
from ...core.config import Settings, get_settings
from ...core.dispatcher import CommandDispatcher
from ...core.exceptions import DragboardError
from ...core.loader import load_events, load_snapshot
from ...core.models import Snapshot
from ...core.store import BoardStore
from ...formatting import BoardFormatter


def _load(board_file: Path, board_index: Optional[int], settings: Settings) -> Snapshot:
    index = board_index if board_index is not None else settings.board_index
    return load_snapshot(board_file, selected_board_index=index)


def print_snapshot(snapshot: Snapshot, json_output: bool, raw: bool) -> None:
    """Print a snapshot as JSON, plain lines, or a rich table."""
    if json_output:
        console.print_json(snapshot.to_json())
        return

    board = snapshot.board
    if raw:
        for line in BoardFormatter.to_raw_lines(board):
            console.print(line, markup=False, highlight=False)
        return

    if board is None:
        console.print(f"[dim]No board at index {snapshot.selected_board_index}[/dim]")
        return
    console.print(BoardFormatter.create_table(board))


@app.command()
def show(
    board_file: Path = typer.Argument(..., help="Board JSON file"),
    board_index: Optional[int] = typer.Option(None, "--board-index", "-b", help="Board to select"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Render the selected board of a board file.

    Example:
        dragboard show board.json
        dragboard show board.json --board-index 1 --json
    """
    try:
        snapshot = _load(board_file, board_index, get_settings())
        print_snapshot(snapshot, json_output, raw)
    except DragboardError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("add-column")
def add_column(
    board_file: Path = typer.Argument(..., help="Board JSON file"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of columns to add"),
    board_index: Optional[int] = typer.Option(None, "--board-index", "-b", help="Board to select"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Add empty columns to the selected board and print the result.

    The file itself is left untouched.

    Example:
        dragboard add-column board.json --count 2
    """
    try:
        settings = get_settings()
        store = BoardStore(_load(board_file, board_index, settings))
        dispatcher = CommandDispatcher(store, settings)
        for _ in range(count):
            dispatcher.on_add_column()
        print_snapshot(store.snapshot, json_output, raw)
    except DragboardError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def replay(
    board_file: Path = typer.Argument(..., help="Board JSON file"),
    events_file: Path = typer.Argument(..., help="JSON list of drag events"),
    board_index: Optional[int] = typer.Option(None, "--board-index", "-b", help="Board to select"),
    revert_on_cancel: Optional[bool] = typer.Option(
        None,
        "--revert-on-cancel/--keep-on-cancel",
        help="Restore the pre-drag board when a drag is cancelled",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Apply a script of drag events to a board and print the final board.

    Each event is {"type": "start"|"over"|"end"|"cancel"|"add_column", ...}
    with "active"/"over" in drag-event shape.

    Example:
        dragboard replay board.json events.json
    """
    try:
        settings = get_settings()
        if revert_on_cancel is not None:
            settings = settings.model_copy(update={"revert_on_cancel": revert_on_cancel})

        store = BoardStore(_load(board_file, board_index, settings))
        dispatcher = CommandDispatcher(store, settings)
        events = load_events(events_file)

        changes = sum(1 for event in events if dispatcher.dispatch(event))

        print_snapshot(store.snapshot, json_output, raw)
        if not (json_output or raw):
            console.print(f"\n[dim]{len(events)} event(s), {changes} change(s)[/dim]")
    except DragboardError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
