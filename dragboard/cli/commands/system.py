"""
FILE: dragboard/cli/commands/system.py
PURPOSE: System commands (version, repl)
"""

from pathlib import Path
from typing import Optional

import typer

from ..main import app, console, error_console, __version__
from ...core.config import get_settings
from ...core.exceptions import DragboardError
from ...core.loader import load_snapshot


@app.command()
def version():
    """Show dragboard version."""
    console.print(f"dragboard v{__version__}")


@app.command()
def repl(
    board_file: Optional[Path] = typer.Argument(None, help="Board JSON file to start from"),
    board_index: Optional[int] = typer.Option(None, "--board-index", "-b", help="Board to select"),
):
    """
    Launch interactive REPL mode.

    Without a board file the session starts on a single empty board.
    """
    settings = get_settings()
    snapshot = None
    if board_file is not None:
        index = board_index if board_index is not None else settings.board_index
        try:
            snapshot = load_snapshot(board_file, selected_board_index=index)
        except DragboardError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    from ...repl import main as repl_main
    repl_main(snapshot, settings)
