"""
FILE: dragboard/cli/main.py
PURPOSE: Typer-based CLI for one-shot board commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - setup_logging(verbose) - Configure rich logging
  - version() - Show version
  - repl() - Launch interactive REPL
  - show() - Render a board file
  - add_column() - Add columns to a board and print the result
  - replay() - Apply an event script to a board and print the result
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output, log handler)
  - dragboard.core (loader, store, dispatcher, config)
  - dragboard.repl (interactive mode)
NOTES:
  - Board files are read only; results are printed, never saved
  - All board commands support --json and --raw flags
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import get_settings

# Typer app setup
app = typer.Typer(
    name="dragboard",
    help="Drag-and-drop kanban board engine",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


def setup_logging(verbose: bool = False) -> None:
    """
    Route log records through rich on stderr.

    Args:
        verbose: DEBUG when True, WARNING otherwise
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def default_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Drag-and-drop kanban board engine."""
    setup_logging(verbose or get_settings().verbose)


# Import command modules to register commands with app
from .commands import (
    version,
    repl,
    show,
    add_column,
    replay,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
