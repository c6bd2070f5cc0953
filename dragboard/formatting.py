"""
FILE: dragboard/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - BoardFormatter: Class for rendering boards
  - parse_identifier: Turn user-typed ids into board identifiers
DEPENDENCIES:
  - rich (for table formatting)
  - typing (type hints)
  - dragboard.core.models (Board, Snapshot, Identifier)
NOTES:
  - Rendering is derived purely from a snapshot; nothing is cached here
  - Used by both CLI and REPL
"""

from typing import List, Optional

from rich.table import Table

from .core.models import Board, Identifier, Snapshot


class BoardFormatter:
    """Centralized board display formatting."""

    @staticmethod
    def create_table(board: Board) -> Table:
        """
        Create Rich table with one table column per board column.

        Args:
            board: Board to display

        Returns:
            Rich Table object ready for display; task rows read top to bottom
            in column order
        """
        table = Table(title=board.title or str(board.id), show_header=True, header_style="bold cyan")

        for column in board.columns:
            table.add_column(f"{column.title} [dim]({column.id})[/dim]", style="white")

        depth = max((len(column.tasks) for column in board.columns), default=0)
        for row in range(depth):
            cells = []
            for column in board.columns:
                if row < len(column.tasks):
                    task = column.tasks[row]
                    cells.append(f"[cyan]{task.id}[/cyan] {task.title}")
                else:
                    cells.append("")
            table.add_row(*cells)

        return table

    @staticmethod
    def create_boards_table(snapshot: Snapshot) -> Table:
        """Create Rich table listing every board, marking the selected one."""
        table = Table(title="Boards", show_header=True, header_style="bold cyan")
        table.add_column("#", style="cyan", width=4, no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Columns", style="magenta", justify="right")
        table.add_column("Tasks", style="yellow", justify="right")

        for index, board in enumerate(snapshot.boards):
            marker = "[green]*[/green]" if index == snapshot.selected_board_index else ""
            table.add_row(
                f"{index}{marker}",
                board.title,
                str(len(board.columns)),
                str(sum(len(column.tasks) for column in board.columns)),
            )

        return table

    @staticmethod
    def to_raw_lines(board: Optional[Board]) -> List[str]:
        """
        Convert a board to plain text lines.

        Returns:
            One header line per column followed by its tasks, indented
        """
        if board is None:
            return []
        lines = []
        for column in board.columns:
            lines.append(f"{column.id}: {column.title}")
            for task in column.tasks:
                lines.append(f"  {task.id}: {task.title}")
        return lines


def parse_identifier(text: str) -> Identifier:
    """
    Parse an id typed by the user.

    Decimal digits become ints (seed files use numeric column ids),
    anything else stays a string.

    Examples:
        >>> parse_identifier("2")
        2
        >>> parse_identifier("task-a")
        'task-a'
    """
    text = text.strip()
    if text.lstrip("-").isdecimal():
        return int(text)
    return text
