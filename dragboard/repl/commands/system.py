"""
FILE: dragboard/repl/commands/system.py
PURPOSE: System command handlers for REPL (help, clear)
"""

from ..main import console
from ..parser import ParseResult


HELP_ROWS = [
    ("show", "Render the selected board", "show [--raw]"),
    ("boards", "List boards", "boards"),
    ("use", "Select a board", "use <board_index>"),
    ("add", "Add an empty column", "add"),
    ("task", "Add a task to a column", 'task <column_id> "Title"'),
    ("rm-task", "Remove a task", "rm-task <task_id>"),
    ("rm-column", "Remove a column and its tasks", "rm-column <column_id>"),
    ("over", "Hover a task over a task or column", "over <task_id> <target_id>"),
    ("end", "Drop a task onto a task or column", "end <task_id> <target_id>"),
    ("drag", "Full gesture: hover then drop", "drag <task_id> <target_id>"),
    ("cancel", "Abandon the drag in progress", "cancel"),
    ("clear", "Clear the screen", "clear"),
    ("exit", "Leave the REPL", "exit"),
]


def handle_help_command(result: ParseResult) -> None:
    """Handle 'help' command - list commands."""
    console.print("[bold cyan]Commands:[/bold cyan]")
    for cmd, desc, example in HELP_ROWS:
        console.print(f"  [green]{cmd:10}[/green] {desc}")
        console.print(f"             [dim]{example}[/dim]")


def handle_clear_command(result: ParseResult) -> None:
    """Handle 'clear' command - clear the terminal."""
    console.clear()
