"""
FILE: dragboard/repl/commands/board.py
PURPOSE: Board inspection and editing handlers for REPL
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.exceptions import InvalidInputError
from ...formatting import BoardFormatter, parse_identifier


def _require_args(result: ParseResult, count: int, usage: str) -> None:
    if len(result.args) < count:
        raise InvalidInputError(f"Usage: {usage}")


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - render the selected board.

    Usage:
        show
        show --raw
    """
    board = repl_context.board
    if board is None:
        console.print("[dim]No board selected[/dim]")
        console.print("[dim]Use 'boards' to list boards and 'use <index>' to pick one[/dim]")
        return

    if result.flags.get("raw"):
        for line in BoardFormatter.to_raw_lines(board):
            console.print(line, markup=False, highlight=False)
        return

    console.print(BoardFormatter.create_table(board))


def handle_boards_command(result: ParseResult) -> None:
    """Handle 'boards' command - list all boards."""
    console.print(BoardFormatter.create_boards_table(repl_context.store.snapshot))


def handle_use_command(result: ParseResult) -> None:
    """
    Handle 'use' command - select a board by index.

    Usage:
        use 1
    """
    _require_args(result, 1, "use <board_index>")
    try:
        index = int(result.args[0])
    except ValueError:
        raise InvalidInputError(f"Board index must be a number, got '{result.args[0]}'")

    repl_context.active_drag = None
    repl_context.store.select_board(index)
    if repl_context.board is None:
        console.print(f"[yellow]No board at index {index}[/yellow] - board commands will do nothing")
    else:
        console.print(f"[green]Using board:[/green] {repl_context.board.title}")


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - append a new, empty column.

    Usage:
        add
    """
    if not repl_context.dispatcher.on_add_column():
        console.print("[dim]No board selected, nothing added[/dim]")


def handle_task_command(result: ParseResult) -> None:
    """
    Handle 'task' command - append a task to a column.

    Usage:
        task <column_id> "Task title"
    """
    _require_args(result, 2, 'task <column_id> "Task title"')
    column_id = parse_identifier(result.args[0])
    title = " ".join(result.args[1:]).strip()
    if not title:
        raise InvalidInputError("Task title cannot be empty")

    if not repl_context.store.add_task(column_id, title):
        console.print(f"[yellow]Column {column_id} not found[/yellow]")


def handle_rm_task_command(result: ParseResult) -> None:
    """
    Handle 'rm-task' command - remove a task by id.

    Usage:
        rm-task <task_id>
    """
    _require_args(result, 1, "rm-task <task_id>")
    task_id = parse_identifier(result.args[0])
    if not repl_context.store.remove_task(task_id):
        console.print(f"[yellow]Task {task_id} not found[/yellow]")


def handle_rm_column_command(result: ParseResult) -> None:
    """
    Handle 'rm-column' command - remove a column and its tasks.

    Usage:
        rm-column <column_id>
    """
    _require_args(result, 1, "rm-column <column_id>")
    column_id = parse_identifier(result.args[0])
    if not repl_context.store.remove_column(column_id):
        console.print(f"[yellow]Column {column_id} not found[/yellow]")
