"""
FILE: dragboard/repl/main.py
PURPOSE: Interactive REPL that plays the drag-and-drop host for a board
EXPORTS:
  - REPLContext (session state: store, dispatcher, drag in progress)
  - repl_context (module-level session)
  - execute_command(result) -> bool
  - run_repl() - Main REPL loop
  - main(board_file) - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - dragboard.core (store, dispatcher, loader, config)
  - dragboard.repl.parser (command parsing)
  - dragboard.repl.completer (autocomplete)
NOTES:
  - Board lives in memory only; nothing is written back to the seed file
  - The board is re-rendered from each published snapshot (store subscription)
  - Ctrl+D or "exit"/"quit" to exit
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from ..core.config import Settings
from ..core.dispatcher import CommandDispatcher
from ..core.exceptions import DragboardError
from ..core.models import Board, Identifier, Snapshot
from ..core.store import BoardStore
from ..formatting import BoardFormatter
from .completer import create_completer
from .parser import ParseResult, parse_command

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()


# --- REPL Context (Persistent State) ---


@dataclass
class REPLContext:
    """
    Persistent context for the REPL session.

    Attributes:
        store: Board store for this session
        dispatcher: Dispatcher feeding drag events into the store
        active_drag: Id of the task currently being dragged, if any
        auto_render: Print the board after every published change
    """
    store: BoardStore = field(default_factory=BoardStore)
    dispatcher: Optional[CommandDispatcher] = None
    active_drag: Optional[Identifier] = None
    auto_render: bool = True
    _unsubscribe: Optional[Callable[[], None]] = None

    def load(self, snapshot: Snapshot, settings: Optional[Settings] = None) -> None:
        """Start a fresh session on `snapshot`."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.store = BoardStore(snapshot)
        self.dispatcher = CommandDispatcher(self.store, settings)
        self.active_drag = None
        self._unsubscribe = self.store.subscribe(self._render)

    def _render(self, snapshot: Snapshot) -> None:
        if self.auto_render and snapshot.board is not None:
            console.print(BoardFormatter.create_table(snapshot.board))

    @property
    def board(self) -> Optional[Board]:
        return self.store.snapshot.board

    def get_prompt(self) -> str:
        """
        Prompt string for plain input mode.

        Returns:
            "dragboard> " or "dragboard:[Board title]> " or, while a drag is
            in progress, "dragboard:[Board title | dragging a]> "
        """
        board = self.board
        if board is None:
            return "dragboard> "
        parts = [board.title or str(board.id)]
        if self.active_drag is not None:
            parts.append(f"dragging {self.active_drag}")
        return f"dragboard:[{' | '.join(parts)}]> "


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def format_prompt() -> HTML:
    """Colored prompt for prompt_toolkit sessions."""
    board = repl_context.board
    if board is None:
        return HTML("<b>dragboard&gt; </b>")
    parts = [f"<cyan>{board.title or board.id}</cyan>"]
    if repl_context.active_drag is not None:
        parts.append(f"<ansibrightmagenta>dragging {repl_context.active_drag}</ansibrightmagenta>")
    return HTML(f"<b>dragboard:[{' | '.join(parts)}]&gt; </b>")


def get_bottom_toolbar() -> HTML:
    """Toolbar with column and task counts for the selected board."""
    board = repl_context.board
    if board is None:
        return HTML("<style bg='#444444' fg='#ffffff'> No board selected - use 'boards' and 'use &lt;index&gt;' </style>")
    tasks = sum(len(column.tasks) for column in board.columns)
    return HTML(
        f"<style bg='#444444' fg='#ffffff'> {len(board.columns)} columns | {tasks} tasks"
        f" | Type 'help' for commands </style>"
    )


from .commands import (
    handle_show_command,
    handle_boards_command,
    handle_use_command,
    handle_add_command,
    handle_task_command,
    handle_rm_task_command,
    handle_rm_column_command,
    handle_over_command,
    handle_end_command,
    handle_drag_command,
    handle_cancel_command,
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    if not command:
        return True

    handlers = {
        "show": handle_show_command,
        "ls": handle_show_command,
        "boards": handle_boards_command,
        "use": handle_use_command,
        "add": handle_add_command,
        "task": handle_task_command,
        "rm-task": handle_rm_task_command,
        "rm-column": handle_rm_column_command,
        "over": handle_over_command,
        "end": handle_end_command,
        "drag": handle_drag_command,
        "cancel": handle_cancel_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        try:
            handler(result)
        except DragboardError as e:
            console.print(f"[red]Error:[/red] {e}")
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl() -> None:
    """
    Main REPL loop.

    Falls back to plain input() when stdin/stdout are not a TTY.
    Exits on Ctrl+D, or "exit"/"quit"; Ctrl+C only clears the line.
    """
    session = None
    use_simple_input = not (sys.stdin.isatty() and sys.stdout.isatty())

    if not use_simple_input:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]dragboard REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if repl_context.board is not None:
        console.print(BoardFormatter.create_table(repl_context.board))
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(repl_context.get_prompt())
            else:
                user_input = session.prompt(format_prompt())

            if not execute_command(parse_command(user_input)):
                break

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            console.print("[dim]Goodbye![/dim]")
            break


def main(snapshot: Optional[Snapshot] = None, settings: Optional[Settings] = None) -> None:
    """
    Entry point for REPL mode.

    Called when user runs: dragboard repl [BOARD_FILE]
    Without a seed snapshot the session starts on one empty board.
    """
    if snapshot is None:
        snapshot = Snapshot(boards=(Board(id=1, title="Board"),))
    repl_context.load(snapshot, settings)
    logger.debug("REPL started with %d board(s)", len(snapshot.boards))
    run_repl()
