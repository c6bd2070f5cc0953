"""
FILE: dragboard/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - DragboardCompleter (Completer for command/arg completion)
  - create_completer() -> DragboardCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - dragboard.repl.main (repl_context, for live task/column ids)
NOTES:
  - Suggests command names at the start of the line
  - Suggests task ids as the first argument of drag commands
  - Suggests task and column ids as drop targets
  - Case-insensitive matching
"""

from typing import Iterable, List

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document


class DragboardCompleter(Completer):
    """Context-aware completion for the dragboard REPL."""

    COMMANDS = [
        "show", "ls", "boards", "use", "add", "task", "rm-task", "rm-column",
        "over", "end", "drag", "cancel", "help", "clear", "exit", "quit",
    ]

    # Commands taking <task> <target>
    DRAG_COMMANDS = {"over", "end", "drag"}

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        if not words or (not at_new_word and len(words) == 1):
            yield from self._complete(self.COMMANDS, words[0] if words else "")
            return

        command = words[0].lower()
        position = len(words) if at_new_word else len(words) - 1
        current = "" if at_new_word else words[-1]

        if command in self.DRAG_COMMANDS:
            if position == 1:
                yield from self._complete(self._task_ids(), current)
            elif position == 2:
                yield from self._complete(self._task_ids() + self._column_ids(), current)
            return

        if command == "rm-task" and position == 1:
            yield from self._complete(self._task_ids(), current)
        elif command in ("rm-column", "task") and position == 1:
            yield from self._complete(self._column_ids(), current)

    def _complete(self, options: List[str], word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for option in options:
            if option.lower().startswith(word_lower):
                yield Completion(option, start_position=-len(word))

    def _task_ids(self) -> List[str]:
        board = self._board()
        return [str(task_id) for task_id in board.task_ids()] if board else []

    def _column_ids(self) -> List[str]:
        board = self._board()
        return [str(column.id) for column in board.columns] if board else []

    @staticmethod
    def _board():
        # Import here to avoid circular dependency
        from .main import repl_context
        return repl_context.board


def create_completer() -> DragboardCompleter:
    return DragboardCompleter()
