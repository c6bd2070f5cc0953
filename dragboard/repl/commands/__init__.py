"""
FILE: dragboard/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

from .board import (
    handle_show_command,
    handle_boards_command,
    handle_use_command,
    handle_add_command,
    handle_task_command,
    handle_rm_task_command,
    handle_rm_column_command,
)
from .drag import (
    handle_over_command,
    handle_end_command,
    handle_drag_command,
    handle_cancel_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_show_command",
    "handle_boards_command",
    "handle_use_command",
    "handle_add_command",
    "handle_task_command",
    "handle_rm_task_command",
    "handle_rm_column_command",
    "handle_over_command",
    "handle_end_command",
    "handle_drag_command",
    "handle_cancel_command",
    "handle_help_command",
    "handle_clear_command",
]
