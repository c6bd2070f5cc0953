"""
FILE: dragboard/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

from .board import (
    show,
    add_column,
    replay,
)
from .system import (
    version,
    repl,
)

__all__ = [
    "show",
    "add_column",
    "replay",
    "version",
    "repl",
]
