"""
FILE: dragboard/repl/__init__.py
PURPOSE: REPL package for driving a board interactively
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
NOTES:
  - Entry point for interactive mode
"""

from .main import main

__all__ = ["main"]
