"""
FILE: dragboard/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DEFAULT_COLUMN_PREFIX: Title prefix for columns created by "add column"
  - DEFAULT_BOARD_INDEX: Board selected when a seed file is loaded
  - EVENT_* : Scripted event type names understood by the dispatcher
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Single source of truth for event names shared by CLI, REPL and dispatcher
"""

# Column creation
DEFAULT_COLUMN_PREFIX = "New Column"

# Board selection
DEFAULT_BOARD_INDEX = 0

# Scripted drag event types
EVENT_START = "start"
EVENT_OVER = "over"
EVENT_END = "end"
EVENT_CANCEL = "cancel"
EVENT_ADD_COLUMN = "add_column"
EVENT_TYPES = (EVENT_START, EVENT_OVER, EVENT_END, EVENT_CANCEL, EVENT_ADD_COLUMN)
