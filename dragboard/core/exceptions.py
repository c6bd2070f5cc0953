"""
FILE: dragboard/core/exceptions.py
PURPOSE: Custom exception classes for boundary errors
EXPORTS:
  - DragboardError (base exception)
  - InvalidBoardDataError
  - InvalidEventError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from DragboardError for easy catching
  - The engine and store never raise; these cover seed files, event
    scripts and user input only
  - UI layers catch and display
"""


class DragboardError(Exception):
    """Base exception for all dragboard errors."""
    pass


class InvalidBoardDataError(DragboardError):
    """Seed data is malformed or breaks a board invariant."""

    def __init__(self, message: str, source=None):
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class InvalidEventError(DragboardError):
    """A scripted drag event could not be understood."""

    def __init__(self, message: str, event=None):
        self.event = event
        super().__init__(message)


class InvalidInputError(DragboardError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
