"""
FILE: dragboard/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: task 2 "Write the report"
  - Flags are boolean switches: show --raw
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "over", "end", "add")
        args: Positional arguments (e.g., ["a", "2"])
        flags: Switches that were present (e.g., {"raw": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, bool] = field(default_factory=dict)
    raw_input: str = ""


def parse_command(input_str: str) -> ParseResult:
    """
    Split REPL input into a lowercase command, positional args and flags.

    Examples:
        >>> parse_command("over a 2")
        ParseResult(command='over', args=['a', '2'], flags={}, raw_input='over a 2')

        >>> parse_command('task 2 "Write the report"')
        ParseResult(command='task', args=['2', 'Write the report'], flags={}, raw_input='task 2 "Write the report"')

    Every "--name" token is a boolean switch; an unclosed quote falls back
    to whitespace splitting.
    """
    input_str = input_str.strip()
    try:
        tokens = shlex.split(input_str)
    except ValueError:
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    head, *rest = tokens
    args = [token for token in rest if not token.startswith("--")]
    flags = {token[2:]: True for token in rest if token.startswith("--")}
    return ParseResult(command=head.lower(), args=args, flags=flags, raw_input=input_str)
