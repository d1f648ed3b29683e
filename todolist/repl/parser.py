"""
FILE: todolist/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "task with spaces"
  - Long flags (--due tomorrow) and their short aliases (-d tomorrow)
  - Preserves argument order for positional args
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Union

# Short flag -> long flag name
SHORT_FLAGS = {
    "d": "desc",
    "p": "priority",
    "u": "due",
}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "ls", "done")
        args: Positional arguments (e.g., ["task name", "3"])
        flags: Flag arguments as dict (e.g., {"priority": "high", "json": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""

    def flag(self, name: str, default: str = "") -> str:
        """String value of a flag; boolean flags and missing flags give default."""
        value = self.flags.get(name)
        return value if isinstance(value, str) else default


def _flag_name(token: str) -> str:
    if token.startswith("--"):
        return token[2:]
    short = token[1:]
    return SHORT_FLAGS.get(short, short)


def _is_flag(token: str) -> bool:
    if token.startswith("--"):
        return len(token) > 2
    # "-5" and unknown short tokens such as "-B" stay positional
    return token.startswith("-") and token[1:] in SHORT_FLAGS


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command='add', args=['Buy', 'milk'], flags={}, raw_input='add Buy milk')

        >>> parse_command('add "Call mom" -p high').flags
        {'priority': 'high'}

        >>> parse_command("ls --json").flags
        {'json': True}

    Notes:
        - Command is always the first token (case-insensitive)
        - Boolean flags don't need values (--json sets json=True)
        - Value flags take the next token unless it's another flag
        - Unclosed quotes fall back to whitespace splitting
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    command = tokens[0].lower()

    args: List[str] = []
    flags: Dict[str, Union[str, bool]] = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if _is_flag(token):
            name = _flag_name(token)
            if i + 1 < len(tokens) and not _is_flag(tokens[i + 1]):
                flags[name] = tokens[i + 1]
                i += 2
            else:
                flags[name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(command=command, args=args, flags=flags, raw_input=input_str)
