"""
FILE: todolist/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .tasks import (
    ls,
    run,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "ls",
    "run",
    "version",
    "help",
    "repl",
]
