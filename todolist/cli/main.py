"""
FILE: todolist/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - ls() - List the sample tasks through a filter
  - run() - Execute a file of REPL commands in one session
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - todolist.config / todolist.logging_setup (ambient setup)
  - todolist.repl (interactive mode)
NOTES:
  - Nothing is persisted: every invocation starts a fresh, seeded session
  - Running with no command launches the REPL
  - Error messages go to stderr; exit codes: 0=success, 1=error
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from ..config import get_settings
from ..logging_setup import setup_logging

app = typer.Typer(
    name="todo",
    help="Single-session terminal to-do list",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

__version__ = "0.3.0"


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Configure logging, then launch the REPL when no command is specified.
    """
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
from .commands import (
    version,
    help,
    repl,
    ls,
    run,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
