"""
FILE: todolist/repl/main.py
PURPOSE: Interactive REPL for the to-do list with prompt-toolkit
EXPORTS:
  - main() - Entry point for REPL mode
  - run_repl(session) - Main REPL loop
  - execute_command(result, session) -> bool
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - todolist.repl.session (TodoSession)
  - todolist.repl.parser (command parsing)
  - todolist.repl.completer (autocomplete)
NOTES:
  - The session subscribes to the store; handlers only call service methods
  - Bottom toolbar shows task counts; right prompt shows how many are in view
  - Non-TTY input (pipes, tests) uses plain input() so scripts can drive it
  - Ctrl+D or "exit"/"quit" to exit; tasks are discarded on exit
"""

import logging
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory

from ..config import get_settings
from .commands import (
    handle_add_command,
    handle_ls_command,
    handle_done_command,
    handle_rm_command,
    handle_show_command,
    handle_filter_command,
    handle_help_command,
    handle_clear_command,
)
from .completer import create_completer
from .parser import ParseResult, parse_command
from .session import TodoSession

logger = logging.getLogger(__name__)

HANDLERS = {
    "add": handle_add_command,
    "ls": handle_ls_command,
    "list": handle_ls_command,
    "done": handle_done_command,
    "toggle": handle_done_command,
    "rm": handle_rm_command,
    "show": handle_show_command,
    "view": handle_show_command,
    "filter": handle_filter_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}

FILTER_COLORS = {
    "high": "ansired",
    "completed": "ansigreen",
}


def format_prompt(session: TodoSession) -> HTML:
    """
    Create formatted prompt text with the active filter.

    Returns:
        HTML formatted prompt: "todo> " or "todo:[high]> "
    """
    label = session.current_filter.label
    if label == "all":
        return HTML("<b>todo&gt; </b>")
    color = FILTER_COLORS.get(label, "white")
    return HTML(f"<b>todo:[<{color}>{label}</{color}>]&gt; </b>")


def get_bottom_toolbar(session: TodoSession) -> HTML:
    """Toolbar with task counts."""
    counts = session.service.counts()
    text = (
        f"📋 {counts.total} tasks | ✓ {counts.completed} done | "
        f"❗ {counts.high_priority} high | 💡 Type 'help' for commands"
    )
    return HTML(f"<style bg='#444444' fg='#ffffff'> {text} </style>")


def get_right_prompt(session: TodoSession) -> HTML:
    """Right prompt with the number of tasks in the current view."""
    counts = session.service.counts()
    if session.current_filter.label == "all":
        return HTML(f"<style fg='#888888'>[{counts.total} total]</style>")
    return HTML(f"<style fg='#888888'>[{counts.visible} in view]</style>")


def execute_command(result: ParseResult, session: TodoSession) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()
    console = session.console

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler:
        logger.debug("Running command %r", result.raw_input)
        handler(result, session)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(session: Optional[TodoSession] = None) -> None:
    """
    Main REPL loop.

    Sets up prompt_toolkit session with:
    - Command history (in-memory, not persisted)
    - Autocomplete (commands, flags, filters, task ids)
    - Toolbar and right prompt fed from the store

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    if session is None:
        settings = get_settings()
        session = TodoSession(
            auto_render=settings.auto_render,
            seed=settings.seed_sample_tasks,
            use_dialogs=has_tty,
        )
    console = session.console

    prompt_session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(session.service.list_tasks),
                complete_while_typing=True,
                bottom_toolbar=lambda: get_bottom_toolbar(session),
                rprompt=lambda: get_right_prompt(session),
            )
        except Exception as e:
            # prompt_toolkit can't drive this terminal; fall back to input()
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]todo[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()
    session.render()

    try:
        while True:
            try:
                if use_simple_input or prompt_session is None:
                    user_input = input(session.get_prompt())
                else:
                    user_input = prompt_session.prompt(format_prompt(session))

                if not execute_command(parse_command(user_input), session):
                    break

            except KeyboardInterrupt:
                console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
                continue
            except EOFError:
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break
            except Exception as e:
                # Unexpected error - show but don't crash
                logger.exception("Command failed")
                console.print(f"[red]Unexpected error:[/red] {e}")
    finally:
        session.close()


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: todo repl (or just: todo)
    """
    try:
        run_repl()
    except Exception as e:
        logger.exception("REPL crashed")
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
