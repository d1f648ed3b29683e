"""
FILE: todolist/repl/commands/system.py
PURPOSE: System command handlers for REPL (filter, help, clear)
"""

from ..parser import ParseResult
from ..session import TodoSession
from ...core.exceptions import InvalidInputError
from ...core.models import FilterType


def handle_filter_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'filter' command - choose which tasks are shown.

    Usage:
        filter              # Show current filter
        filter high         # Only HIGH priority tasks
        filter completed    # Only completed tasks
        filter all          # Everything
    """
    console = session.console

    if not result.args:
        console.print(f"Current filter: [cyan]{session.current_filter.label}[/cyan]")
        return

    try:
        with session.batch():
            filter_type = session.service.set_filter(result.args[0])
            if filter_type == FilterType.ALL:
                console.print("✓ Showing all tasks")
            else:
                console.print(f"✓ Filtering to [cyan]{filter_type.label}[/cyan] tasks")
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")


def handle_help_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'help' command - show available commands.
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]add <name> [--desc D] [--due DATE] [--priority P][/cyan]
                               Create a task (no name opens the new-task dialog)
  [cyan]ls [--json|--raw][/cyan]            List tasks in the current filter
  [cyan]done [<id>[,<id>...]][/cyan]        Toggle completion (picker if no ID)
  [cyan]toggle[/cyan]                       Same as done
  [cyan]rm [<id>[,<id>...]][/cyan]          Delete task(s) (picker if no ID)
  [cyan]show <id>[/cyan]                    View full task details
  [cyan]filter \\[all|high|completed][/cyan]  Set the list filter
  [cyan]help[/cyan]                         Show this help
  [cyan]clear[/cyan]                        Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]                Exit REPL (tasks are not saved)

[bold cyan]Flags:[/bold cyan]

  [cyan]--desc, -d <text>[/cyan]            Task description
  [cyan]--due, -u <date>[/cyan]             YYYY-MM-DD, today, tomorrow or +N days
  [cyan]--priority, -p <level>[/cyan]       low, medium (default) or high

[bold cyan]Examples:[/bold cyan]

  [dim]add Buy groceries
  add "Prepare slides" --due tomorrow --priority high
  done 1,2
  filter high
  rm 3[/dim]
"""
    session.console.print(help_text)


def handle_clear_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'clear' command - clear the screen.
    """
    session.console.clear()
