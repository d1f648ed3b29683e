"""
FILE: todolist/repl/display.py
PURPOSE: Display functions for tasks and tables
EXPORTS:
  - display_task() - Display a single task
  - display_task_details() - Display every field of a task
  - display_tasks_table() - Display tasks in a formatted table
DEPENDENCIES:
  - rich (formatted output)
  - todolist.formatting (TaskFormatter)
  - todolist.core.models (Task, FilterType)
NOTES:
  - Accepts the console as a parameter so sessions and tests can redirect output
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel

from ..core.models import FilterType, Task
from ..formatting import PRIORITY_STYLES, TaskFormatter

console = Console()


def display_task(task: Task, message: str = "", console_instance: Optional[Console] = None) -> None:
    """
    Display a single task with optional message.

    Args:
        task: Task object to display
        message: Optional message to show before task (e.g., "Created:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    state = "done" if task.is_completed else "open"
    console_instance.print(
        f"  [cyan]{task.id}[/cyan]: {task.name} [dim]({task.priority.value.lower()}, {state})[/dim]"
    )


def display_task_details(task: Task, console_instance: Optional[Console] = None) -> None:
    if console_instance is None:
        console_instance = console

    style = PRIORITY_STYLES.get(task.priority, "white")
    body = "\n".join([
        f"[bold]Name:[/bold] {task.name}",
        f"[bold]Description:[/bold] {task.description or '[dim]-[/dim]'}",
        f"[bold]Due:[/bold] {task.due_date or '[dim]-[/dim]'}",
        f"[bold]Priority:[/bold] [{style}]{task.priority.value.lower()}[/{style}]",
        f"[bold]Completed:[/bold] {'yes' if task.is_completed else 'no'}",
    ])
    console_instance.print(Panel(body, title=f"Task #{task.id}", expand=False))


def display_tasks_table(
    tasks: Sequence[Task],
    filter_type: FilterType = FilterType.ALL,
    console_instance: Optional[Console] = None,
) -> None:
    """
    Display tasks in a formatted table.

    Args:
        tasks: Tasks to display (already filtered)
        filter_type: Active filter, used for the table title
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if not tasks:
        if filter_type == FilterType.ALL:
            console_instance.print("[dim]No tasks found[/dim]")
        else:
            console_instance.print(f"[dim]No tasks match filter '{filter_type.label}'[/dim]")
        return

    table = TaskFormatter.create_table(tasks, title=TaskFormatter.title_for(filter_type))
    console_instance.print(table)
