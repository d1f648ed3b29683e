"""
FILE: todolist/repl/pickers.py
PURPOSE: Interactive pickers and the add-task dialog for the REPL
EXPORTS:
  - TaskDraft (dataclass with raw field values)
  - prompt_new_task(session, use_dialogs) -> TaskDraft | None
  - pick_task(session, title) -> list[int] | None
DEPENDENCIES:
  - prompt_toolkit.shortcuts (input_dialog, radiolist_dialog)
  - typing, dataclasses (stdlib)
NOTES:
  - Dialogs need a real terminal; without one, plain input() prompts are used
  - Fields come back raw: validation happens in the service / utils layer
  - Cancel (Esc, Ctrl+C, empty name) returns None
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core.models import Priority

PRIORITY_CHOICES = [
    (Priority.LOW, "Low"),
    (Priority.MEDIUM, "Medium"),
    (Priority.HIGH, "High"),
]


@dataclass
class TaskDraft:
    """Raw values collected by the add-task dialog."""
    name: str
    description: str = ""
    due: str = ""
    priority: Priority = Priority.MEDIUM


def _dialog_draft() -> Optional[TaskDraft]:
    from prompt_toolkit.shortcuts import input_dialog, radiolist_dialog

    name = input_dialog(title="New task", text="Name:").run()
    if not name or not name.strip():
        return None
    description = input_dialog(title="New task", text="Description (optional):").run()
    if description is None:
        return None
    due = input_dialog(
        title="New task",
        text="Due date (YYYY-MM-DD, today, tomorrow, +N; optional):",
    ).run()
    if due is None:
        return None
    priority = radiolist_dialog(
        title="New task",
        text="Priority",
        values=PRIORITY_CHOICES,
        default=Priority.MEDIUM,
    ).run()
    if priority is None:
        return None
    return TaskDraft(name=name, description=description, due=due, priority=priority)


def _inline_draft(session) -> Optional[TaskDraft]:
    console = session.console
    console.print("\n[bold cyan]New task[/bold cyan] [dim](empty name cancels)[/dim]")
    name = input("  Name: ").strip()
    if not name:
        return None
    description = input("  Description: ").strip()
    due = input("  Due (YYYY-MM-DD, today, tomorrow, +N): ").strip()
    raw_priority = input("  Priority [l/M/h]: ").strip()
    priority = Priority.parse(raw_priority) if raw_priority else Priority.MEDIUM
    return TaskDraft(name=name, description=description, due=due, priority=priority)


def prompt_new_task(session, use_dialogs: bool = False) -> Optional[TaskDraft]:
    """
    Collect the fields for a new task.

    Args:
        session: TodoSession (for console output)
        use_dialogs: Show prompt_toolkit dialogs instead of inline prompts

    Returns:
        TaskDraft, or None if the user cancelled

    Raises:
        InvalidInputError: If an inline priority answer isn't a priority
    """
    try:
        if use_dialogs:
            return _dialog_draft()
        return _inline_draft(session)
    except (KeyboardInterrupt, EOFError):
        session.console.print()
        return None


def pick_task(session, title: str = "Select a task") -> Optional[List[int]]:
    """
    Show a numbered list of the visible tasks and read a selection.

    Args:
        session: TodoSession whose visible tasks are offered
        title: Heading shown above the list

    Returns:
        Selected task IDs, or None if cancelled / invalid

    Supports comma-separated numbers for bulk operations (e.g., "1,3").
    """
    console = session.console
    tasks = session.service.visible_tasks()[:20]

    if not tasks:
        console.print("[yellow]No tasks in the current view[/yellow]")
        return None

    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for idx, task in enumerate(tasks, 1):
        mark = "[green]✓[/green]" if task.is_completed else "·"
        console.print(f"  [{idx}] {mark} {task.name} [dim](id:{task.id})[/dim]")

    console.print()
    try:
        selection = input("Select number(s) - use commas for multiple (or press Enter to cancel): ").strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None

    if not selection:
        return None

    task_ids = []
    for sel in (s.strip() for s in selection.split(",")):
        if not sel:
            continue
        try:
            number = int(sel)
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid number: {sel}")
            return None
        if not 1 <= number <= len(tasks):
            console.print(f"[red]Error:[/red] Number {number} out of range (1-{len(tasks)})")
            return None
        task_ids.append(tasks[number - 1].id)

    return task_ids or None
