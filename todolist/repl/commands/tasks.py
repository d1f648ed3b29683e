"""
FILE: todolist/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL (add, ls, done/toggle, rm, show)
"""

from typing import List, Optional

from ..parser import ParseResult
from ..session import TodoSession
from ..style import celebrate_add, celebrate_done, celebrate_reopen, celebrate_delete, celebrate_bulk
from ..pickers import pick_task, prompt_new_task
from ..display import display_task, display_task_details, display_tasks_table
from ...core.exceptions import TodoError, InvalidInputError, TaskNotFoundError
from ...formatting import TaskFormatter
from ...utils import parse_due_date, parse_task_ids


def _resolve_ids(result: ParseResult, session: TodoSession, title: str) -> Optional[List[int]]:
    """Task ids from the first argument, or from the picker when none was given."""
    if not result.args:
        return pick_task(session, title=title)
    try:
        return parse_task_ids(result.args[0]) or None
    except InvalidInputError as e:
        session.console.print(f"[red]Error:[/red] {e}")
        return None


def handle_add_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'add' command - create new task.

    Usage:
        add Buy groceries
        add "Prepare slides" --desc "for Monday" --due tomorrow --priority high
        add Call mom -p h -u +2
        add                 (opens the new-task dialog)
    """
    console = session.console

    if result.args:
        name = " ".join(result.args)
        description = result.flag("desc")
        due = result.flag("due")
        priority = result.flag("priority", "medium")
    else:
        try:
            draft = prompt_new_task(session, use_dialogs=session.use_dialogs)
        except InvalidInputError as e:
            console.print(f"[red]Error:[/red] {e}")
            return
        if draft is None:
            console.print("[dim]Cancelled[/dim]")
            return
        name, description, due, priority = draft.name, draft.description, draft.due, draft.priority

    try:
        due_date = parse_due_date(due)
        with session.batch():
            task = session.service.create_task(
                name,
                description=description,
                due_date=due_date,
                priority=priority,
            )
            console.print(f"[green]✓ Created task [bold]#{task.id}[/bold]:[/green] {task.name}")
            console.print(f"[dim]{celebrate_add()}[/dim]")
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
    except TodoError as e:
        console.print(f"[red]Unexpected error:[/red] {e}")


def handle_ls_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'ls' command - list tasks in the current filter.

    Usage:
        ls
        ls --json
        ls --raw
    """
    console = session.console
    tasks = session.service.visible_tasks()

    if result.flags.get("json"):
        console.print(TaskFormatter.to_json_array(tasks), markup=False, highlight=False)
    elif result.flags.get("raw"):
        for line in TaskFormatter.to_raw_lines(tasks):
            console.print(line, markup=False, highlight=False)
    else:
        display_tasks_table(tasks, session.current_filter, console)


def handle_done_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'done' / 'toggle' command - flip task completion.

    Running it on a completed task reopens it.

    Usage:
        done 2
        done 1,2
        done            (shows picker)
    """
    console = session.console
    task_ids = _resolve_ids(result, session, "Toggle completion")
    if task_ids is None:
        return

    completed = 0
    with session.batch():
        for task_id in task_ids:
            task = session.service.toggle_task(task_id)
            if task is None:
                console.print(f"[yellow]Task {task_id} not found[/yellow]")
                continue
            if task.is_completed:
                completed += 1
                display_task(task, "✓ Completed:", console)
                console.print(f"[dim]{celebrate_done()}[/dim]")
            else:
                display_task(task, "↺ Reopened:", console)
                console.print(f"[dim]{celebrate_reopen()}[/dim]")

        if completed > 1:
            console.print(f"[green]{celebrate_bulk(completed, 'completed')}[/green]")


def handle_rm_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'rm' command - delete task(s).

    Usage:
        rm 3
        rm 1,3
        rm              (shows picker)
    """
    console = session.console
    task_ids = _resolve_ids(result, session, "Delete task")
    if task_ids is None:
        return

    removed = 0
    with session.batch():
        for task_id in task_ids:
            if session.service.remove_task(task_id):
                removed += 1
                console.print(f"[green]✓ Deleted task [bold]#{task_id}[/bold][/green]")
            else:
                console.print(f"[yellow]Task {task_id} not found[/yellow]")

        if removed == 1:
            console.print(f"[dim]{celebrate_delete()}[/dim]")
        elif removed > 1:
            console.print(f"[green]{celebrate_bulk(removed, 'deleted')}[/green]")


def handle_show_command(result: ParseResult, session: TodoSession) -> None:
    """
    Handle 'show' command - view every field of a task.

    Usage:
        show 1
    """
    console = session.console
    if not result.args:
        console.print("[red]Error:[/red] Task ID required")
        console.print("[dim]Usage: show <id>[/dim]")
        return

    try:
        task_ids = parse_task_ids(result.args[0])
        if not task_ids:
            raise InvalidInputError("Task ID required")
        task = session.service.get_task(task_ids[0])
    except (InvalidInputError, TaskNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    display_task_details(task, console)
