"""
FILE: todolist/cli/commands/tasks.py
PURPOSE: Task commands (ls, run)
"""

from pathlib import Path

import typer

from ..main import app, console, error_console
from ...config import get_settings
from ...core.exceptions import InvalidInputError, TodoError
from ...core.service import TaskService
from ...core.store import TaskStore
from ...formatting import TaskFormatter


def _new_service() -> TaskService:
    return TaskService(TaskStore(seed=get_settings().seed_sample_tasks))


@app.command()
def ls(
    filter_name: str = typer.Option("all", "--filter", "-f", help="all, high or completed"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List the tasks a fresh session starts with.

    Example:
        todo ls
        todo ls --filter high
        todo ls --json
    """
    try:
        service = _new_service()
        filter_type = service.set_filter(filter_name)
        tasks = service.visible_tasks()

        if json_output:
            typer.echo(TaskFormatter.to_json_array(tasks))
        elif raw:
            for line in TaskFormatter.to_raw_lines(tasks):
                typer.echo(line)
        else:
            if not tasks:
                console.print("[dim]No tasks found[/dim]")
                return
            console.print(TaskFormatter.create_table(tasks, title=TaskFormatter.title_for(filter_type)))

    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except TodoError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def run(
    script: Path = typer.Argument(..., help="File with one REPL command per line ('-' for stdin)"),
    json_output: bool = typer.Option(False, "--json", help="Print the final list as JSON"),
):
    """
    Run REPL commands from a file in a single session, then print the result.

    Lines starting with '#' are ignored. Since nothing is saved, this is
    the way to script a session.

    Example:
        todo run plan.txt
        printf 'add Buy milk -p high\\nfilter high\\n' | todo run -
    """
    from ...repl.main import execute_command
    from ...repl.parser import parse_command
    from ...repl.session import TodoSession

    try:
        if str(script) == "-":
            lines = typer.get_text_stream("stdin").read().splitlines()
        else:
            lines = script.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        error_console.print(f"[red]Error:[/red] Cannot read {script}: {e}")
        raise typer.Exit(1)

    session = TodoSession(service=_new_service(), console=console, auto_render=False)
    try:
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if not execute_command(parse_command(line), session):
                break

        tasks = session.service.visible_tasks()
        if json_output:
            typer.echo(TaskFormatter.to_json_array(tasks))
        else:
            session.render(tasks)
    finally:
        session.close()
