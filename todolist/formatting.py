"""
FILE: todolist/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - TaskFormatter: Class for formatting tasks
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - typing (type hints)
  - todolist.core.models (Task, Priority, FilterType)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
"""

import json
from typing import Iterable, List

from rich.table import Table

from .core.models import FilterType, Priority, Task

PRIORITY_STYLES = {
    Priority.LOW: "dim",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "bold red",
}

FILTER_TITLES = {
    FilterType.ALL: "Tasks",
    FilterType.HIGH_PRIORITY: "High priority",
    FilterType.COMPLETED: "Completed",
}


class TaskFormatter:
    """Centralized task display formatting."""

    @staticmethod
    def create_table(
        tasks: Iterable[Task],
        title: str = "Tasks",
        show_description: bool = False,
    ) -> Table:
        """
        Create Rich table for tasks.

        Args:
            tasks: Tasks to display, in order
            title: Table title
            show_description: Whether to add a Description column

        Returns:
            Rich Table object ready for display
        """
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("ID", style="cyan", width=6, no_wrap=True)
        table.add_column("Done", width=4, justify="center")
        table.add_column("Name", style="white")
        if show_description:
            table.add_column("Description", style="dim")
        table.add_column("Priority", width=8)
        table.add_column("Due", style="blue", width=10)

        for task in tasks:
            name = f"[strike dim]{task.name}[/strike dim]" if task.is_completed else task.name
            priority_style = PRIORITY_STYLES.get(task.priority, "white")
            row_data = [
                str(task.id),
                "[green]✓[/green]" if task.is_completed else "·",
                name,
            ]
            if show_description:
                row_data.append(task.description or "-")
            row_data.append(f"[{priority_style}]{task.priority.value.lower()}[/{priority_style}]")
            row_data.append(task.due_date or "-")
            table.add_row(*row_data)

        return table

    @staticmethod
    def title_for(filter_type: FilterType) -> str:
        return FILTER_TITLES.get(filter_type, "Tasks")

    @staticmethod
    def to_json_array(tasks: Iterable[Task]) -> str:
        """
        Convert task list to JSON array string.

        Args:
            tasks: Tasks to serialize

        Returns:
            JSON string with array of task objects
        """
        return json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)

    @staticmethod
    def to_raw_lines(tasks: Iterable[Task]) -> List[str]:
        """
        Convert task list to plain text lines.

        Returns:
            One "id: [x] name" string per task
        """
        lines = []
        for task in tasks:
            status_marker = "x" if task.is_completed else " "
            lines.append(f"{task.id}: [{status_marker}] {task.name}")
        return lines
