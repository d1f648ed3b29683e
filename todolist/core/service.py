"""
FILE: todolist/core/service.py
PURPOSE: Business logic layer for task operations
EXPORTS:
  - TaskService (class)
    - create_task(name, description, due_date, priority) -> Task
    - remove_task(task_id) -> bool
    - toggle_task(task_id) -> Optional[Task]
    - set_filter(filter_type) -> FilterType
    - get_task(task_id) -> Task
    - list_tasks() -> List[Task]
    - visible_tasks() -> List[Task]
    - counts() -> TaskCounts
DEPENDENCIES:
  - todolist.core.store (TaskStore)
  - todolist.core.models (Task, Priority, FilterType)
  - todolist.core.exceptions (TaskNotFoundError, InvalidInputError)
  - datetime (due dates)
  - logging (stdlib)
NOTES:
  - Validates input and raises descriptive errors; the store itself never raises
  - Blank task names are rejected here, once, for every presentation layer
  - Ids come from TaskStore.next_id() (monotonic, never reused)
  - Unknown ids in remove/toggle are reported via return value, not exceptions
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from .constants import DATE_FORMAT
from .exceptions import InvalidInputError, TaskNotFoundError
from .models import FilterType, Priority, Task
from .store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskCounts:
    """Summary numbers for the REPL toolbar."""

    total: int
    completed: int
    high_priority: int
    visible: int


class TaskService:
    """Validating front door to a TaskStore."""

    def __init__(self, store: Optional[TaskStore] = None):
        self.store = store if store is not None else TaskStore()

    def create_task(
        self,
        name: str,
        description: str = "",
        due_date: Union[str, date, None] = "",
        priority: Union[Priority, str] = Priority.MEDIUM,
    ) -> Task:
        """
        Create a new task with validation and add it to the store.

        Args:
            name: Task name (required, must not be blank)
            description: Optional description
            due_date: date object (stored as YYYY-MM-DD) or free text
            priority: Priority or its name ("low", "m", "HIGH", ...)

        Returns:
            Newly created Task object

        Raises:
            InvalidInputError: If name is blank or priority is unknown

        Notes:
            - Trims whitespace from name and description
            - Task starts with is_completed=False
        """
        # Validate and sanitize name
        name = (name or "").strip()
        if not name:
            logger.info("Rejected task with blank name")
            raise InvalidInputError("Task name cannot be empty")

        if not isinstance(priority, Priority):
            priority = Priority.parse(priority)

        if isinstance(due_date, date):
            due_date = due_date.strftime(DATE_FORMAT)
        due_date = (due_date or "").strip()

        task = Task(
            id=self.store.next_id(),
            name=name,
            description=(description or "").strip(),
            due_date=due_date,
            priority=priority,
        )
        self.store.add_task(task)
        logger.debug("Created task %s", task.id)
        return task

    def remove_task(self, task_id: int) -> bool:
        """Remove a task. Returns False if no task had that id."""
        return self.store.remove_task(task_id) > 0

    def toggle_task(self, task_id: int) -> Optional[Task]:
        """Flip a task's completion. Returns the updated task, or None if not found."""
        return self.store.toggle_task_completion(task_id)

    def set_filter(self, filter_type: Union[FilterType, str]) -> FilterType:
        """
        Change the active filter.

        Raises:
            InvalidInputError: If filter_type is text that doesn't name a filter
        """
        if not isinstance(filter_type, FilterType):
            filter_type = FilterType.parse(filter_type)
        self.store.update_filter(filter_type)
        return filter_type

    @property
    def current_filter(self) -> FilterType:
        return self.store.current_filter.value

    def get_task(self, task_id: int) -> Task:
        """
        Fetch a task by id.

        Raises:
            TaskNotFoundError: If task_id doesn't exist
        """
        task = self.store.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks(self) -> List[Task]:
        """All tasks in insertion order, ignoring the filter."""
        return list(self.store.tasks.value)

    def visible_tasks(self) -> List[Task]:
        """Tasks passing the active filter."""
        return list(self.store.visible_tasks())

    def counts(self) -> TaskCounts:
        tasks = self.store.tasks.value
        return TaskCounts(
            total=len(tasks),
            completed=sum(1 for t in tasks if t.is_completed),
            high_priority=sum(1 for t in tasks if t.priority == Priority.HIGH),
            visible=len(self.store.visible_tasks()),
        )
