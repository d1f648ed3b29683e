"""
FILE: todolist/core/store.py
PURPOSE: In-memory owner of the task list and active filter
EXPORTS:
  - TaskStore (class)
  - filter_tasks(tasks, filter_type) -> tuple[Task, ...]
DEPENDENCIES:
  - logging (stdlib)
  - todolist.core.models (Task, Priority, FilterType)
  - todolist.core.observable (MutableState, DerivedState)
  - todolist.core.constants (SAMPLE_TASKS)
NOTES:
  - Sole authority for mutations; the presentation layer only calls these methods
  - Every operation is total: unknown ids are silent no-ops, nothing raises
  - Snapshots are tuples of frozen Tasks; updates build a new tuple (copy-on-write)
  - Every mutation notifies subscribers, even when nothing matched
  - No persistence: the store and its tasks die with the session
"""

import logging
from typing import Callable, Iterable, Optional, Tuple

from .constants import SAMPLE_TASKS
from .models import FilterType, Priority, Task
from .observable import DerivedState, MutableState, Unsubscribe

logger = logging.getLogger(__name__)

TaskList = Tuple[Task, ...]


def filter_tasks(tasks: Iterable[Task], filter_type: FilterType) -> TaskList:
    """
    Project a task sequence through a filter, preserving order.

    Args:
        tasks: Tasks in insertion order
        filter_type: Active filter

    Returns:
        HIGH_PRIORITY -> tasks with HIGH priority
        COMPLETED -> completed tasks
        ALL (or anything else) -> every task
    """
    if filter_type == FilterType.HIGH_PRIORITY:
        return tuple(t for t in tasks if t.priority == Priority.HIGH)
    if filter_type == FilterType.COMPLETED:
        return tuple(t for t in tasks if t.is_completed)
    return tuple(tasks)


class TaskStore:
    """
    Task list plus active filter, both observable.

    Attributes:
        tasks: MutableState holding the ordered task tuple
        current_filter: MutableState holding the active FilterType
        visible: DerivedState with the filtered projection
    """

    def __init__(self, seed: bool = True):
        self.tasks: MutableState[TaskList] = MutableState((), name="tasks")
        self.current_filter: MutableState[FilterType] = MutableState(
            FilterType.ALL, name="filter"
        )
        self.visible: DerivedState[TaskList] = DerivedState(
            [self.tasks, self.current_filter], self.visible_tasks
        )
        self._last_issued_id = 0

        if seed:
            self.initialize()

    def initialize(self) -> None:
        """Replace the task list with the two sample tasks and show them all."""
        sample = tuple(Task.from_dict(data) for data in SAMPLE_TASKS)
        self._note_ids(sample)
        logger.debug("Seeding store with %d sample tasks", len(sample))
        self.tasks.value = sample
        if self.current_filter.value != FilterType.ALL:
            self.current_filter.value = FilterType.ALL

    # --- Mutations ---

    def add_task(self, task: Task) -> None:
        """Append task to the end of the list. No validation, no uniqueness check."""
        self._note_ids((task,))
        logger.debug("Adding task %s: %r", task.id, task.name)
        self.tasks.value = self.tasks.value + (task,)

    def remove_task(self, task_id: int) -> int:
        """
        Remove every task with the given id.

        Returns:
            Number of tasks removed (0 if no match; not an error)
        """
        current = self.tasks.value
        remaining = tuple(t for t in current if t.id != task_id)
        removed = len(current) - len(remaining)
        logger.debug("Removing task %s (%d matched)", task_id, removed)
        self.tasks.value = remaining
        return removed

    def toggle_task_completion(self, task_id: int) -> Optional[Task]:
        """
        Flip is_completed on the task with the given id.

        Non-matching tasks keep their position and identity.

        Returns:
            The new version of the toggled task, or None if no task matched
        """
        toggled = None
        updated = []
        for task in self.tasks.value:
            if task.id == task_id:
                task = task.toggled()
                if toggled is None:
                    toggled = task
            updated.append(task)
        logger.debug("Toggling task %s (%s)", task_id, "found" if toggled else "no match")
        self.tasks.value = tuple(updated)
        return toggled

    def update_filter(self, filter_type: FilterType) -> None:
        """Replace the active filter unconditionally."""
        logger.debug("Filter set to %s", filter_type)
        self.current_filter.value = filter_type

    # --- Queries ---

    def visible_tasks(self) -> TaskList:
        """Tasks passing the active filter, in insertion order."""
        return filter_tasks(self.tasks.value, self.current_filter.value)

    def get_task(self, task_id: int) -> Optional[Task]:
        """First task with the given id, or None."""
        for task in self.tasks.value:
            if task.id == task_id:
                return task
        return None

    def next_id(self) -> int:
        """
        Allocate a new task id.

        Ids increase monotonically and are never reissued in a session,
        even after the task holding the highest id is removed.
        """
        self._last_issued_id += 1
        return self._last_issued_id

    def _note_ids(self, tasks: Iterable[Task]) -> None:
        for task in tasks:
            if task.id > self._last_issued_id:
                self._last_issued_id = task.id

    # --- Subscriptions ---

    def subscribe_tasks(self, callback: Callable[[TaskList], None], emit_current: bool = False) -> Unsubscribe:
        return self.tasks.subscribe(callback, emit_current=emit_current)

    def subscribe_filter(self, callback: Callable[[FilterType], None], emit_current: bool = False) -> Unsubscribe:
        return self.current_filter.subscribe(callback, emit_current=emit_current)

    def subscribe_visible(self, callback: Callable[[TaskList], None], emit_current: bool = False) -> Unsubscribe:
        return self.visible.subscribe(callback, emit_current=emit_current)
