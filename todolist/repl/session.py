"""
FILE: todolist/repl/session.py
PURPOSE: Per-screen session state for the REPL
EXPORTS:
  - TodoSession (class)
DEPENDENCIES:
  - rich (console output)
  - contextlib (batch rendering)
  - todolist.core.service (TaskService)
  - todolist.repl.display (table rendering)
NOTES:
  - One session == one screen: it owns a TaskService seeded on creation
  - Subscribes to the store's visible list and re-renders on every change
  - batch() coalesces several mutations into a single re-render
  - close() drops the subscription; tasks are discarded with the session
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from rich.console import Console

from ..core.models import FilterType, Task
from ..core.service import TaskService
from ..core.store import TaskStore
from .display import display_tasks_table

logger = logging.getLogger(__name__)


class TodoSession:
    """
    Presentation-side state for one REPL run.

    Attributes:
        service: Validating front door to the task store
        console: Rich console all handlers print to
        auto_render: Redraw the list whenever the visible tasks change
        use_dialogs: Open prompt_toolkit dialogs for "add" without a name
    """

    def __init__(
        self,
        service: Optional[TaskService] = None,
        console: Optional[Console] = None,
        auto_render: bool = True,
        seed: bool = True,
        use_dialogs: bool = False,
    ):
        self.service = service if service is not None else TaskService(TaskStore(seed=seed))
        self.console = console if console is not None else Console()
        self.auto_render = auto_render
        self.use_dialogs = use_dialogs
        self.render_count = 0
        self._batch_depth = 0
        self._dirty = False
        self._unsubscribe = self.service.store.subscribe_visible(self._on_visible_changed)

    @property
    def current_filter(self) -> FilterType:
        return self.service.current_filter

    def get_prompt(self) -> str:
        """
        Generate prompt string based on the active filter.

        Returns:
            "todo> " for ALL, otherwise e.g. "todo:[high]> "
        """
        if self.current_filter == FilterType.ALL:
            return "todo> "
        return f"todo:[{self.current_filter.label}]> "

    def render(self, tasks: Optional[Sequence[Task]] = None) -> None:
        """Draw the visible task list."""
        if tasks is None:
            tasks = self.service.visible_tasks()
        self.render_count += 1
        display_tasks_table(tasks, self.current_filter, self.console)

    def _on_visible_changed(self, tasks: Sequence[Task]) -> None:
        if not self.auto_render:
            return
        if self._batch_depth:
            self._dirty = True
            return
        self.render(tasks)

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Suspend re-rendering; draw once on exit if anything changed."""
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._dirty = False
                self.render()

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()
        logger.debug("Session closed with %d task(s) discarded", len(self.service.list_tasks()))
