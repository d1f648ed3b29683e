"""
FILE: todolist/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - TodoCompleter (Completer for command/arg completion)
  - create_completer(task_source) -> TodoCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - todolist.core.models (Priority, FilterType)
NOTES:
  - Suggests command names when at start of line
  - Suggests filter names after "filter"
  - Suggests flags after "add"/"ls", and priority values after --priority/-p
  - Suggests task IDs for commands expecting IDs (from a task_source callable)
  - Case-insensitive matching
"""

from typing import Callable, Iterable, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.models import FilterType, Priority, Task

TaskSource = Callable[[], List[Task]]


class TodoCompleter(Completer):
    """
    Custom completer for the todo REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Flags after command names
    - Filter / priority values and task IDs where expected
    """

    COMMANDS = [
        "add", "ls", "done", "toggle", "rm", "show", "filter",
        "help", "clear", "exit", "quit",
    ]

    COMMAND_DESCRIPTIONS = {
        "add": "Create a new task",
        "ls": "List tasks in the current filter",
        "done": "Toggle task completion",
        "toggle": "Toggle task completion",
        "rm": "Delete task",
        "show": "View full task details",
        "filter": "Set the list filter",
        "help": "Show available commands",
        "clear": "Clear the screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    COMMAND_FLAGS = {
        "add": ["--desc", "--due", "--priority"],
        "ls": ["--json", "--raw"],
    }

    FLAG_DESCRIPTIONS = {
        "--desc": "Task description",
        "--due": "Due date (YYYY-MM-DD, today, tomorrow, +N)",
        "--priority": "low, medium or high",
        "--json": "Output as JSON",
        "--raw": "Plain text output",
    }

    ID_COMMANDS = {"done", "toggle", "rm", "show"}

    def __init__(self, task_source: Optional[TaskSource] = None):
        self.task_source = task_source

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. If at start or only whitespace -> suggest commands
            2. If command is "filter" -> suggest filter names
            3. If command takes an id -> suggest task ids for the first arg
            4. After --priority / -p -> suggest priority values
            5. After a space or while typing "--" -> suggest flags
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_space = text_before_cursor.endswith(" ")

        # Case 1: first word -> commands
        if not words or (not at_space and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_commands(word)
            return

        command = words[0].lower()
        current = "" if at_space else words[-1]

        # Case 2: filter values
        if command == "filter":
            if (len(words) == 1 and at_space) or (len(words) == 2 and not at_space):
                yield from self._complete_filters(current)
            return

        # Case 3: task ids
        if command in self.ID_COMMANDS:
            if (len(words) == 1 and at_space) or (len(words) == 2 and not at_space):
                yield from self._complete_task_ids(current)
            return

        # Case 4: value for --priority
        previous = words[-1] if at_space else (words[-2] if len(words) >= 2 else "")
        if previous in ("--priority", "-p"):
            yield from self._complete_priorities(current)
            return

        # Case 5: flags
        if at_space or current.startswith("--"):
            yield from self._complete_flags(command, current)

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word_lower):
                yield Completion(
                    flag,
                    start_position=-len(word),
                    display=flag,
                    display_meta=self.FLAG_DESCRIPTIONS.get(flag, ""),
                )

    def _complete_filters(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for filter_type in FilterType:
            label = filter_type.label
            if label.startswith(word_lower):
                yield Completion(
                    label,
                    start_position=-len(word),
                    display=label,
                    display_meta=f"Show {filter_type.value.replace('_', ' ').lower()} tasks",
                )

    def _complete_priorities(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for priority in Priority:
            name = priority.value.lower()
            if name.startswith(word_lower):
                yield Completion(name, start_position=-len(word), display=name)

    def _complete_task_ids(self, word: str) -> Iterable[Completion]:
        """
        Complete task IDs with the task name as a label.
        """
        if self.task_source is None:
            return
        for task in self.task_source()[:200]:  # cap for responsiveness
            id_str = str(task.id)
            if id_str.startswith(word):
                name = task.name.strip()
                display_name = name if len(name) <= 40 else name[:37] + "..."
                yield Completion(
                    id_str,
                    start_position=-len(word),
                    display=id_str,
                    display_meta=display_name,
                )


def create_completer(task_source: Optional[TaskSource] = None) -> TodoCompleter:
    """
    Create and return a TodoCompleter instance.

    Usage:
        completer = create_completer(session.service.list_tasks)
        prompt_session = PromptSession(completer=completer)
    """
    return TodoCompleter(task_source)
