"""
FILE: todolist/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TodoError (base exception)
  - TaskNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TodoError for easy catching
  - The store never raises; the service layer raises these, UI layers catch and display
"""


class TodoError(Exception):
    """Base exception for all todolist errors."""
    pass


class TaskNotFoundError(TodoError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidInputError(TodoError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
