"""
FILE: todolist/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - SAMPLE_TASKS: Seed dataset loaded into every new session
  - DEFAULT_PRIORITY_NAME: Priority used when none is given
  - DEFAULT_FILTER_NAME: Filter active on a fresh store
  - DATE_FORMAT: Format produced by the due-date parser
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Seed data is plain dicts so models.py can import this module
  - Single source of truth for the sample dataset
"""

# Sample dataset (ids 1 and 2), loaded by TaskStore.initialize()
SAMPLE_TASKS = (
    {
        "id": 1,
        "name": "Ejemplo de tarea 1",
        "description": "Tarea 1, autogenerada, con prioridad media",
        "due_date": "17-02-2025",
        "priority": "MEDIUM",
    },
    {
        "id": 2,
        "name": "Reunión importante",
        "description": "Preparar presentación",
        "due_date": "17-02-2025",
        "priority": "HIGH",
    },
)

# Default values
DEFAULT_PRIORITY_NAME = "MEDIUM"
DEFAULT_FILTER_NAME = "ALL"

# Due dates produced by the date parser
DATE_FORMAT = "%Y-%m-%d"
