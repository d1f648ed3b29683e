"""
FILE: todolist/utils.py
PURPOSE: Input parsing helpers shared by CLI and REPL
EXPORTS:
  - parse_due_date(text, today) -> str
  - parse_task_ids(id_string) -> List[int]
DEPENDENCIES:
  - datetime, re (stdlib)
  - todolist.core.exceptions (InvalidInputError)
NOTES:
  - parse_due_date is the terminal stand-in for a date picker: it always yields YYYY-MM-DD
  - Both raise InvalidInputError so UI layers handle them like service errors
"""

import re
from datetime import date, datetime, timedelta
from typing import List, Optional

from .core.constants import DATE_FORMAT
from .core.exceptions import InvalidInputError

_OFFSET_RE = re.compile(r"^\+(\d+)d?$")


def parse_due_date(text: Optional[str], today: Optional[date] = None) -> str:
    """
    Turn user input into a YYYY-MM-DD due date.

    Args:
        text: "2025-02-17", "today", "tomorrow", "+3" or "+3d"; blank means no date
        today: Reference date (defaults to date.today())

    Returns:
        ISO date string, or "" for blank input

    Raises:
        InvalidInputError: If text isn't a recognised date
    """
    value = (text or "").strip().lower()
    if not value:
        return ""

    today = today or date.today()

    if value == "today":
        return today.strftime(DATE_FORMAT)
    if value == "tomorrow":
        return (today + timedelta(days=1)).strftime(DATE_FORMAT)

    match = _OFFSET_RE.match(value)
    if match:
        try:
            return (today + timedelta(days=int(match.group(1)))).strftime(DATE_FORMAT)
        except (OverflowError, ValueError):
            raise InvalidInputError(f"Due date offset '{text}' is out of range") from None

    try:
        return datetime.strptime(value, DATE_FORMAT).date().strftime(DATE_FORMAT)
    except ValueError:
        raise InvalidInputError(
            f"Invalid due date '{text}'. Use YYYY-MM-DD, today, tomorrow or +N"
        ) from None


def parse_task_ids(id_string: str) -> List[int]:
    """
    Parse comma-separated task IDs.

    Args:
        id_string: Comma-separated string of IDs (e.g., "1,2,3")

    Returns:
        List of integers

    Raises:
        InvalidInputError: If any ID is not a valid integer
    """
    ids = [part.strip() for part in id_string.split(",")]
    try:
        return [int(part) for part in ids if part]
    except ValueError:
        raise InvalidInputError(f"Invalid task ID in '{id_string}'") from None
