"""
FILE: todolist/repl/style.py
PURPOSE: Simple celebration messages for REPL feedback
EXPORTS:
  - celebrate_add() -> str
  - celebrate_done() -> str
  - celebrate_reopen() -> str
  - celebrate_delete() -> str
  - celebrate_bulk(count: int, action: str) -> str
DEPENDENCIES:
  - random (for variety)
NOTES:
  - Subtle one-liners, printed dim after the main message
"""

import random


DONE_CELEBRATIONS = [
    "✨ *sparkle* ✨",
    "🎉 *pop* 🎉",
    "⭐ *shine* ⭐",
    "💫 *twinkle* 💫",
]

REOPEN_MESSAGES = [
    "↺ *back on the list* ↺",
    "↩ *reopened* ↩",
]

ADD_CELEBRATIONS = [
    "✓ *noted* ✓",
    "+ *added* +",
    "📝 *captured* 📝",
]

DELETE_ANIMATIONS = [
    "💨 *poof* 💨",
    "× *removed* ×",
    "∅ *gone* ∅",
]

BULK_CELEBRATIONS = [
    "🎯 *efficient* 🎯",
    "⚡ *zippy* ⚡",
    "💪 *productive* 💪",
]


def celebrate_done() -> str:
    return random.choice(DONE_CELEBRATIONS)


def celebrate_reopen() -> str:
    return random.choice(REOPEN_MESSAGES)


def celebrate_add() -> str:
    return random.choice(ADD_CELEBRATIONS)


def celebrate_delete() -> str:
    return random.choice(DELETE_ANIMATIONS)


def celebrate_bulk(count: int, action: str) -> str:
    """Message for operations touching several tasks, e.g. '3 tasks completed'."""
    return f"{random.choice(BULK_CELEBRATIONS)} {count} tasks {action}"
