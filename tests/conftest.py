"""Shared pytest configuration and fixtures for tests."""

import sys
import io
import logging
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rich.console import Console

from todolist import config
from todolist.core.service import TaskService
from todolist.core.store import TaskStore
from todolist.repl.session import TodoSession


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test reads TODOLIST_* env vars from scratch."""
    for name in ("TODOLIST_LOG_LEVEL", "TODOLIST_LOG_FILE", "TODOLIST_SEED", "TODOLIST_AUTO_RENDER"):
        monkeypatch.delenv(name, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI invocations call setup_logging(); undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture
def store():
    """Store seeded with the two sample tasks."""
    return TaskStore()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def console():
    """Rich console writing to a buffer; read it with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def session(service, console):
    """REPL session without auto-rendering, so output only holds handler messages."""
    s = TodoSession(service=service, console=console, auto_render=False)
    yield s
    s.close()
