"""
Tests for REPL command handlers and the REPL loop.

Handlers print to the session's console, which the fixtures point at a
StringIO buffer.
"""

import io

import pytest

from todolist.core.models import FilterType, Priority
from todolist.repl.main import execute_command, run_repl
from todolist.repl.parser import parse_command
from todolist.repl.session import TodoSession


def run(session, line):
    return execute_command(parse_command(line), session)


def output(session):
    return session.console.file.getvalue()


# --- add ---

def test_add_with_flags(session):
    run(session, 'add "Prepare slides" --desc "for Monday" --due 2025-03-01 --priority high')

    task = session.service.list_tasks()[-1]
    assert task.id == 3
    assert task.name == "Prepare slides"
    assert task.description == "for Monday"
    assert task.due_date == "2025-03-01"
    assert task.priority == Priority.HIGH
    assert "Created task #3" in output(session)


def test_add_joins_unquoted_words(session):
    run(session, "add Buy oat milk -p l")
    task = session.service.list_tasks()[-1]
    assert task.name == "Buy oat milk"
    assert task.priority == Priority.LOW


def test_add_blank_name_is_rejected(session):
    run(session, 'add "   "')
    assert "Task name cannot be empty" in output(session)
    assert len(session.service.list_tasks()) == 2


def test_add_bad_due_date_is_rejected(session):
    run(session, "add Slides --due someday")
    assert "Invalid due date" in output(session)
    assert len(session.service.list_tasks()) == 2


def test_add_without_name_uses_inline_prompts(session, monkeypatch):
    answers = iter(["Water plants", "balcony too", "2025-04-01", "h"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    run(session, "add")

    task = session.service.list_tasks()[-1]
    assert task.name == "Water plants"
    assert task.description == "balcony too"
    assert task.due_date == "2025-04-01"
    assert task.priority == Priority.HIGH


def test_add_without_name_cancelled(session, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    run(session, "add")
    assert "Cancelled" in output(session)
    assert len(session.service.list_tasks()) == 2


# --- done / toggle ---

def test_done_toggles_completion(session):
    run(session, "done 1")
    assert session.service.get_task(1).is_completed
    assert "Completed" in output(session)

    run(session, "toggle 1")
    assert not session.service.get_task(1).is_completed
    assert "Reopened" in output(session)


def test_done_bulk_and_unknown(session):
    run(session, "done 1,2,99")
    assert all(t.is_completed for t in session.service.list_tasks())
    assert "Task 99 not found" in output(session)
    assert "2 tasks completed" in output(session)


def test_done_invalid_id(session):
    run(session, "done one")
    assert "Invalid task ID" in output(session)


def test_done_without_id_uses_picker(session, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    run(session, "done")
    assert session.service.get_task(2).is_completed


# --- rm ---

def test_rm(session):
    run(session, "rm 1")
    assert [t.id for t in session.service.list_tasks()] == [2]
    assert "Deleted task #1" in output(session)


def test_rm_unknown_id_is_reported_not_raised(session):
    run(session, "rm 42")
    assert "Task 42 not found" in output(session)
    assert len(session.service.list_tasks()) == 2


def test_rm_picker_out_of_range(session, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "5")
    run(session, "rm")
    assert "out of range" in output(session)
    assert len(session.service.list_tasks()) == 2


# --- show / ls ---

def test_show(session):
    run(session, "show 2")
    text = output(session)
    assert "Task #2" in text
    assert "Preparar presentación" in text


def test_show_missing(session):
    run(session, "show 9")
    assert "Task 9 not found" in output(session)


def test_ls_table_and_raw(session):
    run(session, "ls")
    assert "Ejemplo de tarea 1" in output(session)

    run(session, "done 2")
    run(session, "ls --raw")
    assert "2: [x] Reunión importante" in output(session)


def test_ls_json_respects_filter(session):
    import json

    run(session, "filter high")
    session.console.file.truncate(0)
    session.console.file.seek(0)

    run(session, "ls --json")
    data = json.loads(output(session))
    assert [t["id"] for t in data] == [2]


# --- filter ---

def test_filter_changes_store_and_prompt(session):
    assert session.get_prompt() == "todo> "

    run(session, "filter high")
    assert session.service.current_filter == FilterType.HIGH_PRIORITY
    assert session.get_prompt() == "todo:[high]> "

    run(session, "filter")
    assert "Current filter: high" in output(session)

    run(session, "filter all")
    assert session.get_prompt() == "todo> "


def test_filter_invalid(session):
    run(session, "filter overdue")
    assert "Invalid filter" in output(session)
    assert session.service.current_filter == FilterType.ALL


# --- dispatch ---

def test_exit_and_unknown_commands(session):
    assert run(session, "") is True
    assert run(session, "frobnicate") is True
    assert "Unknown command" in output(session)
    assert run(session, "quit") is False


def test_help_lists_commands(session):
    run(session, "help")
    text = output(session)
    for command in ("add", "done", "rm", "filter"):
        assert command in text


# --- rendering ---

def test_auto_render_redraws_once_per_command(service, console):
    session = TodoSession(service=service, console=console, auto_render=True)

    run(session, "done 1,2")
    assert session.render_count == 1

    run(session, "add Something -p high")
    assert session.render_count == 2

    run(session, "filter completed")
    assert session.render_count == 3

    session.close()


def test_closed_session_stops_rendering(service, console):
    session = TodoSession(service=service, console=console, auto_render=True)
    session.close()

    service.create_task("Outside the session")
    assert session.render_count == 0
    assert service.store.visible.subscriber_count == 0


def test_render_shows_empty_filter_message(session):
    run(session, "filter completed")
    session.render()
    assert "No tasks match filter 'completed'" in output(session)


# --- REPL loop ---

def test_run_repl_simple_mode(service, console, monkeypatch):
    """Without a TTY the loop reads plain lines until 'exit'."""
    script = "add Buy milk -p high\ndone 3\nfilter completed\nexit\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    session = TodoSession(service=service, console=console, auto_render=False)

    run_repl(session)

    task = service.get_task(3)
    assert task.name == "Buy milk" and task.is_completed
    assert [t.id for t in service.visible_tasks()] == [3]
    assert "Goodbye" in console.file.getvalue()
    assert service.store.visible.subscriber_count == 0


def test_run_repl_exits_on_eof(service, console, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ls\n"))
    session = TodoSession(service=service, console=console, auto_render=False)

    run_repl(session)

    assert "Goodbye" in console.file.getvalue()
