"""Quick test of completer functionality."""

# Path setup handled by conftest.py
from prompt_toolkit.document import Document

from todolist.repl.completer import create_completer


def _texts(completer, text):
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion():
    """Test that all commands are available for completion."""
    completer = create_completer()

    assert "filter" in _texts(completer, "fi")
    assert _texts(completer, "to") == ["toggle"]
    assert "add" in _texts(completer, "")
    print("✓ Command completion works")


def test_filter_value_completion():
    completer = create_completer()

    assert _texts(completer, "filter ") == ["all", "high", "completed"]
    assert _texts(completer, "filter h") == ["high"]
    assert _texts(completer, "filter high ") == []


def test_flag_completion():
    completer = create_completer()

    texts = _texts(completer, "add Slides --")
    assert texts == ["--desc", "--due", "--priority"]
    assert _texts(completer, "ls --j") == ["--json"]
    print("✓ Flag completion works for add and ls")


def test_priority_value_completion():
    completer = create_completer()

    assert _texts(completer, "add Slides --priority ") == ["low", "medium", "high"]
    assert _texts(completer, "add Slides -p h") == ["high"]


def test_task_id_completion(service):
    completer = create_completer(service.list_tasks)

    assert _texts(completer, "done ") == ["1", "2"]
    assert _texts(completer, "rm 2") == ["2"]
    assert _texts(completer, "show 1 ") == []


def test_task_id_completion_without_source():
    assert _texts(create_completer(), "done ") == []


def test_no_suggestions_while_typing_name():
    assert _texts(create_completer(), "add Buy mi") == []
