"""
Tests for the in-memory task store.

Covers:
- initialize() seed data
- filter projection (ALL / HIGH_PRIORITY / COMPLETED)
- add / remove / toggle semantics, including unknown ids
- copy-on-write snapshots and subscriber notification
- id allocation
"""

import pytest

from todolist.core.models import FilterType, Priority, Task
from todolist.core.store import TaskStore, filter_tasks


def make_task(task_id, priority=Priority.LOW, done=False, name="x"):
    return Task(id=task_id, name=name, priority=priority, is_completed=done)


# --- initialize() ---

def test_initialize_seeds_two_tasks(store):
    """Fresh store holds tasks 1 and 2 and shows everything."""
    tasks = store.tasks.value
    assert len(tasks) == 2
    assert {t.id for t in tasks} == {1, 2}
    assert store.current_filter.value == FilterType.ALL


def test_seed_task_fields(store):
    first, second = store.tasks.value

    assert first.name == "Ejemplo de tarea 1"
    assert first.priority == Priority.MEDIUM
    assert first.due_date == "17-02-2025"
    assert second.name == "Reunión importante"
    assert second.description == "Preparar presentación"
    assert second.priority == Priority.HIGH
    assert not first.is_completed and not second.is_completed


def test_unseeded_store_is_empty():
    store = TaskStore(seed=False)
    assert store.tasks.value == ()
    assert store.visible_tasks() == ()


def test_initialize_replaces_existing_tasks(store):
    store.add_task(make_task(10))
    store.initialize()
    assert [t.id for t in store.tasks.value] == [1, 2]


def test_initialize_resets_filter_to_all(store):
    store.update_filter(FilterType.COMPLETED)
    store.initialize()
    assert store.current_filter.value == FilterType.ALL
    assert [t.id for t in store.visible_tasks()] == [1, 2]


# --- visible_tasks() ---

def test_visible_tasks_respects_each_filter():
    """Each filter selects exactly the matching tasks, in order."""
    store = TaskStore(seed=False)
    tasks = [
        make_task(1, Priority.HIGH, done=False),
        make_task(2, Priority.LOW, done=True),
        make_task(3, Priority.HIGH, done=True),
        make_task(4, Priority.MEDIUM, done=False),
    ]
    for task in tasks:
        store.add_task(task)

    store.update_filter(FilterType.HIGH_PRIORITY)
    assert [t.id for t in store.visible_tasks()] == [1, 3]

    store.update_filter(FilterType.COMPLETED)
    assert [t.id for t in store.visible_tasks()] == [2, 3]

    store.update_filter(FilterType.ALL)
    assert list(store.visible_tasks()) == tasks


def test_unrecognised_filter_shows_everything(store):
    assert filter_tasks(store.tasks.value, None) == store.tasks.value


# --- add_task() ---

def test_add_task_appends_last(store):
    before = store.tasks.value
    task = make_task(3)

    store.add_task(task)

    after = store.visible_tasks()
    assert len(after) == len(before) + 1
    assert after[:-1] == before
    assert after[-1] is task


def test_add_task_allows_duplicate_ids(store):
    """The store itself does no validation."""
    store.add_task(make_task(1, name=""))
    assert [t.id for t in store.tasks.value] == [1, 2, 1]


def test_added_low_priority_task_hidden_by_high_filter(store):
    store.add_task(Task(id=3, name="x", priority=Priority.LOW))
    store.update_filter(FilterType.HIGH_PRIORITY)

    visible_ids = [t.id for t in store.visible_tasks()]
    assert 3 not in visible_ids
    assert visible_ids == [2]


# --- remove_task() ---

def test_remove_task(store):
    assert store.remove_task(1) == 1
    assert [t.id for t in store.tasks.value] == [2]


def test_remove_unknown_id_leaves_sequence_unchanged(store):
    before = store.tasks.value
    assert store.remove_task(999) == 0
    after = store.tasks.value
    assert after == before
    assert all(a is b for a, b in zip(after, before))


def test_remove_task_removes_every_match(store):
    store.add_task(make_task(2, name="duplicate"))
    assert store.remove_task(2) == 2
    assert [t.id for t in store.tasks.value] == [1]


# --- toggle_task_completion() ---

def test_toggle_twice_restores_state(store):
    before = store.tasks.value

    toggled = store.toggle_task_completion(1)
    assert toggled.is_completed
    assert store.tasks.value[0].is_completed
    assert store.tasks.value[1] is before[1]

    store.toggle_task_completion(1)
    after = store.tasks.value
    assert after[0] == before[0]
    assert after[1] is before[1]


def test_toggle_does_not_mutate_old_snapshot(store):
    snapshot = store.tasks.value
    store.toggle_task_completion(2)
    assert not snapshot[1].is_completed
    assert store.tasks.value[1].is_completed


def test_toggle_unknown_id_is_noop(store):
    before = store.tasks.value
    assert store.toggle_task_completion(42) is None
    assert store.tasks.value == before


def test_completed_filter_scenario(store):
    """COMPLETED is empty at first, then shows exactly the toggled task."""
    store.update_filter(FilterType.COMPLETED)
    assert store.visible_tasks() == ()

    store.toggle_task_completion(1)
    visible = store.visible_tasks()
    assert len(visible) == 1
    assert visible[0].id == 1


# --- update_filter() ---

def test_update_filter_is_unconditional(store):
    seen = []
    store.subscribe_filter(seen.append)

    store.update_filter(FilterType.COMPLETED)
    store.update_filter(FilterType.COMPLETED)

    assert seen == [FilterType.COMPLETED, FilterType.COMPLETED]
    assert store.current_filter.value == FilterType.COMPLETED


# --- notifications ---

def test_every_mutation_notifies_task_subscribers(store):
    snapshots = []
    store.subscribe_tasks(snapshots.append)

    store.add_task(make_task(3))
    store.remove_task(999)
    store.toggle_task_completion(999)
    store.toggle_task_completion(3)

    assert len(snapshots) == 4
    # Subscribers receive the snapshot that is current when they are called
    assert snapshots[-1] is store.tasks.value
    assert snapshots[-1][-1].is_completed


def test_visible_subscribers_follow_tasks_and_filter(store):
    seen = []
    store.subscribe_visible(seen.append, emit_current=True)

    store.update_filter(FilterType.HIGH_PRIORITY)
    store.add_task(make_task(3, Priority.HIGH))

    assert [t.id for t in seen[0]] == [1, 2]
    assert [t.id for t in seen[1]] == [2]
    assert [t.id for t in seen[2]] == [2, 3]


def test_unsubscribe_stops_notifications(store):
    seen = []
    unsubscribe = store.subscribe_tasks(seen.append)
    store.add_task(make_task(3))
    unsubscribe()
    store.add_task(make_task(4))
    assert len(seen) == 1


# --- next_id() ---

def test_next_id_continues_after_seed(store):
    assert store.next_id() == 3
    assert store.next_id() == 4


def test_next_id_never_reuses_removed_ids(store):
    new_id = store.next_id()
    store.add_task(make_task(new_id))
    store.remove_task(new_id)
    assert store.next_id() == new_id + 1


def test_next_id_skips_past_manually_added_ids(store):
    store.add_task(make_task(50))
    assert store.next_id() == 51


@pytest.mark.parametrize("task_id", [1, 2])
def test_get_task(store, task_id):
    assert store.get_task(task_id).id == task_id


def test_get_task_missing(store):
    assert store.get_task(7) is None
