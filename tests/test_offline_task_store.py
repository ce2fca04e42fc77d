import json

import pytest

from taskboard.offline_task_store import (
    OFFLINE_MODE_KEY,
    OFFLINE_TASKS_KEY,
    OfflineTaskStore,
    create_offline_task_store,
)
from taskboard.storage import MemoryStorage
from taskboard.task_store import Task, TaskFilters, TaskStatus

NOW = 1_700_000_000.25


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    s = create_offline_task_store(storage)
    s.clock = lambda: NOW
    return s


def make_task(task_id, name="Task", **kwargs):
    return Task(task_id=task_id, task_name=name, **kwargs)


def test_fresh_store_is_empty_and_disabled(store):
    assert store.is_enabled() is False
    assert store.state.tasks == []
    assert store.state.error is None


def test_set_enabled_persists_flag(store, storage):
    store.set_error("boom")
    store.set_enabled(True)
    assert store.is_enabled() is True
    assert store.state.error is None
    assert storage.get_item(OFFLINE_MODE_KEY) == "true"
    store.set_enabled(False)
    assert storage.get_item(OFFLINE_MODE_KEY) == "false"


def test_mode_flag_is_case_insensitive():
    storage = MemoryStorage({OFFLINE_MODE_KEY: "TRUE"})
    assert create_offline_task_store(storage).is_enabled() is True
    storage = MemoryStorage({OFFLINE_MODE_KEY: "yes"})
    assert create_offline_task_store(storage).is_enabled() is False


def test_tasks_round_trip_through_storage(store, storage):
    task = make_task(7, "Write report", task_keywords={"a", "b"}, task_priority=4)
    store.add_task(task)
    restored = create_offline_task_store(storage)
    assert restored.state.tasks == [task]
    assert json.loads(storage.get_item(OFFLINE_TASKS_KEY))[0]["task_id"] == 7


def test_corrupt_storage_gives_empty_list():
    storage = MemoryStorage({OFFLINE_TASKS_KEY: "not json"})
    assert create_offline_task_store(storage).state.tasks == []
    storage = MemoryStorage({OFFLINE_TASKS_KEY: '[{"task_id": 1}]'})
    assert create_offline_task_store(storage).state.tasks == []


def test_update_task_replaces_existing(store):
    store.add_task(make_task(1, "Old"))
    store.update_task(1, make_task(1, "New"))
    assert [t.task_name for t in store.state.tasks] == ["New"]
    assert store.state.error is None


def test_update_missing_task_sets_error(store):
    store.update_task(99, make_task(99))
    assert store.state.error == "Task not found"
    assert store.state.tasks == []


def test_delete_task(store, storage):
    store.add_task(make_task(1))
    store.add_task(make_task(2))
    store.delete_task(1)
    assert [t.task_id for t in store.state.tasks] == [2]
    assert [t.task_id for t in create_offline_task_store(storage).state.tasks] == [2]


def test_set_task_status_stamps_update_time(store):
    store.add_task(make_task(3))
    store.set_task_status(3, TaskStatus.PAUSED)
    task = store.state.tasks[0]
    assert task.task_status is TaskStatus.PAUSED
    assert task.task_update_time == int(NOW)


def test_set_status_of_missing_task_sets_error(store):
    store.set_task_status(5, TaskStatus.COMPLETED)
    assert store.state.error == "Task not found"


def test_filtered_tasks_applies_filters(store):
    store.add_task(make_task(1, "Buy milk", task_priority=2))
    store.add_task(make_task(2, "Pay rent", task_priority=8, task_status=TaskStatus.PAUSED))
    store.add_task(make_task(3, "Call", task_description="about MILK", task_priority=5))
    assert [t.task_id for t in store.filtered_tasks(TaskFilters(search_query="milk"))] == [1, 3]
    assert [t.task_id for t in store.filtered_tasks(TaskFilters(priority_min=5))] == [2, 3]
    assert [
        t.task_id for t in store.filtered_tasks(TaskFilters(status=TaskStatus.PAUSED))
    ] == [2]


def test_new_task_cleans_keywords_and_defaults(store):
    task = store.new_task("Plan", "desc", [" a ", "", "  ", "b"], 6, None)
    assert task.task_keywords == {"a", "b"}
    assert task.task_status is TaskStatus.ACTIVE
    assert task.task_create_time == int(NOW)
    assert task.task_leader_id == 0
    assert task.task_team_id is None
    assert store.state.tasks == []


def test_new_task_ids_are_unique_as_tasks_grow(store):
    first = store.new_task("one", None, [], 1, None)
    store.add_task(first)
    second = store.new_task("two", None, [], 1, None)
    assert second.task_id == first.task_id + 1


def test_store_without_state_starts_empty(storage):
    s = OfflineTaskStore(storage)
    assert s.state.enabled is False
    assert s.state.tasks == []