# tests/test_task_store.py

from __future__ import annotations

import json
import logging

from daytasks.tasks import task_api
from daytasks.tasks.task_models import Task
from daytasks.tasks.task_store import TaskStore

from .fakes import FailingStorage, InMemoryStorage


def test_load_missing_document_is_empty(store: TaskStore) -> None:
    assert store.load() == {}


def test_load_corrupt_document_is_empty_and_logged(caplog) -> None:
    storage = InMemoryStorage({"dailyTasks": "{not json"})
    store = TaskStore(storage)

    with caplog.at_level(logging.ERROR):
        assert store.load() == {}
    assert "Failed to read task store" in caplog.text


def test_load_non_object_document_is_empty() -> None:
    store = TaskStore(InMemoryStorage({"dailyTasks": "[1, 2, 3]"}))
    assert store.load() == {}


def test_load_migrates_records_without_notify_fields() -> None:
    legacy = {"2025-04-14": [{"id": 1, "text": "Old task", "completed": True}]}
    store = TaskStore(InMemoryStorage({"dailyTasks": json.dumps(legacy)}))

    tasks = store.load()["2025-04-14"]
    assert tasks == [
        Task(id=1, text="Old task", completed=True, notify_enabled=False, notify_time=None)
    ]


def test_load_fills_completed_for_oldest_records() -> None:
    legacy = {"2025-04-14": [{"id": 5, "text": "Very old"}]}
    store = TaskStore(InMemoryStorage({"dailyTasks": json.dumps(legacy)}))

    (task,) = store.tasks_for("2025-04-14")
    assert task.completed is False
    assert task.notify_enabled is False


def test_load_drops_unusable_records_and_prunes_empty_dates() -> None:
    doc = {
        "2025-04-14": [{"text": "no id"}, "junk", {"id": 2, "text": "   "}],
        "2025-04-15": [{"id": 3, "text": "ok"}],
        "2025-04-16": "not a list",
    }
    store = TaskStore(InMemoryStorage({"dailyTasks": json.dumps(doc)}))

    loaded = store.load()
    assert list(loaded) == ["2025-04-15"]
    assert loaded["2025-04-15"][0].text == "ok"


def test_save_writes_once_and_prunes_empty_lists(storage: InMemoryStorage, store: TaskStore) -> None:
    ok = store.save({"2025-04-14": [Task(id=1, text="a")], "2025-04-15": []})

    assert ok is True
    assert storage.writes == 1
    doc = json.loads(storage.items["dailyTasks"])
    assert doc == {
        "2025-04-14": [
            {"id": 1, "text": "a", "completed": False, "notifyEnabled": False, "notifyTime": None}
        ]
    }


def test_save_failure_is_logged_not_raised(caplog) -> None:
    store = TaskStore(FailingStorage())

    with caplog.at_level(logging.ERROR):
        assert store.save({"2025-04-14": [Task(id=1, text="a")]}) is False
    assert "Failed to save task store" in caplog.text


def test_custom_storage_key_is_isolated(storage: InMemoryStorage) -> None:
    a = TaskStore(storage, key="a")
    b = TaskStore(storage, key="b")
    a.save({"2025-04-14": [Task(id=1, text="only in a")]})

    assert b.load() == {}
    assert a.count_tasks() == 1


def test_next_id_is_above_every_existing_id() -> None:
    far_future = 10**15
    store_map = {"2025-04-14": [Task(id=far_future, text="x")]}
    assert TaskStore.next_id(store_map) == far_future + 1
    assert TaskStore.next_id({}) > 0


def test_duplicate_ids_are_renumbered_not_dropped(storage: InMemoryStorage) -> None:
    doc = {"2025-04-14": [{"id": 7, "text": "first"}, {"id": 7, "text": "second"}]}
    storage.items["dailyTasks"] = json.dumps(doc)
    store = TaskStore(storage)

    task_api.add_task(store, "2025-04-14", "third")

    tasks = store.tasks_for("2025-04-14")
    assert [t.text for t in tasks] == ["first", "second", "third"]
    assert len({t.id for t in tasks}) == 3
    assert tasks[0].id == 7


def test_load_repairs_mistyped_fields() -> None:
    doc = {
        "2025-04-14": [
            {"id": 1, "text": "a", "completed": "false", "notifyEnabled": 1, "notifyTime": "9:00"},
            {"id": 2, "text": "b", "completed": True, "notifyEnabled": True, "notifyTime": "09:00"},
        ]
    }
    store = TaskStore(InMemoryStorage({"dailyTasks": json.dumps(doc)}))

    a, b = store.tasks_for("2025-04-14")
    assert (a.completed, a.notify_enabled, a.notify_time) == (False, False, None)
    assert (b.completed, b.notify_enabled, b.notify_time) == (True, True, "09:00")
