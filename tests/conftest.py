# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from daytasks.core.state import AppState
from daytasks.tasks.task_store import TaskStore

from .fakes import InMemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="daytasks-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path / "data",
        storage_dir=tmp_path / "data" / "storage",
        storage_key="dailyTasks",
        notify_enabled=False,
        notify_interval_seconds=60.0,
    )


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def store(storage: InMemoryStorage) -> TaskStore:
    return TaskStore(storage)


@pytest.fixture()
def day() -> date:
    return date(2025, 4, 14)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, day: date) -> AppState:
    return AppState(settings=settings, task_store=store, active_date=day)
