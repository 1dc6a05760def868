# src/daytasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the file storage and the task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.file_storage import JsonFileStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = JsonFileStorage(settings.storage_dir)
    store = TaskStore(storage, key=settings.storage_key)

    try:
        total = store.count_tasks()
    except Exception:
        total = -1
    logger.info("Loaded store key=%s total_tasks=%s", settings.storage_key, total)

    return AppState(settings=settings, task_store=store)
