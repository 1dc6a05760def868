# src/daytasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
import time
from typing import Any

from ..core.ports import KeyValueStorage
from .task_models import SCHEMA_VERSION, Task, migrate_record

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "dailyTasks"

TaskMap = dict[str, list[Task]]


class TaskStore:
    """
    Whole-document task store: {date_key: [task, ...]} under one storage key.

    There is no in-memory cache. Every read goes to the storage, every write
    replaces the full document, so two processes sharing the storage converge
    on the last writer.

    Migration-safe: records written before a field existed get that field's
    default on every load (see task_models.SCHEMA_STEPS).
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        logger.info("TaskStore ready key=%s schema=v%s", self._key, SCHEMA_VERSION)

    @property
    def key(self) -> str:
        return self._key

    # ---- low-level helpers ----

    def _read_document(self) -> Any:
        raw = self._storage.get_item(self._key)
        if raw is None or not raw.strip():
            return {}
        return json.loads(raw)

    @staticmethod
    def _parse_day(date_key: str, items: Any) -> list[Task]:
        if not isinstance(items, list):
            logger.warning("Skipping date %s: expected a list, got %s", date_key, type(items).__name__)
            return []
        records = [rec for rec in (migrate_record(raw) for raw in items) if rec is not None]

        # Ids created in the same millisecond can collide; renumber the later copy.
        highest = max((rec["id"] for rec in records), default=0)
        out: list[Task] = []
        seen: set[int] = set()
        for rec in records:
            if rec["id"] in seen:
                highest += 1
                logger.warning(
                    "Duplicate task id=%s on %s; reassigned id=%s", rec["id"], date_key, highest
                )
                rec["id"] = highest
            seen.add(rec["id"])
            out.append(Task.from_record(rec))
        return out

    # ---- public API ----

    def load(self) -> TaskMap:
        """
        Read and migrate the full store.

        Never raises: missing data is an empty store, and so is a corrupt one
        (logged).
        """
        try:
            doc = self._read_document()
        except Exception:
            logger.exception("Failed to read task store key=%s; starting empty.", self._key)
            return {}

        if not isinstance(doc, dict):
            logger.warning("Task store key=%s is not an object; starting empty.", self._key)
            return {}

        out: TaskMap = {}
        for date_key, items in doc.items():
            tasks = self._parse_day(str(date_key), items)
            if tasks:
                out[str(date_key)] = tasks
        return out

    def save(self, store: TaskMap) -> bool:
        """
        Write the full store in a single storage call.

        Empty dates are pruned. A failed write is logged and reported as False;
        the caller's in-memory state is not rolled back.
        """
        doc = {
            date_key: [t.to_record() for t in tasks]
            for date_key, tasks in store.items()
            if tasks
        }
        try:
            payload = json.dumps(doc, ensure_ascii=False)
            self._storage.set_item(self._key, payload)
        except Exception:
            logger.exception("Failed to save task store key=%s (%d dates)", self._key, len(doc))
            return False
        logger.debug("Task store saved key=%s dates=%d", self._key, len(doc))
        return True

    def tasks_for(self, date_key: str) -> list[Task]:
        return list(self.load().get(date_key, []))

    def count_tasks(self) -> int:
        return sum(len(v) for v in self.load().values())

    @staticmethod
    def next_id(store: TaskMap) -> int:
        """
        Millisecond timestamp, bumped past every id already in the store so two
        tasks created within the same millisecond still get distinct ids.
        """
        candidate = int(time.time() * 1000)
        highest = max((t.id for tasks in store.values() for t in tasks), default=0)
        return max(candidate, highest + 1)
