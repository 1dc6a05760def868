# src/daytasks/tasks/task_models.py

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class TaskValidationError(ValueError):
    """User input rejected before anything is persisted (blank text, bad HH:MM)."""


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    notify_enabled: bool = False
    notify_time: str | None = None

    @property
    def armed(self) -> bool:
        return self.notify_enabled and bool(self.notify_time)

    def to_record(self) -> dict[str, Any]:
        d = asdict(self)
        return {
            "id": d["id"],
            "text": d["text"],
            "completed": d["completed"],
            "notifyEnabled": d["notify_enabled"],
            "notifyTime": d["notify_time"],
        }

    @classmethod
    def from_record(cls, raw: dict[str, Any]) -> Task:
        """Build a Task from an already migrated record."""
        return cls(
            id=int(raw["id"]),
            text=str(raw["text"]),
            completed=raw["completed"] is True,
            notify_enabled=raw["notifyEnabled"] is True,
            notify_time=raw["notifyTime"],
        )


def normalize_text(text: str | None) -> str:
    clean = (text or "").strip()
    if not clean:
        raise TaskValidationError("Task text must not be empty.")
    return clean


def normalize_notify_time(value: str | None) -> str | None:
    """
    Strict 24h `HH:MM` (two digits each).

    Empty input means "no time" and becomes None; "9:00" is rejected.
    """
    raw = (value or "").strip()
    if not raw:
        return None
    if not _TIME_RE.match(raw):
        raise TaskValidationError(f"Invalid time {raw!r}; expected HH:MM (24h).")
    return raw


# ---- schema migration ----

# Ordered (version, defaults). Records written by older versions lack the fields
# introduced later; every load fills them in the same order.
SCHEMA_STEPS: tuple[tuple[int, dict[str, Any]], ...] = (
    (1, {"completed": False}),
    (2, {"notifyEnabled": False, "notifyTime": None}),
)

SCHEMA_VERSION = SCHEMA_STEPS[-1][0]


def migrate_record(raw: Any) -> dict[str, Any] | None:
    """
    Fill missing fields of a persisted task record.

    Returns None for records that cannot be repaired (not an object, no id,
    blank text).
    """
    if not isinstance(raw, dict):
        logger.warning("Dropping non-object task record: %r", raw)
        return None

    rec = dict(raw)
    for _version, defaults in SCHEMA_STEPS:
        for name, default in defaults.items():
            if name not in rec:
                rec[name] = default

    try:
        rec["id"] = int(rec["id"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Dropping task record without a usable id: %r", raw)
        return None

    text = rec.get("text")
    if not isinstance(text, str) or not text.strip():
        logger.warning("Dropping task record id=%s with empty text", rec["id"])
        return None

    for name in ("completed", "notifyEnabled"):
        if not isinstance(rec[name], bool):
            logger.warning("Task id=%s: %s=%r is not a boolean; using False", rec["id"], name, rec[name])
            rec[name] = False

    try:
        rec["notifyTime"] = normalize_notify_time(
            rec["notifyTime"] if isinstance(rec["notifyTime"], str) else None
        )
    except TaskValidationError:
        logger.warning("Task id=%s: dropping malformed notifyTime=%r", rec["id"], rec["notifyTime"])
        rec["notifyTime"] = None

    return rec
