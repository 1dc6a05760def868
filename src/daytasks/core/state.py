# src/daytasks/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date

from ..dates import shift_days, to_key, today
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Session state of one running app.

    The active date belongs to the UI session only; the store and the mutation
    API always receive the date explicitly.
    """

    settings: object
    task_store: TaskStore

    active_date: date = field(default_factory=today)

    # Serializes console commands and poller ticks (each is a read-modify-write).
    lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def active_key(self) -> str:
        return to_key(self.active_date)

    def go_prev(self) -> None:
        self.active_date = shift_days(self.active_date, -1)

    def go_next(self) -> None:
        self.active_date = shift_days(self.active_date, 1)

    def go_today(self) -> None:
        self.active_date = today()
