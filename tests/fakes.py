# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from daytasks.tasks.task_models import Task


class InMemoryStorage:
    """
    Dict-backed KeyValueStorage.

    Counts writes so tests can assert that no-op mutations do not touch storage.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value


class FailingStorage(InMemoryStorage):
    """Reads work, every write raises (think: quota exceeded)."""

    def set_item(self, key: str, value: str) -> None:
        raise OSError("quota exceeded")


@dataclass(slots=True)
class RecordingRenderer:
    """TaskRenderer that remembers the last projection it received."""

    tasks: list[Task] = field(default_factory=list)
    stats: tuple[int, int] | None = None
    clear_visible: bool | None = None

    def render_tasks(self, tasks: list[Task]) -> None:
        self.tasks = list(tasks)

    def update_stats(self, completed_count: int, total_count: int) -> None:
        self.stats = (completed_count, total_count)

    def set_clear_button_visible(self, visible: bool) -> None:
        self.clear_visible = visible


@dataclass(slots=True)
class RecordingNotifier:
    fired: list[tuple[str, Task]] = field(default_factory=list)

    def __call__(self, date_key: str, task: Task) -> None:
        self.fired.append((date_key, task))
