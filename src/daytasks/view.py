# src/daytasks/view.py

from __future__ import annotations

from dataclasses import dataclass

from .core.ports import TaskRenderer
from .dates import DayLike, from_key, resolve_key, to_display
from .tasks.task_models import Task
from .tasks.task_store import TaskStore


@dataclass(frozen=True, slots=True)
class DayView:
    """Everything a UI needs to show one day."""

    date_key: str
    display_date: str
    tasks: tuple[Task, ...]
    completed_count: int
    total_count: int

    @property
    def clear_visible(self) -> bool:
        return self.completed_count > 0

    @property
    def stats_text(self) -> str:
        if self.total_count == 0:
            return "No tasks"
        return f"{self.completed_count}/{self.total_count} completed"


def build_view(date_key: str, tasks: list[Task]) -> DayView:
    return DayView(
        date_key=date_key,
        display_date=to_display(from_key(date_key)),
        tasks=tuple(tasks),
        completed_count=sum(1 for t in tasks if t.completed),
        total_count=len(tasks),
    )


def project_day(store: TaskStore, day: DayLike) -> DayView:
    date_key = resolve_key(day)
    return build_view(date_key, store.tasks_for(date_key))


def render_day(renderer: TaskRenderer, view: DayView) -> None:
    renderer.render_tasks(list(view.tasks))
    renderer.update_stats(view.completed_count, view.total_count)
    renderer.set_clear_button_visible(view.clear_visible)
