# src/daytasks/cli/text_renderer.py

from __future__ import annotations

from ..tasks.task_models import Task
from ..view import DayView, render_day


class TextRenderer:
    """TaskRenderer that builds a plain-text block for the console."""

    def __init__(self) -> None:
        self.task_lines: list[str] = []
        self.stats_line = ""
        self.clear_visible = False

    def render_tasks(self, tasks: list[Task]) -> None:
        if not tasks:
            self.task_lines = ["  (no tasks for this day)"]
            return
        lines: list[str] = []
        for i, t in enumerate(tasks, start=1):
            mark = "x" if t.completed else " "
            reminder = ""
            if t.notify_time:
                reminder = f"  [reminder {t.notify_time} {'on' if t.notify_enabled else 'off'}]"
            lines.append(f"  {i:>2}. [{mark}] {t.text}{reminder}")
        self.task_lines = lines

    def update_stats(self, completed_count: int, total_count: int) -> None:
        if total_count == 0:
            self.stats_line = "No tasks"
        else:
            self.stats_line = f"{completed_count}/{total_count} completed"

    def set_clear_button_visible(self, visible: bool) -> None:
        self.clear_visible = visible


def format_day(view: DayView) -> str:
    r = TextRenderer()
    render_day(r, view)
    header = f"{view.display_date} ({view.date_key}) - {r.stats_line}"
    lines = [header, *r.task_lines]
    if r.clear_visible:
        lines.append("  Use /clear to remove completed tasks.")
    return "\n".join(lines)
