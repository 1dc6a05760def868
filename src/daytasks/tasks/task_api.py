# src/daytasks/tasks/task_api.py

"""
Task mutations.

Every operation is a read-modify-write of the whole store for one date:
load, change that date's list, prune it if empty, save, and return the date's
list as it now stands. An unknown date or id is a silent no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..dates import DayLike, resolve_key
from .task_models import Task, TaskValidationError, normalize_notify_time, normalize_text
from .task_store import TaskMap, TaskStore

logger = logging.getLogger(__name__)

TimePrompt = Callable[[], str | None]

# Receives the date's list; returns True if it changed anything.
_Mutator = Callable[[TaskMap, list[Task]], bool]


def _apply(store: TaskStore, day: DayLike, mutate: _Mutator) -> list[Task]:
    date_key = resolve_key(day)
    all_tasks = store.load()
    tasks = list(all_tasks.get(date_key, []))

    if not mutate(all_tasks, tasks):
        return tasks

    if tasks:
        all_tasks[date_key] = tasks
    else:
        all_tasks.pop(date_key, None)

    store.save(all_tasks)
    return tasks


def _index_of(tasks: list[Task], task_id: int) -> int | None:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def add_task(store: TaskStore, day: DayLike, text: str) -> list[Task]:
    clean = normalize_text(text)

    def mutate(all_tasks: TaskMap, tasks: list[Task]) -> bool:
        task = Task(id=TaskStore.next_id(all_tasks), text=clean)
        tasks.append(task)
        logger.debug("Task added id=%s date=%s", task.id, resolve_key(day))
        return True

    return _apply(store, day, mutate)


def import_task(store: TaskStore, day: DayLike, text: str) -> bool:
    """
    Add `text` as a task unless the date already has a task with exactly that
    text. Returns True if a task was added.
    """
    clean = normalize_text(text)
    added = False

    def mutate(all_tasks: TaskMap, tasks: list[Task]) -> bool:
        nonlocal added
        if any(t.text == clean for t in tasks):
            return False
        tasks.append(Task(id=TaskStore.next_id(all_tasks), text=clean))
        added = True
        return True

    _apply(store, day, mutate)
    if added:
        logger.info("Imported task %r into %s", clean, resolve_key(day))
    else:
        logger.info("Import skipped, %r already on %s", clean, resolve_key(day))
    return added


def toggle_completion(store: TaskStore, day: DayLike, task_id: int) -> list[Task]:
    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        i = _index_of(tasks, task_id)
        if i is None:
            return False
        tasks[i] = replace(tasks[i], completed=not tasks[i].completed)
        return True

    return _apply(store, day, mutate)


def edit_text(store: TaskStore, day: DayLike, task_id: int, new_text: str) -> list[Task]:
    clean = normalize_text(new_text)

    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        i = _index_of(tasks, task_id)
        if i is None or tasks[i].text == clean:
            return False
        tasks[i] = replace(tasks[i], text=clean)
        return True

    return _apply(store, day, mutate)


def delete_task(store: TaskStore, day: DayLike, task_id: int) -> list[Task]:
    """Remove a task. Confirming the deletion is up to the caller."""

    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        i = _index_of(tasks, task_id)
        if i is None:
            return False
        del tasks[i]
        return True

    return _apply(store, day, mutate)


def clear_completed(store: TaskStore, day: DayLike) -> list[Task]:
    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        keep = [t for t in tasks if not t.completed]
        if len(keep) == len(tasks):
            return False
        tasks[:] = keep
        return True

    return _apply(store, day, mutate)


def set_notification_enabled(
    store: TaskStore,
    day: DayLike,
    task_id: int,
    enabled: bool,
    prompt_for_time: TimePrompt | None = None,
) -> list[Task]:
    """
    Turn a task's daily reminder on or off.

    Enabling a task that has no time asks `prompt_for_time` for one. A missing
    answer (None, or no prompt at all) aborts the toggle; an invalid answer
    raises TaskValidationError. Disabling keeps the stored time so that
    re-enabling restores it.
    """
    date_key = resolve_key(day)
    new_time: str | None = None

    if enabled:
        current = store.tasks_for(date_key)
        i = _index_of(current, task_id)
        if i is None:
            return current
        if not current[i].notify_time:
            answer = prompt_for_time() if prompt_for_time is not None else None
            if answer is None or not answer.strip():
                logger.debug("Notification enable aborted id=%s (no time)", task_id)
                return current
            new_time = normalize_notify_time(answer)

    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        i = _index_of(tasks, task_id)
        if i is None:
            return False
        task = tasks[i]
        if not enabled:
            if not task.notify_enabled:
                return False
            tasks[i] = replace(task, notify_enabled=False)
            return True
        time_value = task.notify_time or new_time
        if not time_value:
            return False
        if task.notify_enabled and task.notify_time == time_value:
            return False
        tasks[i] = replace(task, notify_enabled=True, notify_time=time_value)
        return True

    return _apply(store, date_key, mutate)


def set_notification_time(
    store: TaskStore, day: DayLike, task_id: int, new_time: str | None
) -> list[Task]:
    """Set or clear (empty input) a task's reminder time. Malformed input raises."""
    time_value = normalize_notify_time(new_time)

    def mutate(_all: TaskMap, tasks: list[Task]) -> bool:
        i = _index_of(tasks, task_id)
        if i is None or tasks[i].notify_time == time_value:
            return False
        tasks[i] = replace(tasks[i], notify_time=time_value)
        return True

    return _apply(store, day, mutate)


__all__ = [
    "TaskValidationError",
    "add_task",
    "clear_completed",
    "delete_task",
    "edit_text",
    "import_task",
    "set_notification_enabled",
    "set_notification_time",
    "toggle_completion",
]
