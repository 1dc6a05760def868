# src/daytasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from .. import catalog
from ..core.state import AppState
from ..dates import from_key
from ..tasks import task_api
from ..tasks.task_models import Task, TaskValidationError
from ..view import project_day
from .text_renderer import format_day

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Plain text without a slash adds a task.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _show(state: AppState) -> str:
    return format_day(project_day(state.task_store, state.active_key))


def _task_at(state: AppState, arg: str | None) -> Task | str:
    """Resolve a 1-based list position; returns an error message on failure."""
    tasks = state.task_store.tasks_for(state.active_key)
    try:
        pos = int(arg or "")
    except ValueError:
        return f"Expected a task number, got {arg!r}."
    if pos < 1 or pos > len(tasks):
        return f"No task #{pos} on {state.active_key}."
    return tasks[pos - 1]


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_show(state: AppState, args: list[str]) -> str:
    return _show(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        task_api.add_task(state.task_store, state.active_key, " ".join(args))
    except TaskValidationError as e:
        return f"Not added: {e}"
    return _show(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    task = _task_at(state, args[0] if args else None)
    if isinstance(task, str):
        return task
    task_api.toggle_completion(state.task_store, state.active_key, task.id)
    return _show(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    task = _task_at(state, args[0] if args else None)
    if isinstance(task, str):
        return task
    try:
        task_api.edit_text(state.task_store, state.active_key, task.id, " ".join(args[1:]))
    except TaskValidationError as e:
        return f"Not changed: {e}"
    return _show(state)


def cmd_del(state: AppState, args: list[str]) -> str:
    """
    /del <n>      -> ask for confirmation
    /del <n> yes  -> delete
    """
    task = _task_at(state, args[0] if args else None)
    if isinstance(task, str):
        return task
    if len(args) < 2 or args[1].lower() not in ("y", "yes"):
        return f"Delete {task.text!r}? Repeat as /del {args[0]} yes to confirm."
    task_api.delete_task(state.task_store, state.active_key, task.id)
    return _show(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    task_api.clear_completed(state.task_store, state.active_key)
    return _show(state)


def cmd_notify(state: AppState, args: list[str]) -> str:
    """
    /notify <n> on [HH:MM]  -> enable the daily reminder (time needed if none is set)
    /notify <n> off         -> disable it, keeping the time
    """
    if len(args) < 2 or args[1].lower() not in ("on", "off"):
        return "Usage: /notify <n> on [HH:MM] | /notify <n> off"
    task = _task_at(state, args[0])
    if isinstance(task, str):
        return task

    enabled = args[1].lower() == "on"
    supplied = args[2] if len(args) > 2 else None
    if enabled and not task.notify_time and supplied is None:
        return f"Task #{args[0]} has no reminder time. Use /notify {args[0]} on HH:MM."

    try:
        if enabled and supplied is not None and task.notify_time:
            task_api.set_notification_time(state.task_store, state.active_key, task.id, supplied)
        task_api.set_notification_enabled(
            state.task_store,
            state.active_key,
            task.id,
            enabled,
            prompt_for_time=lambda: supplied,
        )
    except TaskValidationError as e:
        return f"Reminder not changed: {e}"
    return _show(state)


def cmd_time(state: AppState, args: list[str]) -> str:
    """/time <n> <HH:MM>  (or "-" to clear the time)"""
    if len(args) < 2:
        return "Usage: /time <n> <HH:MM|->"
    task = _task_at(state, args[0])
    if isinstance(task, str):
        return task
    value = "" if args[1] == "-" else args[1]
    try:
        task_api.set_notification_time(state.task_store, state.active_key, task.id, value)
    except TaskValidationError as e:
        return f"Reminder not changed: {e}"
    return _show(state)


def cmd_prev(state: AppState, args: list[str]) -> str:
    state.go_prev()
    return _show(state)


def cmd_next(state: AppState, args: list[str]) -> str:
    state.go_next()
    return _show(state)


def cmd_today(state: AppState, args: list[str]) -> str:
    state.go_today()
    return _show(state)


def cmd_date(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /date YYYY-MM-DD"
    try:
        state.active_date = from_key(args[0])
    except ValueError as e:
        return str(e)
    return _show(state)


def cmd_sources(state: AppState, args: list[str]) -> str:
    lines = ["Catalog sources:"]
    for src in catalog.list_sources():
        lines.append(f"  {src.key} - {src.label}")
    return "\n".join(lines)


def cmd_catalog(state: AppState, args: list[str]) -> str:
    """/catalog <source> [filter...]"""
    if not args:
        return "Usage: /catalog <source> [filter]"
    source = args[0]
    filter_text = " ".join(args[1:])
    tasks = catalog.get_tasks(source, filter_text)
    if not tasks:
        return "No matching tasks found" if filter_text else "No tasks available"
    lines = [f"Catalog {source}:"]
    lines.extend(f"  {i:>2}. {t}" for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def cmd_import(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """/import <source> <n> [filter...]  (n refers to the /catalog listing with the same filter)"""
    if len(args) < 2:
        return "Usage: /import <source> <n> [filter]"
    tasks = catalog.get_tasks(args[0], " ".join(args[2:]))
    try:
        pos = int(args[1])
    except ValueError:
        return f"Expected a catalog number, got {args[1]!r}."
    if pos < 1 or pos > len(tasks):
        return f"No catalog task #{pos} in {args[0]!r}."

    text = tasks[pos - 1]
    if not task_api.import_task(state.task_store, state.active_key, text):
        return f"Already on {state.active_key}: {text}"
    if emit is not None:
        emit("Task imported successfully!")
    return _show(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("show", cmd_show, help_text="Show tasks of the active day.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Edit task text: /edit <n> <text>.")
registry.register("del", cmd_del, help_text="Delete a task: /del <n> yes.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Remove completed tasks of the active day.")
registry.register("notify", cmd_notify, help_text="Daily reminder: /notify <n> on [HH:MM] | off.")
registry.register("time", cmd_time, help_text="Reminder time: /time <n> <HH:MM|->.")
registry.register("prev", cmd_prev, help_text="Go to the previous day.")
registry.register("next", cmd_next, help_text="Go to the next day.")
registry.register("today", cmd_today, help_text="Go to today.")
registry.register("date", cmd_date, help_text="Go to a date: /date YYYY-MM-DD.")
registry.register("sources", cmd_sources, help_text="List catalog sources.")
registry.register("catalog", cmd_catalog, help_text="Browse a catalog: /catalog <source> [filter].")
registry.register("import", cmd_import, help_text="Import from catalog: /import <source> <n> [filter].")
