# src/daytasks/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def print_reminder(date_key: str, task: Task) -> None:
    """NotificationCallback for the console: a one-line alert."""
    _print_ts(f"[REMINDER] {task.text} ({task.notify_time})")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one input line: slash commands go to the registry, plain text is
    added as a task to the active day.
    """
    text = line.strip()
    if not text:
        return None
    if not text.startswith("/"):
        text = f"/add {text}"
    with state.lock:
        return command_registry.handle(state, text, emit=_print_ts)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (date=%s).", state.active_key)
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    try:
        first = handle_line(state, "/show")
    except Exception:
        logger.exception("Initial render failed.")
        first = None
    if first:
        print(first)

    while True:
        try:
            user_input = input(f"{state.active_key}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
