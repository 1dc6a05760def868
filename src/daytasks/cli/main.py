# src/daytasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts:
- the reminder poller in a background thread (optional),
- the console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import print_reminder, run_console_loop
from ..logging_setup import setup_logging
from ..tasks.notification_poller import (
    NotificationBackgroundRunner,
    start_notifications_in_background,
)

logger = logging.getLogger(__name__)


def console_level_from(settings) -> int:
    """Map settings.log_level ("debug", "INFO", ...) to a logging level; unknown names give WARNING."""
    level_name = str(getattr(settings, "log_level", "WARNING")).strip().upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    settings = get_settings()

    setup_logging(log_dir=settings.data_dir, console_level=console_level_from(settings))

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    notifier: NotificationBackgroundRunner | None = None
    if settings.notify_enabled:
        notifier = start_notifications_in_background(
            state.task_store,
            print_reminder,
            interval_seconds=settings.notify_interval_seconds,
            lock=state.lock,
        )

    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Not every platform has SIGTERM.
        logger.debug("SIGTERM handler not installed.")

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Running reminders only. Press Ctrl+C to stop.")
            try:
                stop_main.wait()
            except KeyboardInterrupt:
                pass
    finally:
        if notifier is not None:
            notifier.stop()
            notifier.join(timeout=10.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
