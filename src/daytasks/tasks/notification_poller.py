# src/daytasks/tasks/notification_poller.py

from __future__ import annotations

"""
Daily reminder poller.

A small polling loop that, once per interval:
- loads today's tasks (other dates are never checked),
- picks armed, not completed tasks whose HH:MM equals the current local minute,
- disables each one (one firing per enablement),
- hands it to an injected callback.

How a reminder is shown (console line, desktop popup, log) belongs to the
callback, not the poller.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import cast

from ..core.ports import NotificationCallback
from ..dates import to_key
from .task_api import set_notification_enabled
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def is_due(task: Task, hhmm: str) -> bool:
    return task.armed and not task.completed and task.notify_time == hhmm


def check_due_notifications(
    store: TaskStore,
    *,
    now: datetime,
    on_due: NotificationCallback,
) -> list[Task]:
    """
    Run one poll tick. Returns the tasks that fired.

    The task is disabled before the callback runs, so a callback failure can
    never make the same reminder fire twice.
    """
    if now.tzinfo is not None:
        now = now.astimezone()
    date_key = to_key(now)
    hhmm = now.strftime("%H:%M")

    due = [t for t in store.tasks_for(date_key) if is_due(t, hhmm)]
    fired: list[Task] = []

    for task in due:
        set_notification_enabled(store, date_key, task.id, False)
        fired.append(task)
        logger.info("Reminder due task_id=%s date=%s time=%s", task.id, date_key, hhmm)
        try:
            on_due(date_key, task)
        except Exception:
            logger.exception("Notification callback failed task_id=%s", task.id)

    return fired


async def run_notification_poller(
    store: TaskStore,
    on_due: NotificationCallback,
    *,
    interval_seconds: float = 60.0,
    clock: Clock = datetime.now,
    lock: threading.Lock | None = None,
) -> None:
    """
    Poll immediately, then every interval_seconds.

    `lock`, when given, is held for each tick so the read-modify-write does not
    interleave with another thread's (e.g. the console REPL).

    To stop the poller, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    while True:
        try:
            if lock is not None:
                with lock:
                    check_due_notifications(store, now=clock(), on_due=on_due)
            else:
                check_due_notifications(store, now=clock(), on_due=on_due)
        except Exception:
            logger.exception("Notification poll tick failed")

        await asyncio.sleep(sleep_s)


@dataclass
class NotificationBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal notification poller stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


async def _run_until_stopped(
    store: TaskStore,
    on_due: NotificationCallback,
    stop_event: asyncio.Event,
    *,
    interval_seconds: float,
    clock: Clock,
    lock: threading.Lock | None,
) -> None:
    poller = asyncio.create_task(
        run_notification_poller(
            store, on_due, interval_seconds=interval_seconds, clock=clock, lock=lock
        )
    )
    try:
        await stop_event.wait()
    finally:
        poller.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await poller
        logger.info("Notification poller stopped.")


def start_notifications_in_background(
    store: TaskStore,
    on_due: NotificationCallback,
    *,
    interval_seconds: float = 60.0,
    clock: Clock = datetime.now,
    lock: threading.Lock | None = None,
    previous: NotificationBackgroundRunner | None = None,
    ready_timeout: float = 5.0,
) -> NotificationBackgroundRunner | None:
    """
    Start the poller on its own event loop in a daemon thread, so a blocking
    console REPL can run in parallel.

    A `previous` runner is stopped and joined first; only one poller is active.
    """
    if previous is not None:
        previous.stop()
        previous.join(timeout=5.0)

    ready = threading.Event()
    handshake = threading.Lock()
    abandoned = False
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        with handshake:
            if abandoned:
                loop.close()
                return
            holder["loop"] = loop
            holder["stop_event"] = stop_event
            ready.set()

        try:
            loop.run_until_complete(
                _run_until_stopped(
                    store,
                    on_due,
                    stop_event,
                    interval_seconds=interval_seconds,
                    clock=clock,
                    lock=lock,
                )
            )
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="daytasks-notify", daemon=True)
    t.start()

    ready.wait(timeout=ready_timeout)
    with handshake:
        if not ready.is_set():
            # The thread sees this flag before it starts polling and exits.
            abandoned = True
            logger.error("Notification thread did not initialize in %.1fs.", ready_timeout)
            return None

    loop = cast(asyncio.AbstractEventLoop, holder["loop"])
    stop_event = cast(asyncio.Event, holder["stop_event"])

    logger.info("Notification poller started (interval=%.0fs).", interval_seconds)
    return NotificationBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
