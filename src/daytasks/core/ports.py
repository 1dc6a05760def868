# src/daytasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store, the mutation API and the poller depend on Protocols instead of
concrete implementations, so storage backends and UIs stay swappable and tests
can run against in-memory fakes.
"""

from typing import Any, Callable, Protocol


class KeyValueStorage(Protocol):
    """
    Local key-value string store (browser localStorage semantics).

    get_item returns None for a missing key. set_item replaces the value in a
    single write and may raise (e.g. disk full).
    """

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class TaskRenderer(Protocol):
    """UI side of a day view."""

    def render_tasks(self, tasks: list[Any]) -> None: ...

    def update_stats(self, completed_count: int, total_count: int) -> None: ...

    def set_clear_button_visible(self, visible: bool) -> None: ...


# (date_key, task) -> None. The UI decides how to surface a due reminder.
NotificationCallback = Callable[[str, Any], None]
