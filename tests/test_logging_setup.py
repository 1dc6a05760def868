# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from daytasks.cli.main import console_level_from
from daytasks.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("chatty", logging.WARNING),
    ],
)
def test_console_level_follows_settings(raw: str, expected: int) -> None:
    assert console_level_from(SimpleNamespace(log_level=raw)) == expected


def test_setup_logging_console_and_file_handlers(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.DEBUG)
    root = restore_root_logging

    levels = sorted(h.level for h in root.handlers)
    assert levels == [logging.DEBUG, logging.DEBUG]

    logging.getLogger("daytasks.tests").info("hello file")
    for h in root.handlers:
        h.flush()
    assert "hello file" in (tmp_path / "daytasks.log").read_text("utf-8")


def test_console_filter_quiets_storage_and_third_party(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.DEBUG)
    console = next(h for h in restore_root_logging.handlers if not isinstance(h, logging.FileHandler))

    def passes(name: str, level: int) -> bool:
        record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
        return all(f.filter(record) for f in console.filters)

    assert passes("daytasks.tasks.task_store", logging.DEBUG)
    assert not passes("daytasks.tasks.file_storage", logging.DEBUG)
    assert passes("daytasks.tasks.file_storage", logging.WARNING)
    assert not passes("urllib3", logging.WARNING)
    assert passes("urllib3", logging.ERROR)
