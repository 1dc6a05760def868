# src/daytasks/tasks/file_storage.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_SAFE_KEY_RE = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStorage:
    """
    File-backed key-value storage.

    One file per key under `root` (`<key>.json`). Writes go to a temp file and
    are moved into place with os.replace, so a reader never sees a half-written
    document.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileStorage ready root=%s", self._root)

    def _path_for(self, key: str) -> Path:
        if not key or not key.strip():
            raise ValueError("storage key is required")
        return self._root / f"{_SAFE_KEY_RE.sub('_', key.strip())}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            tmp.write_text(value, "utf-8")
            os.replace(tmp, path)
        finally:
            tmp.unlink(missing_ok=True)
        with contextlib.suppress(OSError):
            os.chmod(path, 0o600)
        logger.debug("Stored key=%s bytes=%d", key, len(value))
