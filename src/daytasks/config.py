# src/daytasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sensible local default; nothing is required.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAYTASKS"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connectors ----
    console_enabled: bool

    # ---- Storage (ignored by git) ----
    data_dir: Path
    storage_dir: Path
    storage_key: str

    # ---- Reminders ----
    notify_enabled: bool
    notify_interval_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "daytasks").strip() or "daytasks"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/daytasks"))
        storage_dir = _env_path(_k("STORAGE_DIR"), data_dir / "storage")
        storage_key = _env(_k("STORAGE_KEY"), "dailyTasks").strip() or "dailyTasks"

        notify_enabled = _env_bool(_k("NOTIFY_ENABLED"), True)
        notify_interval_seconds = max(1.0, _env_float(_k("NOTIFY_INTERVAL_SECONDS"), 60.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_dir=storage_dir,
            storage_key=storage_key,
            notify_enabled=notify_enabled,
            notify_interval_seconds=notify_interval_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
