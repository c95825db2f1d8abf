# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required: the demo API is public.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKDESK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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

    # ---- Remote API ----
    api_base_url: str
    http_timeout_seconds: float
    seed_limit: int
    remote_sync: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path
    storage_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdesk").strip() or "taskdesk"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        api_base_url = _env(_k("API_BASE_URL"), "https://jsonplaceholder.typicode.com").strip()
        http_timeout_seconds = max(0.1, _env_float(_k("HTTP_TIMEOUT_SECONDS"), 10.0))
        seed_limit = max(1, _env_int(_k("SEED_LIMIT"), 20))
        remote_sync = _env_bool(_k("REMOTE_SYNC"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdesk"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.json")
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_base_url=api_base_url,
            http_timeout_seconds=http_timeout_seconds,
            seed_limit=seed_limit,
            remote_sync=remote_sync,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
