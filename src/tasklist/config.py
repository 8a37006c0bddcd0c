# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
- Malformed values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
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

    # ---- Connector flags ----
    console_enabled: bool
    http_enabled: bool

    # ---- HTTP ----
    http_host: str
    http_port: int

    # ---- Store policy ----
    allow_project_overwrite: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        http_enabled = _env_bool(_k("HTTP_ENABLED"), False)

        http_host = _env(_k("HTTP_HOST"), "127.0.0.1").strip() or "127.0.0.1"
        http_port = _env_int(_k("HTTP_PORT"), 8080)

        # Re-adding an existing project fails unless explicitly allowed (old behaviour).
        allow_project_overwrite = _env_bool(_k("ALLOW_PROJECT_OVERWRITE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            http_enabled=http_enabled,
            http_host=http_host,
            http_port=http_port,
            allow_project_overwrite=allow_project_overwrite,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
