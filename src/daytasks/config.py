# src/daytasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path is overridable so tests and portable installs can relocate data.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from .store.data_store import DB_FILENAME

ENV_PREFIX = "DAYTASKS"

DEFAULT_DATA_DIR = Path.home() / ".daytasks" / "data"


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
    log_sql: bool

    # ---- Local data paths ----
    data_dir: Path
    db_path: Path
    log_dir: Path

    # ---- SQLite ----
    db_timeout_seconds: float

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "daytasks").strip() or "daytasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_sql = _env_bool(_k("LOG_SQL"), False)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        db_path = _env_path(_k("DB_PATH"), data_dir / DB_FILENAME)
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")

        db_timeout_seconds = max(0.0, _env_float(_k("DB_TIMEOUT"), 5.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_sql=log_sql,
            data_dir=data_dir,
            db_path=db_path,
            log_dir=log_dir,
            db_timeout_seconds=db_timeout_seconds,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings; .env is read once, never overriding real env vars."""
    load_dotenv(override=False)
    return Settings.from_env()
