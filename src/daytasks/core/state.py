# src/daytasks/core/state.py

"""
Application state and its composition root.

create_initial_state():
- loads settings once (unless injected),
- ensures local data directories exist,
- wires the DataStore and ThemeState into AppState.

The presentation layer holds the AppState for the whole app lifetime and
calls shutdown_state() once at exit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import get_settings
from ..store.data_store import DataStore
from ..store.errors import StorageUnavailable
from .theme import ThemeState

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppState:
    settings: object
    store: DataStore
    theme: ThemeState


def _ensure_local_dirs(settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailable(f"cannot create data directory {settings.data_dir}: {exc}") from exc


def create_initial_state(*, settings=None) -> AppState:
    """
    Build AppState from the provided settings.

    If settings is None, falls back to get_settings(). No database I/O
    happens here; the store opens on first use.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    timeout = float(getattr(settings, "db_timeout_seconds", 5.0))
    store = DataStore(settings.db_path, timeout=timeout)

    logger.info("AppState created db=%s", settings.db_path)
    return AppState(settings=settings, store=store, theme=ThemeState(store))


async def shutdown_state(state: AppState) -> None:
    """Release the database handle. Call only when no operation is in flight."""
    await state.store.close()
