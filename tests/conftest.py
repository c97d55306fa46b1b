# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
import pytest_asyncio

from daytasks.store.data_store import DB_FILENAME, DataStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with config.Settings.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="daytasks-test",
        log_level="DEBUG",
        log_sql=False,
        data_dir=data_dir,
        db_path=data_dir / DB_FILENAME,
        log_dir=tmp_path / "logs",
        db_timeout_seconds=1.0,
    )


@pytest_asyncio.fixture()
async def store(settings: SimpleNamespace):
    """Real SQLite DataStore on a per-test file; closed after the test."""
    s = DataStore(settings.db_path, timeout=settings.db_timeout_seconds)
    yield s
    await s.close()
