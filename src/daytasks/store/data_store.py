# src/daytasks/store/data_store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import aiosqlite

from .errors import IOFailure, StorageUnavailable
from .models import (
    Task,
    ThemePreference,
    task_from_row,
    task_to_params,
    theme_from_row,
    theme_to_params,
)
from .schema import ALL_TABLES, SCHEMA_VERSION

logger = logging.getLogger(__name__)

DB_FILENAME = "daytasks.sqlite3"


class DataStore:
    """
    Async SQLite store for tasks and the theme preference.

    Connection lifecycle:
    - one long-lived aiosqlite connection, opened lazily by the first operation
    - schema is created on first open (PRAGMA user_version == 0) and stamped
      with SCHEMA_VERSION; reopening an existing file never re-runs creation
    - close() releases the connection; the next operation reopens it

    Every write commits on its own. Operations are not serialized against
    each other; only the lazy open is guarded so concurrent first calls share
    one connection.
    """

    def __init__(self, db_path: str | Path = DB_FILENAME, *, timeout: float = 5.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = float(timeout)
        self._conn: aiosqlite.Connection | None = None
        self._open_lock = asyncio.Lock()

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def __aenter__(self) -> DataStore:
        await self._ensure_open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ---- connection / schema ----

    async def _ensure_open(self) -> aiosqlite.Connection:
        conn = self._conn
        if conn is not None:
            return conn
        async with self._open_lock:
            if self._conn is None:
                self._conn = await self._open()
            return self._conn

    async def _open(self) -> aiosqlite.Connection:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(f"cannot create data directory for {self._db_path}: {exc}") from exc

        try:
            conn = await aiosqlite.connect(str(self._db_path), timeout=self._timeout)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"cannot open {self._db_path}: {exc}") from exc

        try:
            conn.row_factory = aiosqlite.Row
            with contextlib.suppress(sqlite3.Error):
                await conn.execute("PRAGMA journal_mode=WAL")
            version = await self._ensure_schema(conn)
        except BaseException:
            await conn.close()
            raise

        logger.info("DataStore opened db=%s schema_version=%s", self._db_path, version)
        return conn

    async def _ensure_schema(self, conn: aiosqlite.Connection) -> int:
        try:
            async with conn.execute("PRAGMA user_version") as cur:
                row = await cur.fetchone()
            version = int(row[0]) if row is not None else 0

            if version == SCHEMA_VERSION:
                return version
            if version != 0:
                # No migration path exists yet; a bump needs an explicit hook here.
                raise StorageUnavailable(
                    f"{self._db_path} has schema version {version}, expected {SCHEMA_VERSION}"
                )

            for ddl in ALL_TABLES:
                await conn.execute(ddl)
            await conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
            await conn.commit()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"cannot initialize schema in {self._db_path}: {exc}") from exc

        logger.info("DataStore schema created db=%s version=%s", self._db_path, SCHEMA_VERSION)
        return SCHEMA_VERSION

    async def close(self) -> None:
        """Release the connection. Safe to call when already closed."""
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            await conn.close()
        except sqlite3.Error as exc:
            raise IOFailure(f"close failed for {self._db_path}: {exc}") from exc
        logger.info("DataStore closed db=%s", self._db_path)

    async def reset(self) -> None:
        """
        Close and delete the database file (plus WAL/journal side files).

        The next operation recreates an empty schema.
        """
        await self.close()
        for suffix in ("", "-wal", "-shm", "-journal"):
            path = self._db_path.with_name(self._db_path.name + suffix)
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                raise IOFailure(f"cannot delete {path}: {exc}") from exc
        logger.info("DataStore reset db=%s", self._db_path)

    # ---- low-level helpers ----

    async def _write(self, sql: str, params: Sequence[Any], *, op: str) -> tuple[int | None, int]:
        conn = await self._ensure_open()
        try:
            async with conn.execute(sql, params) as cur:
                rowid, rowcount = cur.lastrowid, cur.rowcount
            await conn.commit()
        except sqlite3.Error as exc:
            logger.exception("%s failed db=%s", op, self._db_path)
            # Drop the implicit transaction so the write lock is released.
            with contextlib.suppress(sqlite3.Error):
                await conn.rollback()
            raise IOFailure(f"{op} failed: {exc}") from exc
        return rowid, rowcount

    async def _fetch(self, sql: str, params: Sequence[Any] = (), *, op: str) -> list[aiosqlite.Row]:
        conn = await self._ensure_open()
        try:
            async with conn.execute(sql, params) as cur:
                return list(await cur.fetchall())
        except sqlite3.Error as exc:
            logger.exception("%s failed db=%s", op, self._db_path)
            raise IOFailure(f"{op} failed: {exc}") from exc

    # ---- tasks ----

    async def insert_task(self, task: Task) -> int:
        """
        Insert a task and return its store-assigned id.

        Normally task.id is None. An explicit id that collides with an
        existing row replaces that row.
        """
        rowid, _ = await self._write(
            "INSERT OR REPLACE INTO items(id, name, completed) VALUES (?, ?, ?)",
            task_to_params(task),
            op="insert_task",
        )
        if rowid is None:
            raise IOFailure("SQLite did not return lastrowid for items insert")
        task_id = int(rowid)
        logger.debug("Task inserted id=%s completed=%s", task_id, task.completed)
        return task_id

    async def list_tasks(self) -> list[Task]:
        """All tasks in storage order (no ORDER BY)."""
        rows = await self._fetch("SELECT id, name, completed FROM items", op="list_tasks")
        return [task_from_row(r) for r in rows]

    async def get_task(self, task_id: int) -> Task | None:
        rows = await self._fetch(
            "SELECT id, name, completed FROM items WHERE id = ?",
            (int(task_id),),
            op="get_task",
        )
        return task_from_row(rows[0]) if rows else None

    async def update_task(self, task: Task) -> None:
        """Replace name and completed for task.id. Missing ids are a no-op."""
        if task.id is None:
            raise ValueError("update_task requires a persisted task (id is None)")

        task_id, name, completed = task_to_params(task)
        _, changed = await self._write(
            "UPDATE items SET name = ?, completed = ? WHERE id = ?",
            (name, completed, int(task_id)),
            op="update_task",
        )
        if changed == 0:
            logger.debug("update_task matched no row id=%s", task.id)
        else:
            logger.debug("Task updated id=%s completed=%s", task.id, task.completed)

    async def delete_task(self, task_id: int) -> None:
        _, changed = await self._write(
            "DELETE FROM items WHERE id = ?",
            (int(task_id),),
            op="delete_task",
        )
        logger.debug("Task delete id=%s removed=%s", task_id, changed)

    # ---- theme preference ----

    async def save_theme_preference(self, pref: ThemePreference) -> None:
        await self._write(
            "INSERT OR REPLACE INTO theme_config(id, isDarkMode) VALUES (?, ?)",
            theme_to_params(pref),
            op="save_theme_preference",
        )
        logger.debug("Theme preference saved id=%s dark=%s", pref.id, pref.is_dark_mode)

    async def load_theme_preference(self) -> ThemePreference | None:
        """The stored preference, or None if it was never saved."""
        rows = await self._fetch(
            "SELECT id, isDarkMode FROM theme_config LIMIT 1",
            op="load_theme_preference",
        )
        return theme_from_row(rows[0]) if rows else None
