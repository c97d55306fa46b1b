# tests/helpers.py

from __future__ import annotations

import sqlite3
from pathlib import Path


def raw_rows(db_path: Path, sql: str, params: tuple = ()) -> list[tuple]:
    """Read the file directly, bypassing the store."""
    conn = sqlite3.connect(str(db_path))
    try:
        return conn.execute(sql, params).fetchall()
    finally:
        conn.close()


def raw_exec(db_path: Path, sql: str, params: tuple = ()) -> None:
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute(sql, params)
        conn.commit()
    finally:
        conn.close()
