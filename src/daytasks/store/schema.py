# src/daytasks/store/schema.py

"""SQLite schema for the task list database (version 1)."""

from __future__ import annotations

SCHEMA_VERSION = 1

CREATE_ITEMS = """
CREATE TABLE IF NOT EXISTS items (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    name      TEXT,
    completed INTEGER NOT NULL DEFAULT 0
)
"""

# id is supplied by the caller (singleton row, id = 1).
CREATE_THEME_CONFIG = """
CREATE TABLE IF NOT EXISTS theme_config (
    id         INTEGER PRIMARY KEY,
    isDarkMode INTEGER NOT NULL DEFAULT 0
)
"""

ALL_TABLES: list[str] = [
    CREATE_ITEMS,
    CREATE_THEME_CONFIG,
]
