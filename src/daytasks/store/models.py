# src/daytasks/store/models.py

from __future__ import annotations

"""
Record types and their row codecs.

Rows come back from SQLite as sqlite3.Row (or any mapping with keys()).
Decoding checks presence and type of every column instead of trusting the
row shape; malformed rows raise DecodeError.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from .errors import DecodeError

THEME_PREFERENCE_ID = 1


class RowLike(Protocol):
    def keys(self) -> Any: ...
    def __getitem__(self, key: str) -> Any: ...


@dataclass(slots=True)
class Task:
    name: str
    completed: bool = False
    id: int | None = None


@dataclass(slots=True, frozen=True)
class ThemePreference:
    is_dark_mode: bool
    id: int = THEME_PREFERENCE_ID


# ---- field helpers ----

def _field(row: RowLike, key: str, record: str) -> Any:
    if key not in row.keys():
        raise DecodeError(f"{record} row is missing column {key!r}")
    return row[key]


def _int_field(row: RowLike, key: str, record: str) -> int:
    val = _field(row, key, record)
    # bool is an int subclass; SQLite never hands one back.
    if not isinstance(val, int) or isinstance(val, bool):
        raise DecodeError(f"{record}.{key} must be INTEGER, got {type(val).__name__}")
    return val


def _flag_field(row: RowLike, key: str, record: str) -> bool:
    val = _int_field(row, key, record)
    if val not in (0, 1):
        raise DecodeError(f"{record}.{key} must be 0 or 1, got {val}")
    return val == 1


def _text_field(row: RowLike, key: str, record: str) -> str:
    val = _field(row, key, record)
    if not isinstance(val, str):
        raise DecodeError(f"{record}.{key} must be TEXT, got {type(val).__name__}")
    return val


# ---- Task ----

def task_to_params(task: Task) -> tuple[int | None, str, int]:
    """(id, name, completed) in column order of the items table."""
    # task_from_row rejects anything but TEXT; never write a row it cannot read.
    if not isinstance(task.name, str):
        raise TypeError(f"Task.name must be str, got {type(task.name).__name__}")
    return (task.id, task.name, 1 if task.completed else 0)


def task_from_row(row: RowLike) -> Task:
    return Task(
        id=_int_field(row, "id", "items"),
        name=_text_field(row, "name", "items"),
        completed=_flag_field(row, "completed", "items"),
    )


# ---- ThemePreference ----

def theme_to_params(pref: ThemePreference) -> tuple[int, int]:
    return (int(pref.id), 1 if pref.is_dark_mode else 0)


def theme_from_row(row: RowLike) -> ThemePreference:
    return ThemePreference(
        id=_int_field(row, "id", "theme_config"),
        is_dark_mode=_flag_field(row, "isDarkMode", "theme_config"),
    )
