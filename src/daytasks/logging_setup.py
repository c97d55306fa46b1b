# src/daytasks/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow daytasks logs
    - aiosqlite logs every statement at DEBUG; only ERROR+ unless show_sql
    - any other third-party logger only ERROR+
    """

    def __init__(self, *, show_sql: bool = False) -> None:
        super().__init__()
        self._show_sql = show_sql

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "daytasks" or name.startswith("daytasks."):
            return True

        if name.startswith("aiosqlite"):
            return self._show_sql or record.levelno >= logging.ERROR

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/daytasks",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    show_sql: bool = False,
) -> Path:
    """
    Configure logging with:
    - Console handler: filtered for interactive use
    - File handler: full logs for debugging

    Call this ONCE, very early. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "daytasks.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter(show_sql=show_sql))
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file


def setup_logging_from_settings(settings) -> Path:
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    return setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        show_sql=bool(getattr(settings, "log_sql", False)),
    )
