"""daytasks: single-user task list with local SQLite persistence."""

__version__ = "0.1.0"
