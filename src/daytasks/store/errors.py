# src/daytasks/store/errors.py

from __future__ import annotations


class StorageError(Exception):
    """
    Base class for everything the data store raises about storage.

    The engine exception (sqlite3 / OSError) is chained as __cause__.
    """


class StorageUnavailable(StorageError):
    """Database file cannot be opened, created or recognized."""


class IOFailure(StorageError):
    """A read or write failed on an already open database."""


class DecodeError(StorageError):
    """A row read from disk does not have the expected shape."""
