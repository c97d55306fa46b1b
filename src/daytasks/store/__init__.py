"""
Persistence subsystem.

Components:
- models.py: record types (Task, ThemePreference) and their row codecs
- schema.py: DDL for schema version 1
- errors.py: StorageError hierarchy
- data_store.py: async SQLite DataStore (CRUD + preference upsert)
"""
