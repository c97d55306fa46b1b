# src/daytasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of the concrete DataStore,
so theme state can be tested against in-memory fakes.
"""

from typing import Protocol

from ..store.models import ThemePreference


class PreferenceRepo(Protocol):
    async def save_theme_preference(self, pref: ThemePreference) -> None: ...
    async def load_theme_preference(self) -> ThemePreference | None: ...
