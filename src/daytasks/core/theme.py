# src/daytasks/core/theme.py

from __future__ import annotations

"""
Observable theme state.

Views that react to the light/dark preference subscribe to a ThemeState
passed to them (through AppState) instead of watching a process-wide flag.
Listeners are called synchronously with the new mode on every change.
"""

import logging
from collections.abc import Callable
from enum import StrEnum

from ..store.models import THEME_PREFERENCE_ID, ThemePreference
from .ports import PreferenceRepo

logger = logging.getLogger(__name__)


class ThemeMode(StrEnum):
    SYSTEM = "system"  # before the stored preference is loaded
    LIGHT = "light"
    DARK = "dark"


ThemeListener = Callable[[ThemeMode], None]


class ThemeState:
    def __init__(self, prefs: PreferenceRepo, mode: ThemeMode = ThemeMode.SYSTEM) -> None:
        self._prefs = prefs
        self._mode = mode
        self._listeners: list[ThemeListener] = []

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def is_dark_mode(self) -> bool:
        return self._mode is ThemeMode.DARK

    # ---- observer contract ----

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        mode = self._mode
        for listener in list(self._listeners):
            try:
                listener(mode)
            except Exception:
                logger.exception("Theme listener failed mode=%s", mode.value)

    def _set_mode(self, mode: ThemeMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        self._notify()

    # ---- persistence ----

    async def load(self) -> ThemeMode:
        """
        Apply the stored preference. A store that never saved one
        means light mode.
        """
        pref = await self._prefs.load_theme_preference()
        if pref is None:
            logger.debug("No stored theme preference; defaulting to light")
            self._set_mode(ThemeMode.LIGHT)
        else:
            self._set_mode(ThemeMode.DARK if pref.is_dark_mode else ThemeMode.LIGHT)
        return self._mode

    async def set_dark_mode(self, enabled: bool) -> None:
        """
        Switch mode, notify, then persist.

        If the store fails the previous mode is restored (listeners see the
        rollback) and the StorageError propagates.
        Calls must not overlap: a failed save restores the mode seen before
        it started, even if another call changed it meanwhile.
        """
        previous = self._mode
        self._set_mode(ThemeMode.DARK if enabled else ThemeMode.LIGHT)
        try:
            await self._prefs.save_theme_preference(
                ThemePreference(id=THEME_PREFERENCE_ID, is_dark_mode=bool(enabled))
            )
        except Exception:
            self._set_mode(previous)
            raise
        logger.info("Theme set to %s", self._mode.value)

    async def toggle(self) -> ThemeMode:
        await self.set_dark_mode(not self.is_dark_mode)
        return self._mode
