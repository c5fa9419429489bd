"""
Match persistence through QSettings, under the single key ``callBreakState``.
The value is the same JSON text the file store writes.
"""
from __future__ import annotations

from PySide6 import QtCore

from callbreak.match import MatchState
from callbreak.persistence import STORAGE_KEY, match_state_from_json, match_state_to_json

from .themes import SETTINGS_APP, SETTINGS_ORG


class QSettingsStore:
    def __init__(
        self,
        key: str = STORAGE_KEY,
        settings: QtCore.QSettings | None = None,
    ) -> None:
        self.key = key
        self._settings = settings or QtCore.QSettings(SETTINGS_ORG, SETTINGS_APP)

    def load(self) -> MatchState:
        return match_state_from_json(self._settings.value(self.key, "", type=str))

    def save(self, state: MatchState) -> None:
        self._settings.setValue(self.key, match_state_to_json(state))
        self._settings.sync()

    def clear(self) -> None:
        self._settings.remove(self.key)
        self._settings.sync()
