from __future__ import annotations

from .model import Settings
from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: Settings):
        self._settings = initial

    def get(self) -> Settings:
        return self._settings

    def save(self, settings: Settings) -> None:
        self._settings = settings
