from __future__ import annotations

import json
import os
import logging
from abc import ABC, abstractmethod

from .settings import Settings

log = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = 'casiotoy.json'

class SettingsError(Exception):
    '''
    Settings could not be read, parsed, validated, or written.
    '''

class SettingsStoreInterface(ABC):
    @abstractmethod
    def load(self) -> Settings:
        raise NotImplementedError

    @abstractmethod
    def save(self, settings: Settings) -> None:
        raise NotImplementedError

class JsonSettingsStore(SettingsStoreInterface):
    def __init__(self, /, path: str = DEFAULT_SETTINGS_PATH) -> None:
        self.path = path

    def load(self) -> Settings:
        '''
        A missing file is created with defaults.  
        A file that exists but cannot be used raises `SettingsError`; 
        it is never overwritten with defaults.
        '''
        if not os.path.exists(self.path):
            settings = Settings()
            log.info(f'No settings at {self.path!r}, writing defaults.')
            self.save(settings)
            return settings
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                j = json.load(f)
            return Settings.model_validate(j)
        except (OSError, ValueError) as e:
            # ValueError covers both JSONDecodeError and pydantic's ValidationError.
            raise SettingsError(f'Cannot load settings from {self.path!r}: {e}') from e

    def save(self, settings: Settings) -> None:
        tmp = self.path + '.tmp'
        try:
            with open(tmp, 'w', encoding='utf-8') as f:
                json.dump(settings.model_dump(), f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise SettingsError(f'Cannot save settings to {self.path!r}: {e}') from e
        log.info(f'Settings saved to {self.path!r}.')

class MemorySettingsStore(SettingsStoreInterface):
    '''
    Keeps settings in memory only. Nothing survives the process.
    '''

    def __init__(self, initial: Settings | None = None) -> None:
        self.saved: Settings = initial if initial is not None else Settings()
        self.save_count = 0

    def load(self) -> Settings:
        return self.saved.model_copy()

    def save(self, settings: Settings) -> None:
        self.saved = settings.model_copy()
        self.save_count += 1
