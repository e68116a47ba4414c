"""
QSettings settings backend

Persists into the platform preference store (registry, plist, INI) through
PyQt6 QSettings, or into an explicit INI file.
"""

from pathlib import Path
from typing import Any, Optional, Union
import logging

from PyQt6.QtCore import QSettings

from ..constants import SETTINGS_ORGANIZATION, SETTINGS_APPLICATION
from .base import SettingsBackend, StorageError

logger = logging.getLogger(__name__)


class QSettingsBackend(SettingsBackend):
    """
    QSettings-backed storage.

    Usage:
        backend = QSettingsBackend()                           # native store
        backend = QSettingsBackend(ini_path="dashboard.ini")   # explicit file
    """

    def __init__(self, organization: str = SETTINGS_ORGANIZATION,
                 application: str = SETTINGS_APPLICATION,
                 ini_path: Optional[Union[str, Path]] = None):
        if ini_path is not None:
            self._settings = QSettings(str(ini_path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)
        logger.debug(f"Settings stored in {self._settings.fileName()}")

    @property
    def file_name(self) -> str:
        """Location of the underlying store."""
        return self._settings.fileName()

    def get_value(self, key: str, default: Any = None) -> Any:
        if not self._settings.contains(key):
            return default
        return self._settings.value(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)
        self.sync()

    def contains(self, key: str) -> bool:
        return self._settings.contains(key)

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self.sync()

    def sync(self) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status == QSettings.Status.AccessError:
            raise StorageError(f"Cannot write settings to {self._settings.fileName()}")
