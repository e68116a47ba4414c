"""
Storage Package

Key-value backends for the dashboard configuration store.
"""

from .base import SettingsBackend, StorageError
from .memory import MemoryBackend
from .qsettings_backend import QSettingsBackend

__all__ = [
    'SettingsBackend',
    'StorageError',
    'MemoryBackend',
    'QSettingsBackend',
]
