"""
Settings Backend Interface

Abstract base class for the key-value stores the configuration store
persists into. Backends only move primitives and strings; typed reads
coerce the text representation some stores (INI files) hand back.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for storage backend errors."""
    pass


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class SettingsBackend(ABC):
    """
    Abstract base class for settings storage.

    All backends (QSettings, in-memory) must implement this interface.
    """

    @abstractmethod
    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Read raw value.

        Args:
            key: Setting key
            default: Returned when the key is absent

        Returns:
            Stored value or default
        """
        pass

    @abstractmethod
    def set_value(self, key: str, value: Any) -> None:
        """
        Write value, replacing any previous value.

        Args:
            key: Setting key
            value: int, bool, str or None
        """
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check if key is present."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key, no-op if absent."""
        pass

    def sync(self) -> None:
        """Flush pending writes to durable storage."""
        pass

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def get_int(self, key: str, default: int) -> int:
        """Read integer, falling back to default on missing or invalid value."""
        value = self.get_value(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            logger.warning(f"Setting '{key}' is not an integer ({value!r}), using {default}")
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        """Read boolean, falling back to default on missing or invalid value."""
        value = self.get_value(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        logger.warning(f"Setting '{key}' is not a boolean ({value!r}), using {default}")
        return default

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Read string, None values map to default."""
        value = self.get_value(key)
        if value is None:
            return default
        return value if isinstance(value, str) else str(value)
