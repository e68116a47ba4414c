"""
In-memory settings backend

Process-lifetime store for tests and headless tooling.
"""

from typing import Any, Dict, Optional

from .base import SettingsBackend


class MemoryBackend(SettingsBackend):
    """Dictionary-backed settings."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get_value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self):
        """Stored keys, sorted."""
        return sorted(self._values)
