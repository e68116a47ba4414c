"""
Failure log for the dashboard registry

The catalog and the store never raise on a bad catalog file, corrupt
settings or a failed import. They report what they absorbed here, and the
UI either listens to the signals or reads the history to tell the user
that defaults were applied.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import List, Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    WARNING = auto()    # Defaults or a fallback were applied
    ERROR = auto()      # The requested operation did not happen


class ErrorCategory(Enum):
    CATALOG = "catalog"         # variables.json loading
    STORAGE = "storage"         # Persisted settings
    CONFIG = "config"           # Settings file import
    VALIDATION = "validation"   # Rejected input
    FILE = "file"               # Settings file export


@dataclass
class ErrorInfo:
    """One absorbed failure."""
    message: str
    category: ErrorCategory
    severity: ErrorSeverity = ErrorSeverity.WARNING
    exception: Optional[Exception] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def source(self) -> str:
        """Exception class name, empty for plain warnings"""
        return type(self.exception).__name__ if self.exception else ""

    def __str__(self):
        return f"[{self.severity.name}] {self.category.value}: {self.message}"


class ErrorHandler(QObject):
    """
    Collects failures reported by VariableCatalog and ConfigStore.

    Signals:
        error_occurred(ErrorInfo): an exception was absorbed
        warning_occurred(str): input was dropped or adjusted
    """

    error_occurred = pyqtSignal(object)
    warning_occurred = pyqtSignal(str)

    def __init__(self, parent: QObject = None, max_history: int = 100):
        super().__init__(parent)
        self._history = deque(maxlen=max_history)

    def handle_exception(self, exception: Exception, message: str,
                         category: ErrorCategory,
                         severity: ErrorSeverity = ErrorSeverity.ERROR):
        """Record an exception the caller recovered from."""
        error = ErrorInfo(message, category, severity, exception)
        self._history.append(error)

        log = logger.error if severity == ErrorSeverity.ERROR else logger.warning
        log(f"[{category.value}] {message}", exc_info=exception)
        self.error_occurred.emit(error)

    def warning(self, message: str, category: ErrorCategory):
        """Record dropped or adjusted input."""
        self._history.append(ErrorInfo(message, category))
        logger.warning(f"[{category.value}] {message}")
        self.warning_occurred.emit(message)

    def get_history(self, category: Optional[ErrorCategory] = None) -> List[ErrorInfo]:
        """Recorded failures, oldest first, optionally for one category."""
        if category is None:
            return list(self._history)
        return [e for e in self._history if e.category == category]
