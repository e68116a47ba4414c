"""
Utils Package

Logging setup and centralized error handling for the ButtonBox dashboard.
"""

from .error_handler import (
    ErrorHandler,
    ErrorInfo,
    ErrorSeverity,
    ErrorCategory,
)
from .logger import setup_logger

__all__ = [
    'ErrorHandler',
    'ErrorInfo',
    'ErrorSeverity',
    'ErrorCategory',
    'setup_logger',
]
