"""
Logging for the ButtonBox dashboard

Handlers go on the "buttonbox" package logger so a host application keeps
its own root configuration. Every record is tagged with the component that
emitted it (catalog, store, registry, ...).
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "buttonbox"
DASHBOARD_LOG = "dashboard.log"
FALLBACK_LOG = "dashboard_fallbacks.log"

_FORMAT = "%(asctime)s - %(component)s - %(levelname)s - %(message)s"


class ComponentFilter(logging.Filter):
    """Sets record.component to the module name, e.g. "config_store"."""

    def filter(self, record):
        record.component = record.name.rsplit(".", 1)[-1]
        return True


def setup_logger(log_dir: Optional[Path] = None, level=logging.INFO,
                 console: bool = True, max_size_mb: int = 2) -> Path:
    """
    Attach dashboard log handlers to the package logger.

    Calling it again replaces the handlers it added before.

    Args:
        log_dir: Directory for log files (default: ~/.buttonbox/logs)
        level: Level of the package logger and the main log
        console: Also echo to stderr
        max_size_mb: Rotation size of each log file

    Returns:
        Path of the main log file
    """
    if log_dir is None:
        log_dir = Path.home() / ".buttonbox" / "logs"
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_buttonbox", False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT)
    log_file = log_dir / DASHBOARD_LOG

    main_handler = RotatingFileHandler(
        log_file, maxBytes=max_size_mb * 1024 * 1024, backupCount=3, encoding='utf-8'
    )
    main_handler.setLevel(level)

    # Defaults applied over corrupt settings or a missing catalog
    fallback_handler = RotatingFileHandler(
        log_dir / FALLBACK_LOG, maxBytes=max_size_mb * 1024 * 1024, backupCount=1, encoding='utf-8'
    )
    fallback_handler.setLevel(logging.WARNING)

    handlers = [main_handler, fallback_handler]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ComponentFilter())
        handler._buttonbox = True
        package_logger.addHandler(handler)

    logging.getLogger(__name__).info(f"Dashboard log: {log_file}")
    return log_file
