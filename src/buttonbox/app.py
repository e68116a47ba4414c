"""
Dashboard registry wiring

Builds the catalog, the store and the registry the UI talks to, sharing one
error handler, after the dashboard logs are set up.

Usage:
    registry = create_registry()
    registry.add_variable_gauge("boostboostOutput")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_CATALOG_PATH
from .models import ConfigStore, DashboardRegistry, VariableCatalog
from .storage import QSettingsBackend
from .utils import ErrorHandler, setup_logger

logger = logging.getLogger(__name__)


def create_registry(settings_path: Optional[Union[str, Path]] = None,
                    catalog_path: Union[str, Path] = DEFAULT_CATALOG_PATH,
                    log_dir: Optional[Path] = None,
                    console_log: bool = True) -> DashboardRegistry:
    """
    Create a registry backed by QSettings.

    settings_path selects an INI file; without it the platform preference
    store is used.
    """
    setup_logger(log_dir, console=console_log)

    errors = ErrorHandler()
    backend = QSettingsBackend(ini_path=settings_path)
    registry = DashboardRegistry(
        VariableCatalog(catalog_path, error_handler=errors),
        ConfigStore(backend, error_handler=errors),
    )
    logger.info(f"Dashboard settings: {backend.file_name}")
    return registry
