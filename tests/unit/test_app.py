"""Tests for create_registry wiring."""

import logging

from buttonbox.app import create_registry
from buttonbox.models import DashboardRegistry, GaugePosition
from buttonbox.utils.logger import PACKAGE_LOGGER


def _close_dashboard_logs():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_buttonbox", False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)


class TestCreateRegistry:
    """Registry built over an INI settings file."""

    def teardown_method(self):
        _close_dashboard_logs()

    def test_settings_persist_in_ini_file(self, tmp_path, catalog_file):
        ini = tmp_path / "dashboard.ini"
        registry = create_registry(ini, catalog_file, tmp_path / "logs", console_log=False)

        assert isinstance(registry, DashboardRegistry)
        registry.add_variable_gauge("boost", GaugePosition.TOP)
        registry.update_button(3, label="Lights")

        reopened = create_registry(ini, catalog_file, tmp_path / "logs", console_log=False)
        assert reopened.find_gauge(1001).position == GaugePosition.TOP
        assert reopened.button_label(3) == "Lights"

    def test_missing_catalog_is_logged(self, tmp_path):
        registry = create_registry(tmp_path / "dashboard.ini", tmp_path / "missing.json",
                                   tmp_path / "logs", console_log=False)

        assert registry.search_variables("boost") == []
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        fallbacks = (tmp_path / "logs" / "dashboard_fallbacks.log").read_text(encoding="utf-8")
        assert "[catalog] Failed to load variable catalog" in fallbacks
