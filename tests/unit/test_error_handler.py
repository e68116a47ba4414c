"""Tests for ErrorHandler and the dashboard log setup."""

import logging

from buttonbox.utils import ErrorCategory, ErrorHandler, ErrorSeverity, setup_logger
from buttonbox.utils.logger import PACKAGE_LOGGER


class TestErrorHandler:
    """Tests for history and signals."""

    def test_handle_exception(self):
        handler = ErrorHandler()
        emitted = []
        handler.error_occurred.connect(emitted.append)

        try:
            raise ValueError("bad value")
        except ValueError as e:
            handler.handle_exception(e, "Stored gauges are corrupt", ErrorCategory.STORAGE)

        error = handler.get_history()[0]
        assert emitted == [error]
        assert error.message == "Stored gauges are corrupt"
        assert error.severity == ErrorSeverity.ERROR
        assert error.source == "ValueError"

    def test_warning(self):
        handler = ErrorHandler()
        warnings = []
        handler.warning_occurred.connect(warnings.append)
        handler.warning("Dropping button 16", ErrorCategory.VALIDATION)

        assert warnings == ["Dropping button 16"]
        error = handler.get_history()[0]
        assert error.severity == ErrorSeverity.WARNING
        assert error.source == ""

    def test_history_filtered_by_category(self):
        handler = ErrorHandler()
        handler.warning("catalog missing", ErrorCategory.CATALOG)
        handler.handle_exception(OSError("read-only"), "save failed", ErrorCategory.STORAGE,
                                 ErrorSeverity.WARNING)

        assert len(handler.get_history()) == 2
        assert [e.message for e in handler.get_history(ErrorCategory.STORAGE)] == ["save failed"]
        assert handler.get_history(ErrorCategory.FILE) == []

    def test_history_is_bounded(self):
        handler = ErrorHandler(max_history=3)
        for i in range(5):
            handler.warning(f"warning {i}", ErrorCategory.VALIDATION)
        assert [e.message for e in handler.get_history()] == ["warning 2", "warning 3", "warning 4"]


class TestSetupLogger:
    """Tests for setup_logger."""

    def _dashboard_handlers(self):
        return [h for h in logging.getLogger(PACKAGE_LOGGER).handlers
                if getattr(h, "_buttonbox", False)]

    def teardown_method(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self._dashboard_handlers():
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)

    def test_component_tagged_logs(self, tmp_path):
        log_file = setup_logger(tmp_path, level=logging.DEBUG, console=False)

        logging.getLogger("buttonbox.models.config_store").warning("Stored gauges are corrupt")
        logging.getLogger("buttonbox.models.registry").info("Variable not found: x")
        for handler in self._dashboard_handlers():
            handler.flush()

        assert log_file == tmp_path / "dashboard.log"
        text = log_file.read_text(encoding="utf-8")
        assert "config_store - WARNING - Stored gauges are corrupt" in text
        assert "registry - INFO - Variable not found: x" in text

        fallbacks = (tmp_path / "dashboard_fallbacks.log").read_text(encoding="utf-8")
        assert "Stored gauges are corrupt" in fallbacks
        assert "Variable not found" not in fallbacks

    def test_leaves_root_logger_alone(self, tmp_path):
        root_handlers = list(logging.getLogger().handlers)
        setup_logger(tmp_path, console=False)
        assert logging.getLogger().handlers == root_handlers

    def test_repeat_setup_replaces_handlers(self, tmp_path):
        setup_logger(tmp_path, console=True)
        setup_logger(tmp_path, console=False)
        assert len(self._dashboard_handlers()) == 2
