"""Tests for logging service configuration."""

import logging
from pathlib import Path
from unittest.mock import patch

from debt_tracker.config import reset_settings
from debt_tracker.services.logging import resolve_log_level, setup_server_logging


class TestServerLogging:
    """Test server logging configuration."""

    def setup_method(self):
        """Save original handlers before each test."""
        self.root_logger = logging.getLogger()
        self.original_handlers = self.root_logger.handlers.copy()
        self.original_level = self.root_logger.level
        reset_settings()

    def teardown_method(self):
        """Restore original handlers after each test."""
        for handler in self.root_logger.handlers[:]:
            handler.close()
            self.root_logger.removeHandler(handler)
        for handler in self.original_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.original_level)
        reset_settings()

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        log_file = tmp_path / "nested" / "server.log"

        setup_server_logging(str(log_file))

        assert log_file.parent.exists()

    def test_installs_stdout_and_file_handlers(self, tmp_path: Path) -> None:
        setup_server_logging(str(tmp_path / "server.log"))

        handler_types = sorted(type(h).__name__ for h in self.root_logger.handlers)
        assert handler_types == ["FileHandler", "StreamHandler"]

    def test_level_from_environment(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}, clear=False):
            reset_settings()
            setup_server_logging(str(tmp_path / "server.log"))

            assert self.root_logger.level == logging.DEBUG
            assert all(h.level == logging.DEBUG for h in self.root_logger.handlers)

    def test_writes_formatted_messages_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "server.log"
        setup_server_logging(str(log_file))

        logging.getLogger("debt_tracker.test").warning("Payment recorded")

        contents = log_file.read_text()
        assert "debt_tracker.test - WARNING - Payment recorded" in contents
        assert contents.startswith("[")

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert resolve_log_level("VERBOSE") == logging.INFO
        assert resolve_log_level("warning") == logging.WARNING
