"""Tests for structlog based logging setup."""

import logging

from design_patterns.config.schemas import LoggingConfig
from design_patterns.infrastructure.logging import get_logger, is_configured, setup_logging


class TestLogging:
    def teardown_method(self):
        setup_logging()

    def test_get_logger_configures_on_first_use(self):
        get_logger("design_patterns.tests")

        assert is_configured() is True

    def test_level_applied_to_root_logger(self):
        setup_logging(LoggingConfig(level="DEBUG"))

        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self):
        root = logging.getLogger()
        setup_logging()
        count = len(root.handlers)

        setup_logging()
        setup_logging()

        assert len(root.handlers) == count

    def test_logs_go_to_stderr_not_stdout(self, capsys):
        setup_logging(LoggingConfig(level="INFO"))

        get_logger("design_patterns.tests").info("diagnostic message", demo="observer")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "diagnostic message" in captured.err

    def test_file_destination_creates_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "patterns.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))

        get_logger("design_patterns.tests").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
