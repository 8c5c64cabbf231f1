"""Tests for logging setup"""
import logging

from git_reporter.logging_config import LevelColorFormatter, get_logger, log_file_path, setup_logging


class TestSetupLogging:
    def test_default_level_is_warning(self):
        setup_logging()
        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1

    def test_verbose_level(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.INFO

    def test_debug_writes_log_file(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        setup_logging(debug=True)

        get_logger("git_reporter.core").debug("hello from core")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = log_file_path()
        assert log_file == temp_dir / ".git-reporter" / "git-reporter.log"
        assert "core - DEBUG - hello from core" in log_file.read_text()

    def test_console_output_goes_to_stderr(self, capsys):
        setup_logging(verbose=True)
        get_logger("git_reporter.services.git_service").info("opened")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "INFO [services.git_service] opened" in captured.err


class TestGetLogger:
    def test_strips_package_prefix(self):
        assert get_logger("git_reporter.services.git_service").name == "services.git_service"

    def test_other_names_unchanged(self):
        assert get_logger("git").name == "git"


class TestLevelColorFormatter:
    def _record(self, level):
        return logging.LogRecord("core", level, __file__, 1, "message", None, None)

    def test_plain_without_color(self):
        formatter = LevelColorFormatter(fmt="%(levelname)s %(message)s")
        assert formatter.format(self._record(logging.ERROR)) == "ERROR message"

    def test_colored_level_name(self):
        formatter = LevelColorFormatter(fmt="%(levelname)s %(message)s", use_color=True)
        record = self._record(logging.ERROR)

        assert formatter.format(record) == "\033[31mERROR\033[0m message"
        assert record.levelname == "ERROR"
