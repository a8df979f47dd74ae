"""Tests for logging setup: logger naming, colour handling, discord logger wiring."""

import logging

import pytest

from rollcall.config.logging import ColoredFormatter, get_logger, setup_logging
from rollcall.config.settings import Settings


@pytest.fixture
def restore_loggers():
    yield
    for name in ("rollcall", "discord"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


class TestGetLogger:
    def test_module_name_is_not_double_prefixed(self):
        assert get_logger("rollcall.bot.client").name == "rollcall.bot.client"

    def test_bare_name_is_prefixed(self):
        assert get_logger("cli").name == "rollcall.cli"


class TestColoredFormatter:
    def test_record_levelname_is_restored(self):
        record = logging.LogRecord("rollcall", logging.WARNING, __file__, 1, "careful", None, None)
        output = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert "\033[33mWARNING\033[0m" in output
        assert record.levelname == "WARNING"


class TestSetupLogging:
    def test_discord_logger_shares_handlers_at_warning(self, restore_loggers):
        setup_logging(Settings(_env_file=None, log_level="DEBUG"))

        app_logger = logging.getLogger("rollcall")
        discord_logger = logging.getLogger("discord")
        assert app_logger.level == logging.DEBUG
        assert discord_logger.level == logging.WARNING
        assert discord_logger.handlers == app_logger.handlers
        assert app_logger.propagate is False

    def test_file_handler_added_when_configured(self, tmp_path, restore_loggers):
        log_file = tmp_path / "logs" / "rollcall.log"
        setup_logging(Settings(_env_file=None, log_file=log_file))

        get_logger("test").info("hello file")

        assert log_file.exists()
        assert "hello file" in log_file.read_text()
