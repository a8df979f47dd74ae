"""
Logging configuration and setup.

Console (and optional file) output for the rollcall logger tree. discord.py's
own default handler is disabled at startup, so its "discord" logger is wired
to the same handlers here at WARNING and above: gateway and login problems
still reach the operator console without the per-event debug chatter.
"""

import logging
import sys
from pathlib import Path

from rollcall.config.settings import Settings

LOGGER_NAME = "rollcall"
DISCORD_LOGGER_NAME = "discord"


class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # The record is shared with the file handler; keep it uncoloured there
            record.levelname = levelname


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    level = getattr(logging, settings.log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handlers: list[logging.Handler] = [console_handler]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    return handlers


def setup_logging(settings: Settings) -> None:
    """
    Configure logging based on settings.

    Args:
        settings: Application settings containing log configuration
    """
    handlers = _build_handlers(settings)

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(getattr(logging, settings.log_level))
    app_logger.handlers.clear()
    for handler in handlers:
        app_logger.addHandler(handler)
    app_logger.propagate = False

    discord_logger = logging.getLogger(DISCORD_LOGGER_NAME)
    discord_logger.setLevel(max(logging.WARNING, getattr(logging, settings.log_level)))
    discord_logger.handlers.clear()
    for handler in handlers:
        discord_logger.addHandler(handler)
    discord_logger.propagate = False

    app_logger.info(f"Logging initialized - Level: {settings.log_level}")
    if settings.log_file:
        app_logger.info(f"Logging to file: {settings.log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger under the "rollcall" tree
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
