"""
Logging setup for frontend-components.

stdout carries the MCP stdio channel, so console logging always goes to
stderr.
"""

import logging
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from frontend_components.config.schema import LoggingConfig

LOGGER_NAME = "frontend_components"

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        config: Logging configuration. Defaults to INFO on stderr only.

    Returns:
        The package logger.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(config.level)
    logger.addHandler(console_handler)

    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(config.level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
