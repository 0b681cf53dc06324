"""
Logging setup.

Validation warnings are logged, so the console handler is what the user sees
when a phone number or birth date is rejected. Those warnings always reach
the console; the configured level only filters everything else.

File: phonebook/logs.py
Created: 2026-10-19
Last Modified: 2026-10-20
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import PhonebookConfig

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
USER_WARNING_LOGGER = "phonebook.validation"


class ConsoleLevelFilter(logging.Filter):
    """Pass records at or above `level`, plus validation warnings."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= self.level:
            return True
        return record.levelno >= logging.WARNING and (
            record.name == USER_WARNING_LOGGER
            or record.name.startswith(USER_WARNING_LOGGER + ".")
        )


def setup_logging(config: PhonebookConfig, console: Optional[Console] = None) -> None:
    """
    Configure the root logger for an interactive session.

    Args:
        config: Session config (log level and optional log file)
        console: Console the rich handler writes to (defaults to a new one)
    """
    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    console_handler.addFilter(ConsoleLevelFilter(config.log_level_number))
    handlers: list[logging.Handler] = [console_handler]

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    if config.log_file is not None:
        root_level = logging.DEBUG
    else:
        root_level = min(config.log_level_number, logging.WARNING)

    logging.basicConfig(
        level=root_level,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )


__all__ = [
    "ConsoleLevelFilter",
    "setup_logging",
]
