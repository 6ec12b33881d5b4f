"""Logging utilities."""

from .utils import (
    ConsoleFormatter,
    configure_console_logging,
    setup_file_logger,
)

__all__ = [
    "ConsoleFormatter",
    "configure_console_logging",
    "setup_file_logger",
]
