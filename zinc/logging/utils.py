# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Logging helpers (console progress lines, rotating log files)."""

from __future__ import annotations

import logging
import sys

from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

LOGGER_NAME = "zinc"

_RESET = "\x1b[0m"
_LEVEL_TAGS = {
    logging.DEBUG: ("[VERBOSE]", "\x1b[35m"),
    logging.WARNING: ("[WARNING]", "\x1b[33m"),
    logging.ERROR: ("[ERROR]", "\x1b[31m"),
    logging.CRITICAL: ("[ERROR]", "\x1b[31m"),
}


class ConsoleFormatter(logging.Formatter):
    """``| message`` for progress lines, tagged lines for everything else."""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return f"| {message}"
        tag, ansi = _LEVEL_TAGS.get(record.levelno, ("[LOG]", "\x1b[32m"))
        if self.color:
            tag = f"{ansi}{tag}{_RESET}"
        return f"{tag} {message}"


def configure_console_logging(
    verbose: bool,
    *,
    color: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a stdout handler to the ``zinc`` logger (idempotent).

    Verbose runs show progress and debug lines; otherwise only warnings and
    errors reach the console. Colors are dropped when the stream is not a
    TTY.
    """

    stream = stream or sys.stdout
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        if getattr(handler, "_zinc_console", False):
            logger.removeHandler(handler)

    isatty = getattr(stream, "isatty", None)
    use_color = color and bool(isatty and isatty())
    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(ConsoleFormatter(color=use_color))
    handler._zinc_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def setup_file_logger(
    log_file: Path, name: str = LOGGER_NAME
) -> logging.Logger:
    """Configure a rotating file logger (idempotent per file)."""

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    # Never raise a level the console handler already lowered.
    logger.setLevel(min(logger.getEffectiveLevel(), logging.INFO))
    marker = str(log_file)
    if not any(
        isinstance(handler, RotatingFileHandler)
        and getattr(handler, "_zinc_tag", None) == marker
        for handler in logger.handlers
    ):
        handler = RotatingFileHandler(
            log_file, maxBytes=2_000_000, backupCount=3
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        )
        handler._zinc_tag = marker  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
