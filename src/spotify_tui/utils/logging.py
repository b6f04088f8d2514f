"""Colored console formatter and per-command log context."""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

# Name of the command being dispatched in the current task, "-" outside dispatch.
command_context: ContextVar[str] = ContextVar("command_context", default="-")


class CommandContextFilter(logging.Filter):
    """Stamps every record with ``record.command`` so formats can include it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = command_context.get()
        return True


class ColoredFormatter(logging.Formatter):
    """Logging formatter that applies ANSI color codes to the levelname field.

    Colors are disabled when the ``NO_COLOR`` environment variable is set or
    when the output stream is not a TTY (e.g. redirected to a file).
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",     # cyan
        logging.INFO: "\033[32m",      # green
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, *args, stream=None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "command"):
            record.command = command_context.get()
        if self._use_color():
            color = self.COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)
