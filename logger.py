"""Logging setup for tflap.

curses owns the terminal while a round is on screen, so records only go to a file.
"""

from __future__ import annotations

import logging
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format, readable with tail -f."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("tflap.", "")
        msg = record.getMessage()
        line = f"{ts} [{record.levelname[0]}] {name}: {msg}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "warning", log_file: str | None = None) -> None:
    """Configure the tflap root logger."""
    root = logging.getLogger("tflap")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.propagate = False

    if log_file:
        try:
            handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            # Unwritable log location: run without a log
            handler = logging.NullHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(HumanFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the tflap namespace."""
    return logging.getLogger(f"tflap.{name}")
