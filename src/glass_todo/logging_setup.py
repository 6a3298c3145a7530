# src/glass_todo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows glass_todo records; anything else (py.warnings included) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("glass_todo."):
            return True
        return record.levelno >= logging.ERROR


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_handlers(
    log_dir: str | Path,
    *,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> list[logging.Handler]:
    """Filtered stderr handler plus a full log file at <log_dir>/glass_todo.log."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_ConsoleNoiseFilter())

    log_file = logging.FileHandler(str(log_dir / "glass_todo.log"), encoding="utf-8")
    log_file.setLevel(file_level)

    handlers: list[logging.Handler] = [console, log_file]
    for handler in handlers:
        handler.setFormatter(fmt)
    return handlers


def setup_logging(
    *,
    log_dir: str | Path = ".local/glass_todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Install the handlers on the root logger, replacing any already there.

    Call this once at startup, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in build_handlers(log_dir, console_level=console_level, file_level=file_level):
        root.addHandler(h)

    # warnings.warn(...) arrives as 'py.warnings'.
    logging.captureWarnings(True)
