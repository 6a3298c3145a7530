# src/glass_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/glass_todo")
    # The console stays quiet below WARNING so log lines don't interleave with the list.
    setup_logging(log_dir=log_dir, console_level=max(file_level, logging.WARNING), file_level=file_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "glass-todo"))

    try:
        run(settings)
    finally:
        logger.info("Bye.")


def run(
    settings,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Build state and run the REPL; celebration output shares the console writer."""
    state = create_initial_state(settings=settings, emit=write)
    run_console_loop(state, read_line=read_line, write=write)


if __name__ == "__main__":
    main()
