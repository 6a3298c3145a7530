# src/glass_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_task_list
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import TaskCollection

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Slash-command REPL.

    The task list is re-rendered after any command that changed the task
    collection (store subscription) or the view settings.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "glass-todo"))
    logger.info("Console connector started (tasks=%d).", len(state.store.tasks))

    changed = {"tasks": False}

    def on_snapshot(_tasks: TaskCollection) -> None:
        changed["tasks"] = True

    unsubscribe = state.store.subscribe(on_snapshot)

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    write(f"[{_ts_local()}] [{app_name}] Use /help for commands. Use /exit to quit.\n")
    write(render_task_list(task_api.displayed_tasks(state)))

    try:
        while True:
            try:
                user_input = read_line("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                # Bare text is shorthand for /add.
                user_input = f"/add {user_input}"

            view_before = state.view
            changed["tasks"] = False
            try:
                cmd_response = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            if cmd_response is not None:
                emit(cmd_response)

            if changed["tasks"] or state.view != view_before:
                write(render_task_list(task_api.displayed_tasks(state)))
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
