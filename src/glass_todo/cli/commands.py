# src/glass_todo/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable, Iterable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Priority, SortMode, StatusFilter, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

PRIORITY_MARKS = {"!low": Priority.LOW, "!medium": Priority.MEDIUM, "!high": Priority.HIGH}


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /toggle, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    details = [task.priority.value]
    if task.due_date is not None:
        details.append(f"due {task.due_date.isoformat()}")
    return f"[{mark}] {task.id}. {task.text} ({', '.join(details)})"


def render_task_list(tasks: Iterable[Task]) -> str:
    lines = [format_task(t) for t in tasks]
    if not lines:
        return "(no tasks)"
    return "\n".join(lines)


def _describe_view(state: AppState) -> str:
    view = state.view
    search = f'"{view.search}"' if view.search else "-"
    return f"search={search} filter={view.status.value} sort={view.sort.value}"


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    shown = task_api.displayed_tasks(state)
    total = len(state.store.tasks)
    header = f"Tasks ({len(shown)} of {total}; {_describe_view(state)}):"
    return f"{header}\n{render_task_list(shown)}"


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.store.tasks
    done = sum(1 for t in tasks if t.completed)
    session = state.editor.session
    editing = f"#{session.task_id}" if session is not None else "none"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} total, {done} completed, {len(tasks) - done} pending\n"
        f"  View: {_describe_view(state)}\n"
        f"  Editing: {editing}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add [!low|!medium|!high] [@YYYY-MM-DD] text...

    Markers are only recognised before the text starts.
    """
    priority = Priority.LOW
    due_date = None
    rest = list(args)
    while rest:
        token = rest[0]
        if token.lower() in PRIORITY_MARKS:
            priority = PRIORITY_MARKS[token.lower()]
        elif token.startswith("@") and len(token) > 1:
            try:
                due_date = task_api.parse_due_date(token[1:])
            except ValueError as e:
                return str(e)
        else:
            break
        rest.pop(0)

    task_id = task_api.create(state, " ".join(rest), priority, due_date)
    if task_id is None:
        return "Nothing added: task text is empty."
    return f"Added task {task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    if state.store.get(task_id) is None:
        return f"Task {task_id} not found."
    task_api.toggle(state, task_id)
    task = state.store.get(task_id)
    status = "completed" if task is not None and task.completed else "pending"
    return f"Task {task_id} is now {status}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id>        -> open an edit session showing the current text
    /edit <id> text   -> replace the text directly
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> [new text]"

    if len(args) > 1:
        before = state.store.get(task_id)
        if before is None:
            return f"Task {task_id} not found."
        task_api.edit(state, task_id, " ".join(args[1:]))
        if state.store.get(task_id) == before:
            return "Nothing changed: task text is empty or identical."
        return f"Task {task_id} updated."

    draft = state.editor.begin_edit(task_id)
    if draft is None:
        return f"Task {task_id} not found."
    return f"Editing task {task_id}: {draft}\nUse /save <new text> or /cancel."


def cmd_save(state: AppState, args: list[str]) -> str:
    session = state.editor.session
    if session is None:
        return "No edit in progress. Use /edit <id> first."
    text = " ".join(args)
    state.editor.commit_edit(session.task_id, text)
    if not text.strip():
        return f"Edit of task {session.task_id} closed without changes (empty text)."
    return f"Task {session.task_id} updated."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    session = state.editor.session
    if session is None:
        return "No edit in progress."
    state.editor.cancel_edit(session.task_id)
    return f"Edit of task {session.task_id} cancelled."


def cmd_remove(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if state.store.get(task_id) is None:
        return f"Task {task_id} not found."
    task_api.remove(state, task_id)
    return f"Task {task_id} removed."


def cmd_search(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    task_api.set_search(state, text)
    return f'Search set to "{text}".' if text else "Search cleared."


def cmd_filter(state: AppState, args: list[str]) -> str:
    modes = " | ".join(m.value for m in StatusFilter)
    if not args:
        return f"Filter is {state.view.status.value}. Use /filter {modes}."
    try:
        task_api.set_filter(state, args[0])
    except ValueError:
        return f"Usage: /filter {modes}."
    return f"Filter set to {state.view.status.value}."


def cmd_sort(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    modes = " | ".join(m.value for m in SortMode)
    if not args:
        return f"Sort is {state.view.sort.value}. Use /sort {modes}."
    try:
        task_api.set_sort(state, args[0])
    except ValueError:
        return f"Usage: /sort {modes}."
    if emit and state.view.sort == SortMode.DATE:
        with contextlib.suppress(Exception):
            emit("Tasks without a due date are listed first.")
    return f"Sort set to {state.view.sort.value}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks with the current search/filter/sort.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task totals and view settings.")
registry.register(
    "add", cmd_add, help_text="Add a task: /add [!low|!medium|!high] [@YYYY-MM-DD] text."
)
registry.register("toggle", cmd_toggle, help_text="Mark a task done/undone: /toggle <id>.", aliases=["done"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> [new text].")
registry.register("save", cmd_save, help_text="Save the open edit: /save <new text>.")
registry.register("cancel", cmd_cancel, help_text="Cancel the open edit.")
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("search", cmd_search, help_text="Search task text: /search [text] (empty clears).")
registry.register("filter", cmd_filter, help_text="Filter: /filter all | completed | pending.")
registry.register("sort", cmd_sort, help_text="Sort: /sort none | priority | date.")
