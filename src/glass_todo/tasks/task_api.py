# src/glass_todo/tasks/task_api.py

"""
Intent surface: one function per user intent, operating on AppState.

Connectors call these instead of touching the store or the view directly.
"""

from __future__ import annotations

import logging
from datetime import date

from ..core.state import AppState
from .task_models import Priority, SortMode, StatusFilter, TaskCollection, parse_iso_date
from .task_view import apply_view

logger = logging.getLogger(__name__)


def parse_due_date(raw: str | None) -> date | None:
    """
    Parse a YYYY-MM-DD due date.

    Empty input means "no due date". Anything else that is not a valid date
    raises ValueError.
    """
    if raw is None or not raw.strip():
        return None
    parsed = parse_iso_date(raw)
    if parsed is None:
        raise ValueError(f"Invalid due date: {raw!r} (expected YYYY-MM-DD)")
    return parsed


def create(
    state: AppState,
    text: str,
    priority: Priority | str = Priority.LOW,
    due_date: date | None = None,
) -> int | None:
    return state.store.add_task(text, Priority(priority), due_date)


def toggle(state: AppState, task_id: int) -> None:
    state.store.toggle_task(task_id)


def edit(state: AppState, task_id: int, text: str) -> None:
    state.store.edit_task(task_id, text)


def remove(state: AppState, task_id: int) -> None:
    # Drop an open edit session for a task that no longer exists.
    session = state.editor.session
    if session is not None and session.task_id == task_id:
        state.editor.cancel_edit(task_id)
    state.store.remove_task(task_id)


def set_search(state: AppState, text: str) -> None:
    state.view = state.view.with_search(text or "")


def set_filter(state: AppState, mode: StatusFilter | str) -> None:
    state.view = state.view.with_status(StatusFilter(str(mode).strip().lower()))
    logger.debug("View filter=%s", state.view.status.value)


def set_sort(state: AppState, mode: SortMode | str) -> None:
    state.view = state.view.with_sort(SortMode(str(mode).strip().lower()))
    logger.debug("View sort=%s", state.view.sort.value)


def displayed_tasks(state: AppState) -> TaskCollection:
    return apply_view(state.store.tasks, state.view)
