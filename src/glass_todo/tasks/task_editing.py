# src/glass_todo/tasks/task_editing.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EditSession:
    task_id: int
    draft: str


class TaskEditor:
    """
    Non-blocking edit flow: begin_edit -> commit_edit | cancel_edit.

    At most one session is open. Beginning a new edit replaces the open one.
    Commit/cancel for an id other than the open session's are ignored.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._session: EditSession | None = None

    @property
    def session(self) -> EditSession | None:
        return self._session

    def begin_edit(self, task_id: int) -> str | None:
        task = self._store.get(task_id)
        if task is None:
            return None
        self._session = EditSession(task_id=task_id, draft=task.text)
        logger.debug("Edit started id=%s", task_id)
        return task.text

    def commit_edit(self, task_id: int, text: str) -> bool:
        if not self._matches(task_id):
            return False
        self._session = None
        # Empty text closes the session; the store rejects it unchanged.
        self._store.edit_task(task_id, text)
        logger.debug("Edit committed id=%s", task_id)
        return True

    def cancel_edit(self, task_id: int) -> bool:
        if not self._matches(task_id):
            return False
        self._session = None
        logger.debug("Edit cancelled id=%s", task_id)
        return True

    def _matches(self, task_id: int) -> bool:
        return self._session is not None and self._session.task_id == task_id
