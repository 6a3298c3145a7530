# src/glass_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Task priority.

    Notes:
    - rank() is the sort key used by the "priority" view (high first).
    - unknown stored values load as LOW, the default for new tasks.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        if not raw:
            return cls.LOW
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.LOW


_PRIORITY_RANK = {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}


class StatusFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class SortMode(StrEnum):
    NONE = "none"
    PRIORITY = "priority"
    DATE = "date"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    priority: Priority = Priority.LOW
    due_date: date | None = None

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)

    def with_text(self, text: str) -> Task:
        return replace(self, text=text)


TaskCollection = tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Search/filter/sort settings the view pipeline is evaluated with."""

    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    sort: SortMode = SortMode.NONE

    def with_search(self, search: str) -> ViewConfig:
        return replace(self, search=search)

    def with_status(self, status: StatusFilter) -> ViewConfig:
        return replace(self, status=status)

    def with_sort(self, sort: SortMode) -> ViewConfig:
        return replace(self, sort=sort)


# ---- record codec (persisted layout) ----


def parse_iso_date(raw: Any) -> date | None:
    """Parse YYYY-MM-DD; empty or invalid input means "no due date"."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


def task_to_record(task: Task) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "priority": task.priority.value,
    }
    if task.due_date is not None:
        record["dueDate"] = task.due_date.isoformat()
    return record


def task_from_record(raw: Any) -> Task | None:
    """Build a Task from a stored record, or None if the record is unusable."""
    if not isinstance(raw, dict):
        return None
    tid = raw.get("id")
    # bool is an int subclass; a stored true/false is not an id.
    if not isinstance(tid, int) or isinstance(tid, bool):
        return None
    text = raw.get("text")
    if not isinstance(text, str):
        return None
    return Task(
        id=tid,
        text=text,
        completed=bool(raw.get("completed", False)),
        priority=Priority.from_raw(raw.get("priority")),
        due_date=parse_iso_date(raw.get("dueDate")),
    )
