# src/glass_todo/tasks/task_view.py

"""
View pipeline: the list of tasks to display.

Stages always run in this order: search, then filter, then sort.
Every function is pure and returns a new tuple; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import SortMode, StatusFilter, Task, TaskCollection, ViewConfig

# An absent due date sorts as the epoch.
UNDATED_SORT_KEY = date(1970, 1, 1)


def search_tasks(tasks: Iterable[Task], search: str) -> TaskCollection:
    needle = (search or "").lower()
    if not needle:
        return tuple(tasks)
    return tuple(t for t in tasks if needle in t.text.lower())


def filter_tasks(tasks: Iterable[Task], status: StatusFilter) -> TaskCollection:
    if status == StatusFilter.COMPLETED:
        return tuple(t for t in tasks if t.completed)
    if status == StatusFilter.PENDING:
        return tuple(t for t in tasks if not t.completed)
    return tuple(tasks)


def sort_tasks(tasks: Iterable[Task], mode: SortMode) -> TaskCollection:
    # sorted() is stable, so ties keep their filtered order.
    if mode == SortMode.PRIORITY:
        return tuple(sorted(tasks, key=lambda t: t.priority.rank()))
    if mode == SortMode.DATE:
        return tuple(sorted(tasks, key=lambda t: t.due_date or UNDATED_SORT_KEY))
    return tuple(tasks)


def apply_view(tasks: Iterable[Task], view: ViewConfig) -> TaskCollection:
    found = search_tasks(tasks, view.search)
    kept = filter_tasks(found, view.status)
    return sort_tasks(kept, view.sort)
