# tests/test_task_view.py

from __future__ import annotations

from datetime import date

import pytest

from glass_todo.tasks.task_models import Priority, SortMode, StatusFilter, Task, ViewConfig
from glass_todo.tasks.task_view import apply_view, filter_tasks, search_tasks, sort_tasks


@pytest.fixture()
def shopping() -> tuple[Task, ...]:
    return (
        Task(id=1, text="Buy milk", priority=Priority.HIGH),
        Task(id=2, text="Clean", priority=Priority.LOW),
        Task(id=3, text="Pay bills", priority=Priority.MEDIUM),
    )


def _texts(tasks) -> list[str]:
    return [t.text for t in tasks]


def test_sort_by_priority_high_first(shopping) -> None:
    view = ViewConfig(status=StatusFilter.ALL, sort=SortMode.PRIORITY)
    assert _texts(apply_view(shopping, view)) == ["Buy milk", "Pay bills", "Clean"]


def test_search_is_case_insensitive_substring(shopping) -> None:
    assert _texts(apply_view(shopping, ViewConfig(search="bu"))) == ["Buy milk"]
    assert _texts(apply_view(shopping, ViewConfig(search="ILL"))) == ["Pay bills"]


def test_empty_search_keeps_everything(shopping) -> None:
    assert search_tasks(shopping, "") == shopping


def test_sort_by_date_puts_undated_first() -> None:
    tasks = (
        Task(id=1, text="dated", due_date=date(2024, 1, 1)),
        Task(id=2, text="undated"),
    )
    assert _texts(sort_tasks(tasks, SortMode.DATE)) == ["undated", "dated"]


def test_sort_by_date_orders_ascending_and_is_stable() -> None:
    tasks = (
        Task(id=1, text="late", due_date=date(2025, 6, 1)),
        Task(id=2, text="early-a", due_date=date(2024, 2, 1)),
        Task(id=3, text="none-a"),
        Task(id=4, text="early-b", due_date=date(2024, 2, 1)),
        Task(id=5, text="none-b"),
    )
    assert _texts(sort_tasks(tasks, SortMode.DATE)) == ["none-a", "none-b", "early-a", "early-b", "late"]


def test_priority_sort_is_stable_on_ties() -> None:
    tasks = (
        Task(id=1, text="low-1"),
        Task(id=2, text="high-1", priority=Priority.HIGH),
        Task(id=3, text="low-2"),
        Task(id=4, text="high-2", priority=Priority.HIGH),
    )
    assert _texts(sort_tasks(tasks, SortMode.PRIORITY)) == ["high-1", "high-2", "low-1", "low-2"]


def test_sort_none_keeps_order(shopping) -> None:
    assert sort_tasks(shopping, SortMode.NONE) == shopping


def test_status_filters() -> None:
    tasks = (
        Task(id=1, text="a", completed=True),
        Task(id=2, text="b"),
        Task(id=3, text="c", completed=True),
    )
    assert _texts(filter_tasks(tasks, StatusFilter.ALL)) == ["a", "b", "c"]
    assert _texts(filter_tasks(tasks, StatusFilter.COMPLETED)) == ["a", "c"]
    assert _texts(filter_tasks(tasks, StatusFilter.PENDING)) == ["b"]


def test_search_filter_sort_combined() -> None:
    tasks = (
        Task(id=1, text="Write report", priority=Priority.LOW, completed=True),
        Task(id=2, text="Write email", priority=Priority.HIGH),
        Task(id=3, text="Read book", priority=Priority.HIGH),
        Task(id=4, text="write tests", priority=Priority.MEDIUM),
    )
    view = ViewConfig(search="write", status=StatusFilter.PENDING, sort=SortMode.PRIORITY)
    assert _texts(apply_view(tasks, view)) == ["Write email", "write tests"]


def test_apply_view_is_idempotent_and_pure(shopping) -> None:
    view = ViewConfig(search="l", sort=SortMode.PRIORITY)
    first = apply_view(shopping, view)
    second = apply_view(shopping, view)

    assert first == second
    assert apply_view(first, view) == first
    assert _texts(shopping) == ["Buy milk", "Clean", "Pay bills"]


def test_equivalent_search_terms_give_same_result(shopping) -> None:
    assert apply_view(shopping, ViewConfig(search="milk")) == apply_view(shopping, ViewConfig(search="MILK"))
