# tests/test_task_api.py

from __future__ import annotations

import json
from datetime import date

import pytest

from glass_todo.core.state import AppState
from glass_todo.tasks import task_api
from glass_todo.tasks.task_models import Priority, SortMode, StatusFilter, ViewConfig


def test_parse_due_date() -> None:
    assert task_api.parse_due_date("2024-01-01") == date(2024, 1, 1)
    assert task_api.parse_due_date("") is None
    assert task_api.parse_due_date(None) is None
    with pytest.raises(ValueError):
        task_api.parse_due_date("01/02/2024")


def test_intents_drive_store_and_persist(state: AppState, kv) -> None:
    a = task_api.create(state, "Buy milk", "high")
    b = task_api.create(state, "Clean")
    task_api.toggle(state, a)
    task_api.edit(state, b, "Clean kitchen")

    stored = json.loads(kv.get("todos"))
    assert [r["text"] for r in stored] == ["Buy milk", "Clean kitchen"]
    assert stored[0]["completed"] is True

    task_api.remove(state, a)
    assert [t.id for t in state.store.tasks] == [b]


def test_view_intents_replace_view_config(state: AppState) -> None:
    original = state.view

    task_api.set_search(state, "milk")
    task_api.set_filter(state, "pending")
    task_api.set_sort(state, "PRIORITY")

    assert original == ViewConfig()
    assert state.view == ViewConfig(search="milk", status=StatusFilter.PENDING, sort=SortMode.PRIORITY)


def test_unknown_modes_raise(state: AppState) -> None:
    with pytest.raises(ValueError):
        task_api.set_filter(state, "someday")
    with pytest.raises(ValueError):
        task_api.set_sort(state, "alphabetical")
    assert state.view == ViewConfig()


def test_displayed_tasks_recomputed_each_query(state: AppState) -> None:
    task_api.create(state, "Buy milk", Priority.HIGH)
    task_api.create(state, "Clean", Priority.LOW)
    task_api.create(state, "Pay bills", Priority.MEDIUM)
    task_api.set_sort(state, SortMode.PRIORITY)

    assert [t.text for t in task_api.displayed_tasks(state)] == ["Buy milk", "Pay bills", "Clean"]

    task_api.set_search(state, "bu")
    assert [t.text for t in task_api.displayed_tasks(state)] == ["Buy milk"]


def test_remove_closes_edit_session_for_that_task(state: AppState) -> None:
    tid = task_api.create(state, "a")
    state.editor.begin_edit(tid)

    task_api.remove(state, tid)

    assert state.editor.session is None
