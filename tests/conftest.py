# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from glass_todo.cli.bootstrap import create_initial_state
from glass_todo.core.state import AppState
from glass_todo.storage.kv_store import InMemoryKeyValueStore
from glass_todo.storage.persistence import KeyValueTaskPersistence
from glass_todo.tasks.task_store import TaskStore

from .fakes import RecordingObserver


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="glass-todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.json",
        storage_key="todos",
        persist=True,
        celebrate=False,
        confetti_count=10,
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore, observer: RecordingObserver) -> TaskStore:
    return TaskStore(KeyValueTaskPersistence(kv), observer=observer)


@pytest.fixture()
def state(settings: SimpleNamespace, kv: InMemoryKeyValueStore) -> AppState:
    """AppState wired through the real composition root, with in-memory storage."""
    return create_initial_state(settings=settings, kv_store=kv, emit=lambda _: None)
