# src/glass_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires storage, the celebration observer and the task store into AppState,
- hydrates the store from storage.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..core.celebration import ConfettiCelebration, NullCelebration
from ..core.ports import CompletionObserver, KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from ..storage.persistence import KeyValueTaskPersistence
from ..tasks.task_editing import TaskEditor
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def _build_kv_store(settings) -> KeyValueStore:
    if not settings.persist:
        logger.info("Persistence disabled; tasks live in memory only.")
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(settings.storage_path)


def _build_observer(settings, emit: Callable[[str], None]) -> CompletionObserver:
    if not settings.celebrate:
        return NullCelebration()
    return ConfettiCelebration(emit, particle_count=settings.confetti_count)


def create_initial_state(
    *,
    settings=None,
    kv_store: KeyValueStore | None = None,
    emit: Callable[[str], None] = print,
) -> AppState:
    """
    Create and hydrate AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv_store is None:
        _ensure_local_dirs(settings)
        kv_store = _build_kv_store(settings)

    store = TaskStore(
        KeyValueTaskPersistence(kv_store, key=settings.storage_key),
        observer=_build_observer(settings, emit),
    )
    store.hydrate()

    return AppState(settings=settings, store=store, editor=TaskEditor(store))
