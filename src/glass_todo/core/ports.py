# src/glass_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps storage and the celebration effect swappable and makes testing easier.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task, TaskCollection

SnapshotListener = Callable[[TaskCollection], None]
# Receives the new collection after every accepted mutation.


class KeyValueStore(Protocol):
    """Durable string key/value storage scoped to one app instance."""
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TaskPersistence(Protocol):
    """
    Loads and saves the whole task collection.

    load() never raises: missing or malformed data yields an empty collection.
    save() is best-effort and never raises either.
    """

    def load(self) -> TaskCollection: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class CompletionObserver(Protocol):
    """Notified every time a mutation leaves all tasks completed."""
    def on_all_completed(self) -> None: ...


class IdGenerator(Protocol):
    def next_id(self) -> int: ...
    def advance_past(self, used_id: int) -> None: ...
