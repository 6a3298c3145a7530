# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from glass_todo.tasks.task_models import Task, TaskCollection


class RecordingObserver:
    """CompletionObserver that counts notifications."""

    def __init__(self) -> None:
        self.calls = 0

    def on_all_completed(self) -> None:
        self.calls += 1


class ExplodingObserver:
    def on_all_completed(self) -> None:
        raise RuntimeError("confetti cannon jammed")


class FailingKeyValueStore:
    """KeyValueStore whose reads and writes always fail."""

    def get(self, key: str) -> str | None:
        raise OSError("disk unavailable")

    def set(self, key: str, value: str) -> None:
        raise OSError("disk unavailable")


@dataclass(slots=True)
class RecordingPersistence:
    """TaskPersistence that keeps every saved snapshot."""

    initial: TaskCollection = ()
    saved: list[TaskCollection] = field(default_factory=list)

    def load(self) -> TaskCollection:
        return self.initial

    def save(self, tasks: Iterable[Task]) -> None:
        self.saved.append(tuple(tasks))
