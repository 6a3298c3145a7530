# src/glass_todo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.ports import CompletionObserver, IdGenerator, SnapshotListener, TaskPersistence
from .task_ids import SequentialIdGenerator
from .task_models import Priority, Task, TaskCollection

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owner of the canonical ordered task collection.

    Every accepted mutation:
    - replaces the collection with a new tuple (copy-on-write),
    - saves the full collection through the persistence port,
    - calls the completion observer when every task is completed
      (again on each mutation while that stays true),
    - notifies subscribers with the new snapshot.

    Rejected input (empty text) and unknown ids change nothing and trigger none
    of the above.
    """

    def __init__(
        self,
        persistence: TaskPersistence,
        *,
        observer: CompletionObserver | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._persistence = persistence
        self._observer = observer
        self._ids: IdGenerator = id_generator or SequentialIdGenerator()
        self._tasks: TaskCollection = ()
        self._listeners: list[SnapshotListener] = []

    # ---- queries ----

    @property
    def tasks(self) -> TaskCollection:
        return self._tasks

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def all_completed(self) -> bool:
        return bool(self._tasks) and all(t.completed for t in self._tasks)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- lifecycle ----

    def hydrate(self) -> int:
        """
        Load the stored collection once at startup.

        Duplicate ids after the first occurrence are dropped. Nothing is written
        back, but the completion check and subscribers run as for a mutation.
        """
        loaded = self._persistence.load()
        seen: set[int] = set()
        kept: list[Task] = []
        for task in loaded:
            if task.id in seen:
                logger.warning("Dropping stored task with duplicate id=%s", task.id)
                continue
            seen.add(task.id)
            kept.append(task)
            self._ids.advance_past(task.id)

        self._tasks = tuple(kept)
        logger.info("TaskStore hydrated total=%s", len(self._tasks))
        self._check_completed()
        self._notify()
        return len(self._tasks)

    # ---- mutations ----

    def add_task(
        self,
        text: str,
        priority: Priority = Priority.LOW,
        due_date: date | None = None,
    ) -> int | None:
        if not (text or "").strip():
            logger.debug("add_task rejected: empty text")
            return None

        task = Task(
            id=self._ids.next_id(),
            text=text,
            priority=Priority(priority),
            due_date=due_date,
        )
        self._commit((*self._tasks, task))
        logger.debug(
            "Task added id=%s priority=%s due_date=%s",
            task.id,
            task.priority.value,
            task.due_date,
        )
        return task.id

    def toggle_task(self, task_id: int) -> None:
        self._replace(task_id, Task.toggled)

    def edit_task(self, task_id: int, new_text: str) -> None:
        if not (new_text or "").strip():
            logger.debug("edit_task rejected: empty text id=%s", task_id)
            return
        self._replace(task_id, lambda t: t.with_text(new_text))

    def remove_task(self, task_id: int) -> None:
        survivors = tuple(t for t in self._tasks if t.id != task_id)
        if len(survivors) == len(self._tasks):
            logger.debug("remove_task: id=%s not found", task_id)
            return
        self._commit(survivors)
        logger.debug("Task removed id=%s", task_id)

    # ---- internals ----

    def _replace(self, task_id: int, change: Callable[[Task], Task]) -> None:
        found = False
        updated: list[Task] = []
        for task in self._tasks:
            if task.id == task_id:
                task = change(task)
                found = True
            updated.append(task)
        if not found:
            logger.debug("Task id=%s not found", task_id)
            return
        self._commit(tuple(updated))

    def _commit(self, tasks: TaskCollection) -> None:
        self._tasks = tasks
        self._persistence.save(tasks)
        self._check_completed()
        self._notify()

    def _check_completed(self) -> None:
        if self._observer is None or not self.all_completed():
            return
        try:
            self._observer.on_all_completed()
        except Exception:
            logger.exception("Completion observer failed.")

    def _notify(self) -> None:
        snapshot = self._tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task snapshot listener failed.")
