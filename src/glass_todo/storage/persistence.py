# src/glass_todo/storage/persistence.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from ..tasks.task_models import Task, TaskCollection, task_from_record, task_to_record

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


class KeyValueTaskPersistence:
    """
    Task collection <-> JSON array stored under one key.

    load():
    - missing key, unreadable storage, invalid JSON or a non-list payload -> ()
    - records that cannot be decoded are skipped with a warning

    save():
    - best-effort; failures are logged and swallowed
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    def load(self) -> TaskCollection:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read stored tasks key=%s", self._key)
            return ()
        if raw is None:
            return ()

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored tasks under key=%s are not valid JSON; starting empty.", self._key)
            return ()
        if not isinstance(payload, list):
            logger.warning("Stored tasks under key=%s are not a list; starting empty.", self._key)
            return ()

        tasks: list[Task] = []
        for idx, record in enumerate(payload):
            task = task_from_record(record)
            if task is None:
                logger.warning("Skipping malformed stored task at index %d", idx)
                continue
            tasks.append(task)
        logger.debug("Loaded %d tasks from key=%s", len(tasks), self._key)
        return tuple(tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        try:
            records = [task_to_record(t) for t in tasks]
            self._kv.set(self._key, json.dumps(records, ensure_ascii=False))
        except Exception:
            logger.exception("Failed to save tasks key=%s", self._key)
