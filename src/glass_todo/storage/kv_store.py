# src/glass_todo/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    String key/value storage backed by a single JSON object file.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write leaves the previous file intact.

    A missing file reads as empty. An unreadable or non-object file raises on
    get(); callers decide how to degrade.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("KeyValueStore ready path=%s", self._path)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text("utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self._path} does not hold a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, ValueError):
            # A damaged file is replaced rather than blocking every save.
            logger.warning("Storage file %s unreadable; rewriting it.", self._path)
            data = {}
        data[key] = value

        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(Exception):
            # Keep the task list private on disk.
            os.chmod(self._path, 0o600)


class InMemoryKeyValueStore:
    """Process-local store used when persistence is disabled, and in tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
