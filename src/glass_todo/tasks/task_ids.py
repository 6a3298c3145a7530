# src/glass_todo/tasks/task_ids.py

from __future__ import annotations


class SequentialIdGenerator:
    """
    Monotonic integer ids.

    Ids are never reused within a process: after hydration the store calls
    advance_past() with every loaded id so new tasks sort after stored ones.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = max(1, int(start))

    def next_id(self) -> int:
        nid = self._next
        self._next += 1
        return nid

    def advance_past(self, used_id: int) -> None:
        if used_id >= self._next:
            self._next = used_id + 1
