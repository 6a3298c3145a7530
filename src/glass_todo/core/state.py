# src/glass_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_editing import TaskEditor
from ..tasks.task_models import ViewConfig
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in commands.
    settings: object

    store: TaskStore
    editor: TaskEditor

    # Replaced (never mutated) by the set_search/set_filter/set_sort intents.
    view: ViewConfig = field(default_factory=ViewConfig)
