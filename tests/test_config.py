# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from glass_todo.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "GLASSTODO_APP_NAME",
        "GLASSTODO_DATA_DIR",
        "GLASSTODO_STORAGE_PATH",
        "GLASSTODO_STORAGE_KEY",
        "GLASSTODO_PERSIST",
        "GLASSTODO_CELEBRATE",
        "GLASSTODO_CONFETTI_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "glass-todo"
    assert s.storage_path == Path(".local/glass_todo") / "storage.json"
    assert s.storage_key == "todos"
    assert s.persist is True
    assert s.celebrate is True
    assert s.confetti_count == 150


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GLASSTODO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("GLASSTODO_STORAGE_PATH", raising=False)
    monkeypatch.setenv("GLASSTODO_STORAGE_KEY", "my-tasks")
    monkeypatch.setenv("GLASSTODO_PERSIST", "off")
    monkeypatch.setenv("GLASSTODO_CELEBRATE", "no")
    monkeypatch.setenv("GLASSTODO_CONFETTI_COUNT", "not-a-number")

    s = Settings.from_env()

    assert s.storage_path == tmp_path / "storage.json"
    assert s.storage_key == "my-tasks"
    assert s.persist is False
    assert s.celebrate is False
    assert s.confetti_count == 150
