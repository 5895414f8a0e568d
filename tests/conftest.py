# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_app.config import Config
from todo_app.models import Task, TaskStatus
from todo_app.service import TodoService
from todo_app.status_parser import StatusParser

from .fakes import FakeTaskRepository


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own TODOAPP_* / NO_COLOR settings out of the tests."""
    for name in ("TODOAPP_CONFIG", "TODOAPP_DATA_DIR", "TODOAPP_LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def config(tmp_path: Path) -> Config:
    """Config pointing at a per-test data directory (not created yet)."""
    return Config(data_dir=tmp_path / "todoapp", color=False)


@pytest.fixture()
def repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture()
def service(repo: FakeTaskRepository) -> TodoService:
    return TodoService(repo, StatusParser())


@pytest.fixture()
def seeded_repo() -> FakeTaskRepository:
    """Three tasks, one per status."""
    return FakeTaskRepository(
        [
            Task(id=1, name="Write report", owner="John", status=TaskStatus.TODO),
            Task(id=2, name="Review PR", owner="alice", status=TaskStatus.IN_PROGRESS),
            Task(id=3, name="Ship release", owner="john", status=TaskStatus.COMPLETE),
        ]
    )


@pytest.fixture()
def seeded_service(seeded_repo: FakeTaskRepository) -> TodoService:
    return TodoService(seeded_repo, StatusParser())
