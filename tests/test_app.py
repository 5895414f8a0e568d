# tests/test_app.py

from __future__ import annotations

import pytest
from textual.widgets import DataTable

from todo_app.app import TaskBrowserApp
from todo_app.models import TaskStatus
from todo_app.screens import ConfirmDeleteDialog
from todo_app.service import TodoService

from .fakes import FakeTaskRepository


def _table(app: TaskBrowserApp) -> DataTable:
    return app.query_one("#task-table", DataTable)


@pytest.mark.asyncio
async def test_browser_lists_every_task(seeded_service: TodoService) -> None:
    app = TaskBrowserApp(seeded_service)

    async with app.run_test():
        table = _table(app)
        assert table.row_count == 3
        assert len(table.columns) == 5


@pytest.mark.asyncio
async def test_complete_highlighted_task(
    seeded_service: TodoService, seeded_repo: FakeTaskRepository
) -> None:
    app = TaskBrowserApp(seeded_service)

    async with app.run_test() as pilot:
        await pilot.press("c")
        await pilot.pause()

    assert seeded_repo.get(1).status is TaskStatus.COMPLETE
    assert seeded_repo.save_calls == 1


@pytest.mark.asyncio
async def test_delete_asks_for_confirmation(
    seeded_service: TodoService, seeded_repo: FakeTaskRepository
) -> None:
    app = TaskBrowserApp(seeded_service)

    async with app.run_test() as pilot:
        await pilot.press("d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteDialog)

        await pilot.press("y")
        await pilot.pause()
        assert _table(app).row_count == 2

    assert [t.id for t in seeded_repo.tasks] == [2, 3]


@pytest.mark.asyncio
async def test_declined_delete_keeps_task(
    seeded_service: TodoService, seeded_repo: FakeTaskRepository
) -> None:
    app = TaskBrowserApp(seeded_service)

    async with app.run_test() as pilot:
        await pilot.press("d")
        await pilot.pause()
        await pilot.press("n")
        await pilot.pause()
        assert not isinstance(app.screen, ConfirmDeleteDialog)

    assert len(seeded_repo.tasks) == 3
    assert seeded_repo.save_calls == 0


@pytest.mark.asyncio
async def test_filter_cycles_through_statuses(seeded_service: TodoService) -> None:
    app = TaskBrowserApp(seeded_service)

    async with app.run_test() as pilot:
        seen = []
        for _ in range(4):
            await pilot.press("f")
            await pilot.pause()
            seen.append((app.status_filter, _table(app).row_count))

    assert seen == [
        (TaskStatus.TODO, 1),
        (TaskStatus.IN_PROGRESS, 1),
        (TaskStatus.COMPLETE, 1),
        (None, 3),
    ]


@pytest.mark.asyncio
async def test_shortcuts_do_nothing_without_tasks(
    service: TodoService, repo: FakeTaskRepository
) -> None:
    app = TaskBrowserApp(service)

    async with app.run_test() as pilot:
        await pilot.press("c", "d")
        await pilot.pause()
        assert not isinstance(app.screen, ConfirmDeleteDialog)

    assert repo.save_calls == 0
