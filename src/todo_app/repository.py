"""Task storage for todo-app."""

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from todo_app.models import Task

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    """Storage contract used by TodoService.

    Implementations raise plain exceptions; the service turns them into
    user-facing errors. ``get`` must raise KeyError when the id does not
    resolve to exactly one task, which the service reports as not found.
    """

    def load_data(self) -> None: ...
    def add(self, task: Task) -> None: ...
    def get(self, task_id: int) -> Task: ...
    def get_all(self) -> Sequence[Task]: ...
    def delete(self, task: Task) -> None: ...
    def save(self) -> None: ...


class JsonTaskRepository:
    """Tasks kept in memory and persisted as a single JSON array.

    The list keeps insertion order and tolerates duplicate ids found on disk
    so they can still be listed; ``get`` refuses to resolve such ids.
    """

    def __init__(self, data_file: Path) -> None:
        """Initialize repository with the path of the JSON data file."""
        self.data_file = Path(data_file)
        self._tasks: list[Task] = []
        self._index: dict[int, Task] = {}
        self._ambiguous_ids: set[int] = set()
        self._next_id = 1

    def load_data(self) -> None:
        """Read tasks from disk, replacing whatever is held in memory.

        A missing, empty or ``null`` file is an empty collection.

        Raises:
            OSError: If the file exists but cannot be read.
            ValueError: If the file is not valid JSON or not a list of tasks.
        """
        tasks: list[Task] = []
        if self.data_file.exists():
            content = self.data_file.read_text(encoding="utf-8-sig")
            if content.strip():
                data = json.loads(content)
                if data is not None:
                    if not isinstance(data, list):
                        raise ValueError(
                            f"Expected a list of tasks in {self.data_file}, "
                            f"got {type(data).__name__}"
                        )
                    tasks = [Task.from_record(record) for record in data]

        self._tasks = tasks
        self._reindex()
        if self._ambiguous_ids:
            logger.warning(
                "Duplicate task id(s) in %s: %s",
                self.data_file,
                ", ".join(str(i) for i in sorted(self._ambiguous_ids)),
            )
        self._next_id = max(0, max((task.id for task in tasks), default=0)) + 1
        logger.debug(
            "Loaded %d task(s) from %s next_id=%d", len(tasks), self.data_file, self._next_id
        )

    def add(self, task: Task) -> None:
        """Assign the next id to ``task`` and append it."""
        if task.id != 0:
            raise ValueError("New tasks should not be assigned ids")

        task.id = self._next_id
        self._next_id += 1
        self._tasks.append(task)
        self._index[task.id] = task

    def get(self, task_id: int) -> Task:
        """Return the only task carrying ``task_id``.

        Raises:
            KeyError: If no task, or more than one task, has that id.
        """
        if task_id in self._ambiguous_ids:
            raise KeyError(f"Task id {task_id} is used by more than one task")
        try:
            return self._index[task_id]
        except KeyError:
            raise KeyError(f"No task with id {task_id}") from None

    def get_all(self) -> Sequence[Task]:
        """All tasks in insertion order. Callers must not modify the sequence."""
        return self._tasks

    def delete(self, task: Task) -> None:
        """Remove this exact task instance."""
        for idx, existing in enumerate(self._tasks):
            if existing is task:
                del self._tasks[idx]
                self._reindex()
                return
        raise ValueError("Could not delete task that does not exist")

    def save(self) -> None:
        """Write every task to disk, replacing the previous file atomically.

        The data goes to a temporary sibling first and is renamed over the
        data file, so a failed write never leaves a truncated file behind.
        """
        payload = json.dumps(
            [task.to_record() for task in self._tasks], indent=2, ensure_ascii=False
        )
        tmp = self.data_file.with_name(self.data_file.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.data_file)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d task(s) to %s", len(self._tasks), self.data_file)

    def _reindex(self) -> None:
        self._index = {}
        self._ambiguous_ids = set()
        for task in self._tasks:
            if task.id in self._index:
                self._ambiguous_ids.add(task.id)
            else:
                self._index[task.id] = task
