"""Task operations exposed to the command line and the browser."""

import logging

from todo_app.errors import TodoError
from todo_app.models import DEFAULT_OWNER, Task, TaskStatus
from todo_app.repository import TaskRepository
from todo_app.status_parser import StatusParser

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class TodoService:
    """Validates user input and applies it to a TaskRepository.

    Data is loaded once, at construction. Every successful mutation is saved
    before the method returns; failures are raised as TodoError.
    """

    def __init__(self, repository: TaskRepository, parser: StatusParser) -> None:
        """Load tasks from ``repository``.

        Raises:
            TodoError: PERSISTENCE if the data cannot be loaded. The instance
                must not be used in that case.
        """
        self._repo = repository
        self._parser = parser

        try:
            self._repo.load_data()
        except Exception as exc:
            logger.debug("Loading tasks failed", exc_info=True)
            raise TodoError.persistence(f"Error loading tasks: {exc}") from exc

    def add_task(
        self,
        name: str,
        owner: str | None = None,
        status: str | None = None,
        description: str | None = None,
    ) -> Task:
        """Create a task and return it with its new id."""
        if _is_blank(name):
            raise TodoError.validation("Name is required.")

        parsed_status, ok = self._parser.try_parse(status)
        if not ok:
            raise TodoError.validation()

        task = Task(
            name=name,
            owner=DEFAULT_OWNER if _is_blank(owner) else owner,
            status=parsed_status,
            description=description if description is not None else "",
        )

        try:
            self._repo.add(task)
            self._repo.save()
        except Exception as exc:
            raise self._save_error(exc) from exc

        logger.info("Task added id=%s name=%r status=%s", task.id, task.name, task.status.value)
        return task

    def list_tasks(
        self, status_filter: str | None = None, owner_filter: str | None = None
    ) -> list[Task]:
        """Return tasks matching every given filter.

        An owner filter matches case-insensitively, character by character
        ("STRASSE" does not match "Straße"). A status filter that is
        not a valid status matches nothing; it is not an error.
        """
        tasks: list[Task] = list(self._repo.get_all())

        if not _is_blank(status_filter):
            wanted, ok = self._parser.try_parse(status_filter)
            if not ok:
                logger.debug("Unknown status filter %r, nothing matches", status_filter)
                return []
            tasks = [t for t in tasks if t.status == wanted]

        if not _is_blank(owner_filter):
            owner = owner_filter.lower()
            tasks = [t for t in tasks if (t.owner or "").lower() == owner]

        return tasks

    def update_task(
        self,
        task_id: int,
        name: str | None = None,
        owner: str | None = None,
        status: str | None = None,
        description: str | None = None,
    ) -> bool:
        """Overwrite the non-blank fields of a task.

        Returns:
            True once the change is saved, False if no field was given (in
            which case nothing is saved).
        """
        task = self._get_or_raise(task_id)

        new_status: TaskStatus | None = None
        if not _is_blank(status):
            new_status, ok = self._parser.try_parse(status)
            if not ok:
                raise TodoError.validation()

        updated = False
        if not _is_blank(name):
            task.name = name
            updated = True
        if not _is_blank(owner):
            task.owner = owner
            updated = True
        if new_status is not None:
            task.status = new_status
            updated = True
        if not _is_blank(description):
            task.description = description
            updated = True

        if not updated:
            return False

        self._save()
        logger.info("Task updated id=%s", task_id)
        return True

    def delete_task(self, task_id: int) -> Task:
        """Remove a task and return it."""
        task = self._get_or_raise(task_id)

        try:
            self._repo.delete(task)
            self._repo.save()
        except Exception as exc:
            raise self._save_error(exc) from exc

        logger.info("Task deleted id=%s", task_id)
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark a task Complete. Completing a completed task is fine."""
        task = self._get_or_raise(task_id)
        task.status = TaskStatus.COMPLETE
        self._save()
        logger.info("Task completed id=%s", task_id)
        return task

    def assign_owner(self, task_id: int, owner: str) -> Task:
        """Give a task a new owner."""
        if _is_blank(owner):
            raise TodoError.validation("Owner is required.")

        task = self._get_or_raise(task_id)
        task.owner = owner
        self._save()
        logger.info("Task assigned id=%s owner=%r", task_id, owner)
        return task

    def _get_or_raise(self, task_id: int) -> Task:
        try:
            return self._repo.get(task_id)
        except LookupError as exc:
            logger.debug("Lookup of task id=%s failed: %s", task_id, exc)
            raise TodoError.not_found(task_id) from exc

    def _save(self) -> None:
        try:
            self._repo.save()
        except Exception as exc:
            raise self._save_error(exc) from exc

    @staticmethod
    def _save_error(exc: Exception) -> TodoError:
        logger.debug("Saving tasks failed", exc_info=exc)
        return TodoError.persistence(f"Error saving task: {exc}")
