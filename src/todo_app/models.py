"""Data models for todo-app."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

DEFAULT_OWNER = "Unassigned"


class TaskStatus(Enum):
    """Status of a task.

    Values are the names written to the data file; use ``label`` for display.
    """

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"

    @property
    def label(self) -> str:
        """Human readable label, e.g. "In Progress"."""
        return STATUS_LABELS[self]


STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "Todo",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETE: "Complete",
}


def _status_from_name(name: Any) -> TaskStatus:
    """Look up a stored status name, ignoring case ("inProgress" is IN_PROGRESS)."""
    if isinstance(name, str):
        for status in TaskStatus:
            if status.value.lower() == name.lower():
                return status
    raise ValueError(f"Unknown task status {name!r}")


@dataclass
class Task:
    """A single task record.

    An ``id`` of 0 means the repository has not assigned one yet.
    """

    id: int = 0
    name: str = ""
    owner: str = DEFAULT_OWNER
    status: TaskStatus = TaskStatus.TODO
    description: str = ""

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON record stored in the data file."""
        return {
            "Id": self.id,
            "Name": self.name,
            "Owner": self.owner,
            "Status": self.status.value,
            "Description": self.description,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Task":
        """Create a Task from a stored JSON record.

        Raises:
            ValueError: If the record is missing a field or holds a bad value.
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Task record must be an object, got {type(record).__name__}")

        missing = [key for key in ("Id", "Name", "Owner", "Status", "Description") if key not in record]
        if missing:
            raise ValueError(f"Task record is missing field(s): {', '.join(missing)}")

        task_id = record["Id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"Task id must be an integer, got {task_id!r}")

        status = _status_from_name(record["Status"])

        owner = record["Owner"]
        description = record["Description"]
        return cls(
            id=task_id,
            name=str(record["Name"] or ""),
            owner=DEFAULT_OWNER if owner is None else str(owner),
            status=status,
            description="" if description is None else str(description),
        )


@dataclass(frozen=True)
class Column:
    """Display metadata for one task attribute."""

    attr: str
    header: str
    width: int


# Display order used by the console table and the browser.
TASK_COLUMNS: tuple[Column, ...] = (
    Column("id", "ID", 4),
    Column("name", "Name", 25),
    Column("owner", "Owner", 15),
    Column("status", "Status", 12),
    Column("description", "Description", 30),
)
