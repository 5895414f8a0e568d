"""Error types raised by the task service."""

from enum import Enum

INVALID_STATUS_MESSAGE = "Error: Invalid status. Allowed values: Todo, In Progress, Complete"


class ErrorKind(Enum):
    """The closed set of failures a caller has to handle."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


class TodoError(Exception):
    """A user-facing failure.

    Branch on ``kind`` rather than on the exception type; ``message`` is ready
    to be shown to the user as-is.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"TodoError(kind={self.kind.name}, message={self.message!r})"

    @classmethod
    def validation(cls, message: str = INVALID_STATUS_MESSAGE) -> "TodoError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, task_id: int) -> "TodoError":
        return cls(ErrorKind.NOT_FOUND, f"Error: Task with ID {task_id} not found")

    @classmethod
    def persistence(cls, message: str) -> "TodoError":
        return cls(ErrorKind.PERSISTENCE, message)
