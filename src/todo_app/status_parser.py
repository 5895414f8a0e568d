"""Lenient parsing of user-supplied status text."""

from todo_app.models import STATUS_LABELS, TaskStatus


def _normalize(text: str) -> str:
    return "".join(text.split()).lower()


class StatusParser:
    """Map free-form text such as "in progress" or " COMPLETE " to a TaskStatus."""

    def try_parse(self, text: str | None) -> tuple[TaskStatus, bool]:
        """Parse a status, ignoring case and whitespace.

        Blank input is accepted as the default status (Todo). Each status is
        matched on its display label and on its stored name, in declaration
        order.

        Returns:
            A ``(status, ok)`` tuple. When ``ok`` is False the status is
            meaningless and must not be used.
        """
        if text is None or not text.strip():
            return TaskStatus.TODO, True

        target = _normalize(text)
        for status in TaskStatus:
            if _normalize(STATUS_LABELS[status]) == target or _normalize(status.value) == target:
                return status, True
        return TaskStatus.TODO, False
