"""Console rendering of tasks."""

import json
import os
from collections.abc import Iterable, Sequence
from typing import TextIO

from todo_app.models import TASK_COLUMNS, Column, Task, TaskStatus

RESET = "\033[0m"
STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.IN_PROGRESS: "\033[33m",
    TaskStatus.COMPLETE: "\033[32m",
}


def color_enabled(stream: TextIO, wanted: bool = True) -> bool:
    """Colour only real terminals, and never when NO_COLOR is set."""
    if not wanted or os.environ.get("NO_COLOR") is not None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def pad_or_truncate(value: str, width: int) -> str:
    """Fit ``value`` into exactly ``width`` characters.

    Long values end in "..." when there is room for it, otherwise they are cut.
    """
    if width <= 0:
        return ""
    if len(value) <= width:
        return value.ljust(width)
    if width >= 4:
        return value[: width - 3] + "..."
    return value[:width]


def format_cell(task: Task, column: Column) -> str:
    value = getattr(task, column.attr)
    if isinstance(value, TaskStatus):
        return value.label
    return "" if value is None else str(value)


def format_table(
    tasks: Iterable[Task],
    columns: Sequence[Column] = TASK_COLUMNS,
    color: bool = False,
) -> list[str]:
    """Render tasks as fixed-width lines: header, separator, one row per task."""
    total_width = sum(c.width for c in columns) + len(columns) - 1
    lines = [
        " ".join(pad_or_truncate(c.header, c.width) for c in columns),
        "-" * total_width,
    ]
    for task in tasks:
        row = " ".join(pad_or_truncate(format_cell(task, c), c.width) for c in columns)
        code = STATUS_COLORS.get(task.status) if color else None
        lines.append(f"{code}{row}{RESET}" if code else row)
    return lines


def format_json(tasks: Iterable[Task]) -> str:
    """Render tasks as a JSON array of stored records."""
    return json.dumps([t.to_record() for t in tasks], indent=2, ensure_ascii=False)
