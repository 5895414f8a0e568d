# tests/test_formatting.py

from __future__ import annotations

import io
import json

import pytest

from todo_app.formatting import (
    RESET,
    STATUS_COLORS,
    color_enabled,
    format_json,
    format_table,
    pad_or_truncate,
)
from todo_app.models import Task, TaskStatus


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("value", "width", "expected"),
    [
        ("abc", 5, "abc  "),
        ("abcde", 5, "abcde"),
        ("abcdefgh", 6, "abc..."),
        ("abcdef", 3, "abc"),
        ("abc", 0, ""),
    ],
)
def test_pad_or_truncate(value: str, width: int, expected: str) -> None:
    assert pad_or_truncate(value, width) == expected


def test_table_has_header_separator_and_fixed_width_rows() -> None:
    tasks = [
        Task(id=1, name="x" * 40, owner="bob", status=TaskStatus.IN_PROGRESS, description="d"),
        Task(id=2, name="Short", description="y" * 50),
    ]

    lines = format_table(tasks)

    assert lines[0].startswith("ID   Name")
    assert lines[1] == "-" * 90
    assert len(lines) == 4
    assert all(len(line) == 90 for line in lines)
    assert "x" * 22 + "..." in lines[2]
    assert "In Progress " in lines[2]
    assert lines[3].endswith("y" * 27 + "...")


def test_table_colors_rows_by_status() -> None:
    tasks = [
        Task(id=1, name="A"),
        Task(id=2, name="B", status=TaskStatus.COMPLETE),
    ]

    lines = format_table(tasks, color=True)

    assert "\033[" not in lines[2]
    assert lines[3].startswith(STATUS_COLORS[TaskStatus.COMPLETE])
    assert lines[3].endswith(RESET)


def test_color_only_for_terminals(monkeypatch: pytest.MonkeyPatch) -> None:
    assert color_enabled(_Tty()) is True
    assert color_enabled(io.StringIO()) is False
    assert color_enabled(_Tty(), wanted=False) is False

    monkeypatch.setenv("NO_COLOR", "")
    assert color_enabled(_Tty()) is False


def test_format_json_uses_stored_record_layout() -> None:
    out = format_json([Task(id=4, name="Zoë", status=TaskStatus.IN_PROGRESS)])

    assert "Zoë" in out
    assert json.loads(out) == [
        {"Id": 4, "Name": "Zoë", "Owner": "Unassigned", "Status": "InProgress", "Description": ""}
    ]
