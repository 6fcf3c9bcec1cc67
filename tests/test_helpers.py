from datetime import date, timedelta

import pytest

from task_tracker.helpers import (
    filter_tasks_by_status,
    format_date,
    get_priority_label,
    is_overdue,
    is_valid_task_name,
    sort_tasks,
)

TODAY = date(2026, 10, 19)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Task", True),
        ("  padded  ", True),
        ("", False),
        ("   ", False),
        (None, False),
        (42, False),
        ({"name": "x"}, False),
    ],
)
def test_is_valid_task_name(value, expected) -> None:
    assert is_valid_task_name(value) is expected


def test_format_date() -> None:
    assert format_date("2026-02-06") == "Feb 6, 2026"
    assert format_date("2025-12-01T10:30:00Z") == "Dec 1, 2025"
    assert format_date("") == ""
    assert format_date(None) == ""
    assert format_date("not a date") == "not a date"
    assert format_date("2026-02-30") == "2026-02-30"


def test_get_priority_label() -> None:
    assert get_priority_label("high") == ("High", "#e63946")
    assert get_priority_label("medium") == ("Medium", "#ff9800")
    assert get_priority_label("low").text == "Low"
    assert get_priority_label("unknown") == get_priority_label("medium")
    assert get_priority_label(None) == get_priority_label("medium")


def test_is_overdue() -> None:
    yesterday = (TODAY - timedelta(days=1)).isoformat()

    assert is_overdue(yesterday, False, today=TODAY) is True
    assert is_overdue(yesterday, True, today=TODAY) is False
    assert is_overdue(TODAY.isoformat(), False, today=TODAY) is False
    assert is_overdue("2027-01-01", False, today=TODAY) is False
    assert is_overdue(None, False, today=TODAY) is False
    assert is_overdue("", False, today=TODAY) is False
    assert is_overdue("someday", False, today=TODAY) is False


def test_is_overdue_uses_current_date() -> None:
    assert is_overdue(date.today().isoformat(), False) is False
    assert is_overdue("2000-01-01", False) is True


def test_sort_by_due_date_puts_undated_last() -> None:
    tasks = [
        {"id": 1, "due_date": None},
        {"id": 2, "due_date": "2026-03-01"},
        {"id": 3, "due_date": ""},
        {"id": 4, "due_date": "2026-01-15"},
        {"id": 5},
    ]
    snapshot = [dict(t) for t in tasks]

    result = sort_tasks(tasks, "due_date")

    assert [t["id"] for t in result] == [4, 2, 1, 3, 5]
    assert tasks == snapshot
    assert result is not tasks


def test_sort_defaults_to_due_date() -> None:
    tasks = [{"id": 1, "due_date": "2026-05-01"}, {"id": 2, "due_date": "2026-04-01"}]
    assert [t["id"] for t in sort_tasks(tasks)] == [2, 1]


def test_sort_by_priority_is_stable() -> None:
    tasks = [
        {"id": 1, "priority": "low"},
        {"id": 2, "priority": "medium"},
        {"id": 3, "priority": "high"},
        {"id": 4, "priority": "medium"},
        {"id": 5, "priority": "high"},
    ]

    result = sort_tasks(tasks, "priority")

    assert [t["id"] for t in result] == [3, 5, 2, 4, 1]
    assert [t["id"] for t in tasks] == [1, 2, 3, 4, 5]


def test_sort_unknown_key_returns_copy() -> None:
    tasks = [{"id": 2}, {"id": 1}]
    result = sort_tasks(tasks, "name")
    assert result == tasks
    assert result is not tasks


def test_filter_tasks_by_status() -> None:
    tasks = [
        {"id": 1, "completed": True},
        {"id": 2, "completed": 0},
        {"id": 3, "completed": 1},
    ]

    assert [t["id"] for t in filter_tasks_by_status(tasks, "completed")] == [1, 3]
    assert [t["id"] for t in filter_tasks_by_status(tasks, "incomplete")] == [2]
    assert filter_tasks_by_status(tasks, "all") == tasks
    assert filter_tasks_by_status(tasks, "bogus") == tasks
