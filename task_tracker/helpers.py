"""Pure helpers for presenting task records.

Tasks are the plain dicts returned by the store and the API. None of these
functions perform I/O or mutate their inputs.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, NamedTuple


class PriorityLabel(NamedTuple):
    text: str
    color: str


PRIORITY_LABELS = {
    "high": PriorityLabel("High", "#e63946"),
    "medium": PriorityLabel("Medium", "#ff9800"),
    "low": PriorityLabel("Low", "#5ac8fa"),
}

PRIORITY_RANK = {"high": 1, "medium": 2, "low": 3}

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_valid_task_name(value: Any) -> bool:
    """True only for a string that is non-empty after trimming."""
    return isinstance(value, str) and len(value.strip()) > 0


def parse_date(value: Any) -> date | None:
    """Calendar date of an ISO date or datetime string, or None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Render a date as "Feb 6, 2026"; unparseable values pass through."""
    if not value:
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return value if isinstance(value, str) else str(value)
    return f"{MONTH_ABBR[parsed.month - 1]} {parsed.day}, {parsed.year}"


def get_priority_label(priority: Any) -> PriorityLabel:
    if isinstance(priority, str) and priority in PRIORITY_LABELS:
        return PRIORITY_LABELS[priority]
    return PRIORITY_LABELS["medium"]


def priority_rank(priority: Any) -> int:
    if isinstance(priority, str) and priority in PRIORITY_RANK:
        return PRIORITY_RANK[priority]
    return PRIORITY_RANK["medium"]


def is_overdue(due_date: Any, completed: Any, today: date | None = None) -> bool:
    """True when an open task's due date is before today. Today is not overdue."""
    if completed or not due_date:
        return False
    due = parse_date(due_date)
    if due is None:
        return False
    return due < (today or date.today())


def sort_tasks(tasks: Iterable[Mapping], sort_by: str = "due_date") -> list:
    """Return a sorted copy of ``tasks``.

    ``due_date`` sorts ascending with undated tasks last, ``priority`` sorts
    high before medium before low. Both sorts are stable. Any other key
    returns the tasks in their original order.
    """
    tasks_copy = list(tasks)

    if sort_by == "priority":
        return sorted(tasks_copy, key=lambda task: priority_rank(task.get("priority")))

    if sort_by == "due_date":
        def due_key(task: Mapping) -> tuple:
            due = parse_date(task.get("due_date"))
            return (0, due) if due is not None else (1, date.min)

        return sorted(tasks_copy, key=due_key)

    return tasks_copy


def filter_tasks_by_status(tasks: Iterable[Mapping], status: str) -> list:
    if status == "completed":
        return [task for task in tasks if task.get("completed")]
    if status == "incomplete":
        return [task for task in tasks if not task.get("completed")]
    return list(tasks)
