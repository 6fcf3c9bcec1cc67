"""Service layer package."""

from .task_service import TaskService, parse_task_id

__all__ = [
    "TaskService",
    "parse_task_id",
]
