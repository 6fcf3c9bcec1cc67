"""Database package."""

from .client import SAMPLE_TASKS, TaskStore

__all__ = [
    "SAMPLE_TASKS",
    "TaskStore",
]
