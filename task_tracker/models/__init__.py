"""Models package."""

from .task import DeleteResponse, Priority, TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "Priority",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "DeleteResponse",
]
