"""Pydantic models for task API."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Priority(str, Enum):
    """Known task priorities. Other values are stored verbatim."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskCreate(BaseModel):
    """Request model for creating a task.

    Fields are deliberately loose; the service layer owns validation so that
    failures map to the documented error messages instead of schema errors.
    """

    name: Any = None
    description: str | None = None
    completed: Any = None
    due_date: str | None = None
    priority: str | None = None


class TaskUpdate(BaseModel):
    """Request model for a partial task update."""

    name: Any = None
    description: str | None = None
    completed: Any = None
    due_date: str | None = None
    priority: str | None = None


class TaskResponse(BaseModel):
    """Response model for a task."""

    id: int
    name: str
    description: str | None = ""
    due_date: str | None = None
    priority: str
    completed: bool
    created_at: str


class DeleteResponse(BaseModel):
    """Response model for a deleted task."""

    message: str
    id: int
