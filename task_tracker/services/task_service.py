"""Request handlers for tasks, independent of the HTTP framework."""

import logging
import sqlite3
from typing import Any

from ..db import TaskStore
from ..db.client import MAX_ROW_ID
from ..errors import InternalError, NotFoundError, ValidationError
from ..helpers import is_valid_task_name

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Item name is required"
INVALID_ID = "Valid item ID is required"
NOT_FOUND = "Item not found"
DELETED = "Item deleted successfully"

# Fields accepted from callers; anything else in the payload is ignored.
TASK_FIELDS = ("name", "description", "completed", "due_date", "priority")


def parse_task_id(value: Any) -> int:
    """Parse a path identifier into a positive integer task ID."""
    if isinstance(value, bool):
        raise ValidationError(INVALID_ID)
    if isinstance(value, int):
        task_id = value
    else:
        text = str(value).strip() if value is not None else ""
        if not (text.isascii() and text.isdigit()):
            raise ValidationError(INVALID_ID)
        digits = text.lstrip("0") or "0"
        # Anything longer than the row id limit cannot match a stored task.
        task_id = int(digits) if len(digits) <= len(str(MAX_ROW_ID)) else MAX_ROW_ID + 1
    if task_id <= 0:
        raise ValidationError(INVALID_ID)
    return task_id


def normalize_completed(value: Any) -> bool:
    """Coerce input to a strict boolean; "0" and "false" strings are False."""
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false", "no", "off"}
    return bool(value)


def _supplied(fields: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in fields.items()
        if key in TASK_FIELDS and value is not None
    }


class TaskService:
    """Validate task requests and apply them to a store."""

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> list[dict]:
        try:
            return self.store.list_all()
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Error fetching items")
            raise InternalError("Failed to fetch items") from exc

    def get_task(self, identifier: Any) -> dict:
        task_id = parse_task_id(identifier)
        try:
            task = self.store.get(task_id)
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Error fetching item id=%s", task_id)
            raise InternalError("Failed to fetch item") from exc
        if task is None:
            raise NotFoundError(NOT_FOUND)
        return task

    def create_task(self, fields: dict[str, Any]) -> dict:
        fields = _supplied(fields)
        if not is_valid_task_name(fields.get("name")):
            raise ValidationError(NAME_REQUIRED)
        fields["completed"] = normalize_completed(fields.get("completed", False))

        try:
            task = self.store.insert(fields)
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Error creating item")
            raise InternalError("Failed to create item") from exc
        logger.info("Created item id=%s name=%r", task["id"], task["name"])
        return task

    def update_task(self, identifier: Any, fields: dict[str, Any]) -> dict:
        task_id = parse_task_id(identifier)
        changes = _supplied(fields)
        if "name" in changes and not is_valid_task_name(changes["name"]):
            raise ValidationError(NAME_REQUIRED)
        if "completed" in changes:
            changes["completed"] = normalize_completed(changes["completed"])

        try:
            if self.store.get(task_id) is None:
                raise NotFoundError(NOT_FOUND)
            task = self.store.update(task_id, changes)
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Error updating item id=%s", task_id)
            raise InternalError("Failed to update item") from exc
        if task is None:
            # Removed between the existence check and the update.
            raise NotFoundError(NOT_FOUND)
        logger.info("Updated item id=%s fields=%s", task_id, sorted(changes))
        return task

    def delete_task(self, identifier: Any) -> dict:
        task_id = parse_task_id(identifier)
        try:
            if self.store.get(task_id) is None:
                raise NotFoundError(NOT_FOUND)
            deleted = self.store.delete(task_id)
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Error deleting item id=%s", task_id)
            raise InternalError("Failed to delete item") from exc
        if not deleted:
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted item id=%s", task_id)
        return {"message": DELETED, "id": task_id}
