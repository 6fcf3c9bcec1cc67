"""SQLite database operations for tasks."""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Largest value an SQLite INTEGER column can hold.
MAX_ROW_ID = 2**63 - 1

# Columns a caller may write. id and created_at are owned by the store.
WRITABLE_FIELDS = ("name", "description", "completed", "due_date", "priority")

SAMPLE_TASKS = [
    {
        "name": "Item 1",
        "description": "Olympics opening ceremony",
        "completed": False,
        "due_date": "2026-02-06",
        "priority": "high",
    },
    {
        "name": "Item 2",
        "description": "Book hotel",
        "completed": False,
        "due_date": "2025-12-01",
        "priority": "medium",
    },
    {
        "name": "Item 3",
        "description": "Buy ski tickets",
        "completed": True,
        "due_date": "2025-11-15",
        "priority": "low",
    },
]


def _row_to_task(row: sqlite3.Row) -> dict:
    task = dict(row)
    task["completed"] = bool(task["completed"])
    return task


def _to_column(field: str, value: Any) -> Any:
    if field == "completed":
        return 1 if value else 0
    return value


class TaskStore:
    """Task persistence on a single SQLite table.

    Each store owns one connection, so ``":memory:"`` gives every instance its
    own isolated database. Statements are serialized with a lock because
    FastAPI runs sync endpoints in a worker thread pool.
    """

    def __init__(self, db_path: str | Path = MEMORY_DATABASE, seed: bool = True):
        self.db_path = str(db_path)
        self.seed = seed
        if self.db_path != MEMORY_DATABASE:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        if self.db_path != MEMORY_DATABASE:
            self._conn.execute("PRAGMA journal_mode=WAL")

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Run statements under the store lock, committing on success."""
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except Exception:
                self._conn.rollback()
                raise

    def close(self) -> None:
        self._conn.close()

    def initialize(self) -> None:
        """Create the schema; seed sample tasks only when the table is new."""
        with self._transaction() as conn:
            existing = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'items'"
            ).fetchone()
            conn.execute("""
                CREATE TABLE IF NOT EXISTS items (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    description TEXT DEFAULT '',
                    completed INTEGER NOT NULL DEFAULT 0,
                    due_date TEXT,
                    priority TEXT NOT NULL DEFAULT 'medium',
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_items_created_at
                ON items(created_at)
            """)
            if existing is None and self.seed:
                conn.executemany(
                    """
                    INSERT INTO items (name, description, completed, due_date, priority)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            task["name"],
                            task["description"],
                            _to_column("completed", task["completed"]),
                            task["due_date"],
                            task["priority"],
                        )
                        for task in SAMPLE_TASKS
                    ],
                )
                logger.info("Seeded %d sample tasks", len(SAMPLE_TASKS))
        logger.info("TaskStore ready db=%s total=%d", self.db_path, self.count())

    def insert(self, fields: dict[str, Any]) -> dict:
        """Insert a task, filling defaults for omitted optional fields."""
        values = (
            fields["name"],
            fields.get("description", ""),
            _to_column("completed", fields.get("completed", False)),
            fields.get("due_date"),
            fields.get("priority", "medium"),
        )
        with self._transaction() as conn:
            cursor = conn.execute(
                """
                INSERT INTO items (name, description, completed, due_date, priority)
                VALUES (?, ?, ?, ?, ?)
                """,
                values,
            )
            task_id = cursor.lastrowid
        return self.get(task_id)

    def get(self, task_id: int) -> dict | None:
        """Get a task by ID."""
        if task_id > MAX_ROW_ID:
            return None
        with self._transaction() as conn:
            row = conn.execute("SELECT * FROM items WHERE id = ?", (task_id,)).fetchone()
        return _row_to_task(row) if row else None

    def list_all(self) -> list[dict]:
        """Get all tasks, newest first."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT * FROM items ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [_row_to_task(row) for row in rows]

    def update(self, task_id: int, fields: dict[str, Any]) -> dict | None:
        """Apply only the supplied fields in a single UPDATE statement."""
        if task_id > MAX_ROW_ID:
            return None
        updates = []
        params = []
        for field in WRITABLE_FIELDS:
            if field in fields:
                updates.append(f"{field} = ?")
                params.append(_to_column(field, fields[field]))

        with self._transaction() as conn:
            if updates:
                params.append(task_id)
                cursor = conn.execute(
                    f"UPDATE items SET {', '.join(updates)} WHERE id = ?",
                    params,
                )
                if cursor.rowcount == 0:
                    return None
        return self.get(task_id)

    def delete(self, task_id: int) -> bool:
        """Delete a task by ID."""
        if task_id > MAX_ROW_ID:
            return False
        with self._transaction() as conn:
            cursor = conn.execute("DELETE FROM items WHERE id = ?", (task_id,))
            return cursor.rowcount > 0

    def count(self) -> int:
        with self._transaction() as conn:
            return conn.execute("SELECT COUNT(*) FROM items").fetchone()[0]
