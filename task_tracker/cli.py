"""Command-line interface for the task tracker."""

import argparse
import logging
import os
import sys
from datetime import date

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Settings, get_settings
from .db import TaskStore
from .db.client import MEMORY_DATABASE
from .errors import TaskError
from .helpers import (
    filter_tasks_by_status,
    format_date,
    get_priority_label,
    is_overdue,
    sort_tasks,
)
from .logging_setup import setup_logging
from .models import Priority
from .services import TaskService

console = Console()

DEFAULT_CLI_DATABASE = "tasks.db"
STATUS_ICONS = {True: "✅", False: "⭕"}


# =============================================================================
# Display
# =============================================================================


def render_tasks(tasks: list[dict], today: date | None = None) -> Table:
    """Build a table of tasks with priority colors and overdue markers."""
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Task", style="bold", min_width=16)
    table.add_column("Priority", justify="center")
    table.add_column("Due")
    table.add_column("Done", justify="center")

    for task in tasks:
        label = get_priority_label(task.get("priority"))
        due = Text(format_date(task.get("due_date")))
        if is_overdue(task.get("due_date"), task.get("completed"), today=today):
            due.append(" overdue", style="bold red")
        table.add_row(
            str(task["id"]),
            task["name"],
            Text(label.text, style=label.color),
            due,
            STATUS_ICONS[bool(task.get("completed"))],
        )
    return table


# =============================================================================
# Commands
# =============================================================================


def cmd_list(service: TaskService, args: argparse.Namespace) -> None:
    tasks = filter_tasks_by_status(service.list_tasks(), args.status)
    tasks = sort_tasks(tasks, args.sort)
    if not tasks:
        console.print("[dim]No tasks.[/dim]")
        return
    console.print(render_tasks(tasks))


def cmd_add(service: TaskService, args: argparse.Namespace) -> None:
    task = service.create_task(
        {
            "name": args.name,
            "description": args.description,
            "due_date": args.due,
            "priority": args.priority,
        }
    )
    console.print(f"[green]Added[/green] #{task['id']} {task['name']}")


def cmd_done(service: TaskService, args: argparse.Namespace) -> None:
    task = service.update_task(args.id, {"completed": True})
    console.print(f"[green]Completed[/green] #{task['id']} {task['name']}")


def cmd_undo(service: TaskService, args: argparse.Namespace) -> None:
    task = service.update_task(args.id, {"completed": False})
    console.print(f"[yellow]Reopened[/yellow] #{task['id']} {task['name']}")


def cmd_delete(service: TaskService, args: argparse.Namespace) -> None:
    result = service.delete_task(args.id)
    console.print(f"[green]{result['message']}[/green] #{result['id']}")


def cmd_serve(settings: Settings, args: argparse.Namespace) -> None:
    import uvicorn

    from .main import create_app

    if args.reload:
        # The reloader re-imports the app in a subprocess, so the database
        # path has to travel through the environment.
        if args.db:
            os.environ["TASK_TRACKER_DATABASE_PATH"] = args.db
        uvicorn.run(
            "task_tracker.main:app",
            host=args.host,
            port=args.port,
            reload=True,
            log_config=None,
        )
        return

    app = create_app(
        settings.model_copy(update={"database_path": args.db}) if args.db else settings
    )
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


COMMANDS = {
    "list": cmd_list,
    "add": cmd_add,
    "done": cmd_done,
    "undo": cmd_undo,
    "delete": cmd_delete,
}


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-tracker", description="Track tasks.")
    parser.add_argument(
        "--db",
        default=None,
        help=(
            f"SQLite database file (default: {DEFAULT_CLI_DATABASE} for task commands, "
            "TASK_TRACKER_DATABASE_PATH or :memory: for serve)"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--reload", action="store_true", help="Restart on code changes")

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--sort", default="due_date", choices=["due_date", "priority", "none"]
    )
    list_parser.add_argument(
        "--status", default="all", choices=["all", "completed", "incomplete"]
    )

    add = subparsers.add_parser("add", help="Create a task")
    add.add_argument("name")
    add.add_argument("--description", default="")
    add.add_argument("--due", default=None, help="Due date (YYYY-MM-DD)")
    add.add_argument(
        "--priority",
        default=Priority.MEDIUM.value,
        choices=[p.value for p in Priority],
    )

    for name, help_text in (
        ("done", "Mark a task completed"),
        ("undo", "Mark a task not completed"),
        ("delete", "Delete a task"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("id")

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    if args.command == "serve":
        setup_logging(settings.log_level)
        cmd_serve(settings, args)
        return 0

    setup_logging(logging.WARNING)
    db_path = args.db
    if db_path is None:
        db_path = (
            settings.database_path
            if settings.database_path != MEMORY_DATABASE
            else DEFAULT_CLI_DATABASE
        )
    store = TaskStore(db_path, seed=settings.seed_sample_data)
    try:
        store.initialize()
        COMMANDS[args.command](TaskService(store), args)
    except TaskError as e:
        Console(stderr=True).print(f"[red]Error: {e.message}[/red]")
        return 1
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
