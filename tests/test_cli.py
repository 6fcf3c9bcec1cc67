import os
from pathlib import Path

import pytest

from task_tracker import cli
from task_tracker.db import TaskStore


@pytest.fixture()
def db_path(tmp_path: Path, monkeypatch) -> str:
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return str(tmp_path / "cli.sqlite3")


def run(db_path: str, *args: str) -> int:
    return cli.main(["--db", db_path, *args])


def test_add_and_list(db_path: str, capsys) -> None:
    assert run(db_path, "add", "Buy tickets", "--priority", "high", "--due", "2026-02-06") == 0
    assert "Added" in capsys.readouterr().out

    assert run(db_path, "list", "--sort", "priority") == 0
    out = capsys.readouterr().out
    assert "Buy tickets" in out
    assert "High" in out
    assert "Feb 6, 2026" in out


def test_done_and_filter(db_path: str, capsys) -> None:
    run(db_path, "add", "Finish slides")
    capsys.readouterr()

    store = TaskStore(db_path)
    task_id = max(t["id"] for t in store.list_all())
    store.close()

    assert run(db_path, "done", str(task_id)) == 0
    assert "Completed" in capsys.readouterr().out

    run(db_path, "list", "--status", "incomplete")
    assert "Finish slides" not in capsys.readouterr().out

    assert run(db_path, "undo", str(task_id)) == 0
    run(db_path, "list", "--status", "incomplete")
    assert "Finish slides" in capsys.readouterr().out


def test_delete_twice_fails(db_path: str, capsys) -> None:
    run(db_path, "add", "Throwaway")
    store = TaskStore(db_path)
    task_id = max(t["id"] for t in store.list_all())
    store.close()

    assert run(db_path, "delete", str(task_id)) == 0
    assert run(db_path, "delete", str(task_id)) == 1
    assert "Item not found" in capsys.readouterr().err


def test_invalid_name_reports_error(db_path: str, capsys) -> None:
    assert run(db_path, "add", "   ") == 1
    assert "Item name is required" in capsys.readouterr().err


def test_invalid_id_reports_error(db_path: str, capsys) -> None:
    assert run(db_path, "done", "abc") == 1
    assert "Valid item ID is required" in capsys.readouterr().err


@pytest.fixture()
def uvicorn_calls(monkeypatch) -> list:
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return calls


def test_serve_runs_app_object(uvicorn_calls: list) -> None:
    from fastapi import FastAPI

    assert cli.main(["serve", "--port", "9001"]) == 0

    app, kwargs = uvicorn_calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs["port"] == 9001
    assert "reload" not in kwargs


def test_serve_reload_uses_import_string(uvicorn_calls: list, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATABASE_PATH", ":memory:")
    db = str(tmp_path / "served.sqlite3")

    assert cli.main(["--db", db, "serve", "--reload"]) == 0

    app, kwargs = uvicorn_calls[0]
    assert app == "task_tracker.main:app"
    assert kwargs["reload"] is True
    assert os.environ["TASK_TRACKER_DATABASE_PATH"] == db


def test_add_rejects_unknown_priority(db_path: str) -> None:
    with pytest.raises(SystemExit):
        run(db_path, "add", "Odd", "--priority", "urgent")
