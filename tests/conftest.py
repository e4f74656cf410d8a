# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.commands import CommandHandler
from taskpad.core.state import AppState
from taskpad.tasks.task_list import TaskList
from taskpad.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        store_path=tmp_path / "data" / "tasks.txt",
        write_through=True,
        start_empty_if_missing=True,
    )


@pytest.fixture()
def handler() -> CommandHandler:
    return CommandHandler()


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def filled(handler: CommandHandler, tasks: TaskList) -> TaskList:
    """Three tasks, one of each kind."""
    handler.execute("todo read book", tasks)
    handler.execute("deadline return book /by 2/12/2023", tasks)
    handler.execute("event project meeting /from Mon 2pm /to 4pm", tasks)
    return tasks


@pytest.fixture()
def state(settings: SimpleNamespace, handler: CommandHandler, tasks: TaskList) -> AppState:
    return AppState(
        settings=settings,
        tasks=tasks,
        handler=handler,
        store=TaskStore(settings.store_path, handler),
        write_through=True,
    )
