# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..cli.commands import CommandHandler
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object

    tasks: TaskList
    handler: CommandHandler
    store: TaskStore

    write_through: bool = True
    # Set when the in-memory list has changes not yet written to the store.
    dirty: bool = False
