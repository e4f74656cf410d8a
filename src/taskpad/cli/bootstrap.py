# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires handler + store + task list into AppState,
- applies the missing-store policy (start empty vs abort),
- saves the list back to the store.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StoreNotFoundError, StoreWriteError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .commands import CommandHandler

logger = logging.getLogger(__name__)


def load_tasks(store: TaskStore, *, start_empty_if_missing: bool = True) -> TaskList:
    """
    Load the store.

    A missing store gives an empty list when start_empty_if_missing is set,
    otherwise StoreNotFoundError propagates. Corruption always propagates.
    """
    try:
        return store.load()
    except StoreNotFoundError:
        if not start_empty_if_missing:
            raise
        logger.info("No store at %s, starting with an empty list.", store.path)
        return TaskList()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    handler = CommandHandler()
    store = TaskStore(settings.store_path, handler)
    tasks = load_tasks(store, start_empty_if_missing=settings.start_empty_if_missing)

    return AppState(
        settings=settings,
        tasks=tasks,
        handler=handler,
        store=store,
        write_through=settings.write_through,
    )


def save_tasks(state: AppState) -> str | None:
    """
    Write the task list to the store.

    Returns None on success, or a user-facing error message. A failed save
    leaves state.dirty set so a later save can retry.
    """
    try:
        state.store.save(state.tasks)
    except StoreWriteError as e:
        return str(e)
    state.dirty = False
    return None
