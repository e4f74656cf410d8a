# tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, 0-indexed task container owned by the running session.

    Insertion order is display order. Deleting shifts later tasks down so
    indices stay contiguous. Negative indices are rejected (no Python-style
    wraparound).
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(
                f"Task index {index} out of bounds (size={len(self._tasks)})"
            )

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added index=%s task=%s", len(self._tasks) - 1, task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%s task=%s", index, task)
        return task

    def mark(self, index: int, done: bool) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        task.set_done(done)
        logger.debug("Task marked index=%s done=%s", index, done)
        return task

    def find(self, substring: str) -> list[Task]:
        """Tasks whose description contains `substring` (case-sensitive), in order."""
        return [t for t in self._tasks if substring in t.description]
