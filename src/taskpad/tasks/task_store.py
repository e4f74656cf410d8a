# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..cli.commands import CommandHandler
from ..cli.parser import Command, format_date, parse, parse_command
from ..errors import (
    StoreCorruptedError,
    StoreLoadError,
    StoreNotFoundError,
    StoreWriteError,
    TrackerError,
)
from .task_list import TaskList
from .task_models import Deadline, Event, Task, ToDo

logger = logging.getLogger(__name__)

DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


def encode_task(task: Task) -> str:
    """
    One store line (without the newline):

      todo <desc><0|1>
      deadline <desc> /by <d/M/yyyy><0|1>
      event <desc> /from <from> /to <to><0|1>

    The done flag is glued to the last field with no separator.
    """
    flag = DONE_FLAG if task.done else NOT_DONE_FLAG
    if isinstance(task, ToDo):
        return f"{Command.TODO.value} {task.description}{flag}"
    if isinstance(task, Event):
        return f"{Command.EVENT.value} {task.description} /from {task.start} /to {task.end}{flag}"
    if isinstance(task, Deadline):
        return f"{Command.DEADLINE.value} {task.description} /by {format_date(task.by)}{flag}"
    raise TypeError(f"Unsupported task type: {type(task).__name__}")


def decode_line(line: str, handler: CommandHandler) -> Task:
    """
    Replay one store line ("import mode").

    The last character is the done flag; the rest is a normal add command,
    built through the same code path as user input.
    """
    if len(line) < 2:
        raise StoreCorruptedError(f"Line too short: {line!r}")

    body, flag = line[:-1], line[-1]
    if flag not in (DONE_FLAG, NOT_DONE_FLAG):
        raise StoreCorruptedError(f"Bad done flag {flag!r} in line {line!r}")

    parts = parse(body)
    command = parse_command(parts[0] if parts else None)
    if command is None or not handler.is_task_command(command):
        raise StoreCorruptedError(f"Not a task line: {line!r}")

    task = handler.build_task(body, command)
    task.set_done(flag == DONE_FLAG)
    return task


class TaskStore:
    """
    Flat text store for a TaskList.

    - load() replays every line; any failure aborts the whole load
    - save() rewrites the file (temp file + os.replace)
    - a missing file is reported as StoreNotFoundError; starting empty is the
      caller's decision
    """

    def __init__(self, path: str | Path, handler: CommandHandler | None = None) -> None:
        self._path = Path(path)
        self._handler = handler or CommandHandler()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        try:
            # newline="": only "\n" (optionally preceded by "\r") ends a line.
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise StoreNotFoundError(f"Could not locate existing file list at {self._path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreLoadError(f"Could not read file list at {self._path}: {e}") from e

        tasks = TaskList()
        for lineno, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                tasks.add(decode_line(line, self._handler))
            except TrackerError as e:
                logger.warning("Store line %s failed to replay: %s", lineno, e)
                raise StoreCorruptedError(
                    "Error in parsing file. Some of the contents may be corrupted "
                    f"(line {lineno})"
                ) from e

        logger.info("TaskStore loaded path=%s total=%s", self._path, tasks.size())
        return tasks

    def save(self, tasks: TaskList) -> None:
        data = "".join(encode_task(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(data, encoding="utf-8", newline="")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise StoreWriteError(f"Error in saving tasks to {self._path}: {e}") from e

        logger.debug("TaskStore saved path=%s total=%s", self._path, tasks.size())
