# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from functools import partial

from ..errors import (
    InvalidDetailError,
    InvalidKeywordError,
    InvalidTaskDetailError,
    TaskIndexError,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, ToDo
from .parser import VALID_KEYWORDS, Command, parse, parse_command, parse_date

CommandFn = Callable[[TaskList, list[str], str], str]
TaskBuilder = Callable[[str], Task]

logger = logging.getLogger(__name__)

LIST_HEADER = "Here are the tasks in your list:"
FIND_HEADER = "Here are the matching tasks in your list:"

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

_INDEX_RE = re.compile(r"[+-]?\d+")

MUTATING_COMMANDS = frozenset(
    {
        Command.TODO,
        Command.DEADLINE,
        Command.EVENT,
        Command.MARK,
        Command.UNMARK,
        Command.DELETE,
    }
)


def invalid_keyword_message() -> str:
    keywords = ", ".join(f"'{k}'" for k in VALID_KEYWORDS)
    return f"You have entered an invalid keyword. Valid keywords are [{keywords}]"


def command_body(raw: str, command: Command) -> str:
    """
    Text after the keyword and exactly one separator character.

    Leading whitespace before the keyword is skipped. Everything after the
    separator is returned untrimmed, because marker positions are measured
    against it.
    """
    offset = len(raw) - len(raw.lstrip())
    return raw[offset + len(command.value) + 1 :]


def render_numbered(header: str, tasks: Iterable[Task]) -> str:
    lines = [header]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {task}")
    return "\n".join(lines)


def _count_line(n: int) -> str:
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


# ---- task builders (pure: body text -> Task) ----


def build_todo(body: str) -> ToDo:
    desc = body.strip()
    if not desc:
        raise InvalidTaskDetailError("todo description cannot be an empty string. Please retry")
    return ToDo(desc)


def build_deadline(body: str) -> Deadline:
    by_at = body.find(BY_MARKER)
    if by_at == -1:
        raise InvalidTaskDetailError("Missing 'by' parameter in deadline detail")

    # Marker right after the keyword (no description) or nothing after the marker.
    if by_at == 0 or by_at + len(BY_MARKER) + 1 >= len(body):
        raise InvalidTaskDetailError("Deadline description and/or by parameter cannot be empty")

    desc = body[:by_at].strip()
    by = parse_date(body[by_at + len(BY_MARKER) + 1 :].strip())
    if not desc or by is None:
        raise InvalidTaskDetailError(
            "Invalid or empty deadline description and/or by parameter"
        )
    return Deadline(desc, by=by)


def build_event(body: str) -> Event:
    from_at = body.find(FROM_MARKER)
    to_at = body.find(TO_MARKER)
    if from_at == -1 or to_at == -1 or from_at >= to_at:
        raise InvalidTaskDetailError("invalid /from and /to parameters. Please retry")

    empty_msg = "Event description and/or to/from parameters cannot be empty"
    from_end = from_at + len(FROM_MARKER) + 1
    to_end = to_at + len(TO_MARKER) + 1
    if from_at == 0 or from_end == to_at or to_end >= len(body):
        raise InvalidTaskDetailError(empty_msg)

    desc = body[:from_at].strip()
    start = body[from_end:to_at].strip()
    end = body[to_end:].strip()
    if not desc or not start or not end:
        raise InvalidTaskDetailError(empty_msg)
    return Event(desc, start=start, end=end)


TASK_BUILDERS: dict[Command, TaskBuilder] = {
    Command.TODO: build_todo,
    Command.DEADLINE: build_deadline,
    Command.EVENT: build_event,
}


# ---- command functions ----


def _parse_index(args: list[str], command: Command) -> int:
    """1-based index argument -> 0-based index."""
    if len(args) != 2 or not _INDEX_RE.fullmatch(args[1]):
        raise InvalidDetailError(f"Invalid detail after {command.value}. Please retry")
    return int(args[1]) - 1


def cmd_list(tasks: TaskList, args: list[str], raw: str) -> str:
    if len(args) != 1:
        raise InvalidDetailError("Invalid detail after keyword. Please retry")
    return render_numbered(LIST_HEADER, tasks)


def cmd_find(tasks: TaskList, args: list[str], raw: str) -> str:
    if len(args) != 2:
        raise InvalidDetailError("Invalid detail after keyword. Please retry")
    return render_numbered(FIND_HEADER, tasks.find(args[1]))


def _set_done(tasks: TaskList, args: list[str], command: Command, done: bool) -> str:
    index = _parse_index(args, command)
    try:
        task = tasks.mark(index, done)
    except TaskIndexError as e:
        raise InvalidDetailError(f"Invalid detail after {command.value}. Please retry") from e

    if done:
        return f"Nice! I've marked this task as done:\n  {task}"
    return f"OK, I've marked this task as not done yet:\n  {task}"


def cmd_mark(tasks: TaskList, args: list[str], raw: str) -> str:
    return _set_done(tasks, args, Command.MARK, True)


def cmd_unmark(tasks: TaskList, args: list[str], raw: str) -> str:
    return _set_done(tasks, args, Command.UNMARK, False)


def cmd_delete(tasks: TaskList, args: list[str], raw: str) -> str:
    index = _parse_index(args, Command.DELETE)
    try:
        task = tasks.delete(index)
    except TaskIndexError as e:
        raise InvalidDetailError("Invalid detail after delete. Please retry") from e
    return f"Noted. I've removed this task:\n  {task}\n{_count_line(tasks.size())}"


class CommandHandler:
    """
    Single entry point for interpreting a command against a TaskList.

    Every operation returns the user-facing text; failures raise a
    TrackerError subclass and leave the list untouched. Rendering/printing
    is up to the caller (console connector, tests...).
    """

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandFn] = {}
        self._builders: dict[Command, TaskBuilder] = dict(TASK_BUILDERS)

        self.register(Command.LIST, cmd_list)
        self.register(Command.FIND, cmd_find)
        self.register(Command.MARK, cmd_mark)
        self.register(Command.UNMARK, cmd_unmark)
        self.register(Command.DELETE, cmd_delete)
        for command in self._builders:
            self.register(command, partial(self._cmd_add, command))

    def register(self, command: Command, fn: CommandFn) -> None:
        self._handlers[command] = fn

    @staticmethod
    def mutates(command: Command | None) -> bool:
        return command in MUTATING_COMMANDS

    def is_task_command(self, command: Command | None) -> bool:
        return command in self._builders

    def build_task(self, raw: str, command: Command) -> Task:
        """Construct the task described by `raw` without touching any list."""
        builder = self._builders.get(command)
        if builder is None:
            raise InvalidKeywordError(f"'{command.value}' does not create a task")
        return builder(command_body(raw, command))

    def _cmd_add(self, command: Command, tasks: TaskList, args: list[str], raw: str) -> str:
        task = self.build_task(raw, command)
        tasks.add(task)
        return f"Got it. I've added this task:\n  {task}\n{_count_line(tasks.size())}"

    def handle(self, raw: str, command: Command | None, tasks: TaskList) -> str:
        fn = self._handlers.get(command) if command is not None else None
        if fn is None:
            raise InvalidKeywordError(invalid_keyword_message())

        args = parse(raw)
        result = fn(tasks, args, raw)
        logger.debug("Command handled command=%s size=%s", command.value, tasks.size())
        return result

    def execute(self, raw: str, tasks: TaskList) -> str:
        """Tokenize, classify and handle one line of user input."""
        args = parse(raw)
        command = parse_command(args[0] if args else None)
        return self.handle(raw, command, tasks)
