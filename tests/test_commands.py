# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from taskpad.cli.commands import FIND_HEADER, LIST_HEADER, CommandHandler, command_body
from taskpad.cli.parser import Command
from taskpad.errors import InvalidDetailError, InvalidKeywordError, InvalidTaskDetailError
from taskpad.tasks.task_list import TaskList
from taskpad.tasks.task_models import Deadline, Event, ToDo


def _snapshot(tasks: TaskList) -> list[str]:
    return [t.render() for t in tasks]


def test_command_body_consumes_keyword_and_one_separator() -> None:
    assert command_body("todo  two spaces", Command.TODO) == " two spaces"
    assert command_body("  event x", Command.EVENT) == "x"
    assert command_body("todo", Command.TODO) == ""


@pytest.mark.parametrize("desc", ["read book", "x", "buy 2 apples"])
def test_todo_adds_one_task(handler: CommandHandler, filled: TaskList, desc: str) -> None:
    before = filled.size()
    reply = handler.execute(f"todo {desc}", filled)
    assert filled.size() == before + 1
    assert desc in filled.get(before).render()
    assert reply == (
        f"Got it. I've added this task:\n  [T][ ] {desc}\n"
        f"Now you have {before + 1} tasks in the list."
    )


def test_added_reply_uses_singular_for_one_task(handler: CommandHandler, tasks: TaskList) -> None:
    assert handler.execute("todo a", tasks).endswith("Now you have 1 task in the list.")


@pytest.mark.parametrize("raw", ["todo", "todo ", "todo     "])
def test_todo_requires_description(handler: CommandHandler, tasks: TaskList, raw: str) -> None:
    with pytest.raises(InvalidTaskDetailError, match="todo description cannot be an empty"):
        handler.execute(raw, tasks)
    assert tasks.size() == 0


def test_deadline_parses_date(handler: CommandHandler, tasks: TaskList) -> None:
    handler.execute("deadline return book /by 2/12/2023", tasks)
    t = tasks.get(0)
    assert isinstance(t, Deadline)
    assert t.description == "return book"
    assert t.by == date(2023, 12, 2)


@pytest.mark.parametrize(
    "raw,match",
    [
        ("deadline return book", "Missing 'by'"),
        ("deadline /by 2/12/2023", "cannot be empty"),
        ("deadline Submit report /by", "cannot be empty"),
        ("deadline Submit report /by ", "cannot be empty"),
        ("deadline Submit report /by someday", "Invalid or empty"),
        ("deadline    /by 2/12/2023", "Invalid or empty"),
    ],
)
def test_deadline_rejections(handler: CommandHandler, filled: TaskList, raw: str, match: str) -> None:
    before = _snapshot(filled)
    with pytest.raises(InvalidTaskDetailError, match=match):
        handler.execute(raw, filled)
    assert _snapshot(filled) == before


def test_event_keeps_free_text_spans(handler: CommandHandler, tasks: TaskList) -> None:
    handler.execute("event project meeting /from Mon 2pm /to 4pm", tasks)
    t = tasks.get(0)
    assert isinstance(t, Event)
    assert (t.description, t.start, t.end) == ("project meeting", "Mon 2pm", "4pm")


@pytest.mark.parametrize(
    "raw,match",
    [
        ("event party", "invalid /from and /to"),
        ("event party /to 5 /from 4", "invalid /from and /to"),
        ("event /from x /to y", "cannot be empty"),
        ("event  /from x /to y", "cannot be empty"),
        ("event party /from /to y", "cannot be empty"),
        ("event party /from x /to", "cannot be empty"),
        ("event party /from   /to y", "cannot be empty"),
        ("event party /from/to y", "cannot be empty"),
    ],
)
def test_event_rejections(handler: CommandHandler, filled: TaskList, raw: str, match: str) -> None:
    before = _snapshot(filled)
    with pytest.raises(InvalidTaskDetailError, match=match):
        handler.execute(raw, filled)
    assert _snapshot(filled) == before


def test_list_renders_numbered(handler: CommandHandler, filled: TaskList) -> None:
    assert handler.execute("list", filled) == "\n".join(
        [
            LIST_HEADER,
            "1. [T][ ] read book",
            "2. [D][ ] return book (by: Dec 02 2023)",
            "3. [E][ ] project meeting (from: Mon 2pm to: 4pm)",
        ]
    )


def test_list_empty_is_header_only(handler: CommandHandler, tasks: TaskList) -> None:
    assert handler.execute("LIST", tasks) == LIST_HEADER


def test_list_rejects_arguments(handler: CommandHandler, tasks: TaskList) -> None:
    with pytest.raises(InvalidDetailError):
        handler.execute("list all", tasks)


def test_find_returns_matching_subsequence(handler: CommandHandler, filled: TaskList) -> None:
    assert handler.execute("find book", filled) == "\n".join(
        [FIND_HEADER, "1. [T][ ] read book", "2. [D][ ] return book (by: Dec 02 2023)"]
    )
    assert handler.execute("find Book", filled) == FIND_HEADER


@pytest.mark.parametrize("raw", ["find", "find two words"])
def test_find_requires_exactly_one_term(handler: CommandHandler, filled: TaskList, raw: str) -> None:
    with pytest.raises(InvalidDetailError):
        handler.execute(raw, filled)


def test_mark_then_unmark_restores_flag(handler: CommandHandler, filled: TaskList) -> None:
    before = _snapshot(filled)
    assert handler.execute("mark 2", filled) == (
        "Nice! I've marked this task as done:\n  [D][X] return book (by: Dec 02 2023)"
    )
    assert filled.get(1).done is True
    assert _snapshot(filled)[0] == before[0]
    assert _snapshot(filled)[2] == before[2]

    assert handler.execute("unmark 2", filled) == (
        "OK, I've marked this task as not done yet:\n  [D][ ] return book (by: Dec 02 2023)"
    )
    assert _snapshot(filled) == before


@pytest.mark.parametrize("raw", ["mark 0", "mark 99", "mark -1", "mark two", "mark", "mark 1 2", "unmark 4"])
def test_mark_rejections(handler: CommandHandler, filled: TaskList, raw: str) -> None:
    before = _snapshot(filled)
    with pytest.raises(InvalidDetailError, match="Invalid detail after"):
        handler.execute(raw, filled)
    assert _snapshot(filled) == before


def test_delete_removes_exactly_one(handler: CommandHandler, filled: TaskList) -> None:
    reply = handler.execute("delete 2", filled)
    assert reply == (
        "Noted. I've removed this task:\n  [D][ ] return book (by: Dec 02 2023)\n"
        "Now you have 2 tasks in the list."
    )
    assert [t.name for t in filled] == ["read book", "project meeting"]


@pytest.mark.parametrize("raw", ["delete 0", "delete 4", "delete x", "delete"])
def test_delete_rejections(handler: CommandHandler, filled: TaskList, raw: str) -> None:
    with pytest.raises(InvalidDetailError, match="Invalid detail after delete"):
        handler.execute(raw, filled)
    assert filled.size() == 3


@pytest.mark.parametrize("raw", ["blah", "", "   ", "bye"])
def test_unknown_keyword(handler: CommandHandler, tasks: TaskList, raw: str) -> None:
    with pytest.raises(InvalidKeywordError, match="Valid keywords are"):
        handler.execute(raw, tasks)


def test_handle_with_no_command(handler: CommandHandler, tasks: TaskList) -> None:
    with pytest.raises(InvalidKeywordError):
        handler.handle("whatever", None, tasks)


def test_build_task_does_not_touch_any_list(handler: CommandHandler) -> None:
    t = handler.build_task("todo  buy milk ", Command.TODO)
    assert t == ToDo("buy milk")
    with pytest.raises(InvalidKeywordError):
        handler.build_task("list", Command.LIST)


def test_mutates() -> None:
    assert CommandHandler.mutates(Command.TODO)
    assert CommandHandler.mutates(Command.DELETE)
    assert not CommandHandler.mutates(Command.LIST)
    assert not CommandHandler.mutates(Command.FIND)
    assert not CommandHandler.mutates(None)
