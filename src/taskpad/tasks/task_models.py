# tasks/task_models.py

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from ..cli.parser import display_date
from ..errors import InvalidTaskDetailError


@dataclass(slots=True)
class Task(ABC):
    """
    Base task: a non-empty description plus a mutable done flag.

    Subclasses add their own details and a one-letter type icon.
    Equality is by value (variant + all fields), which is what the store
    round-trip compares.
    """

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        self.description = _require_text(self.description, "description")

    @property
    @abstractmethod
    def type_icon(self) -> str: ...

    @property
    def name(self) -> str:
        return self.description

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def set_done(self, done: bool) -> None:
        self.done = bool(done)

    def details(self) -> str:
        return ""

    def render(self) -> str:
        return f"[{self.type_icon}][{self.status_icon}] {self.description}{self.details()}"

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class ToDo(Task):
    @property
    def type_icon(self) -> str:
        return "T"


@dataclass(slots=True)
class Deadline(Task):
    by: date = field(kw_only=True)

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if not isinstance(self.by, date):
            raise InvalidTaskDetailError("Deadline 'by' must be a calendar date")

    @property
    def type_icon(self) -> str:
        return "D"

    def details(self) -> str:
        return f" (by: {display_date(self.by)})"


@dataclass(slots=True)
class Event(Task):
    # Free text, stored verbatim (not required to be a date).
    start: str = field(kw_only=True)
    end: str = field(kw_only=True)

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.start = _require_text(self.start, "from")
        self.end = _require_text(self.end, "to")

    @property
    def type_icon(self) -> str:
        return "E"

    def details(self) -> str:
        return f" (from: {self.start} to: {self.end})"


def _require_text(value: str, what: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InvalidTaskDetailError(f"Task {what} cannot be empty")
    return text
