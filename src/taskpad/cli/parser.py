# cli/parser.py

"""
Command tokenizer and date helpers.

Dates are accepted in exactly one external form, day/month/year
("2/12/2023" or "02/12/2023"). The same form is used in the store so a
saved deadline always re-parses on load.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum


class Command(StrEnum):
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    DEADLINE = "deadline"
    EVENT = "event"
    TODO = "todo"


BYE_KEYWORD = "bye"
VALID_KEYWORDS: tuple[str, ...] = (
    "list",
    "todo",
    "deadline",
    "event",
    "mark",
    "unmark",
    "delete",
    "find",
    BYE_KEYWORD,
)

INPUT_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_DATE_FORMAT = "%b %d %Y"


def parse(raw: str) -> list[str]:
    """Split on runs of whitespace. Empty/blank input gives []."""
    return raw.split()


def parse_command(token: str | None) -> Command | None:
    if not token:
        return None
    try:
        return Command(token.lower())
    except ValueError:
        return None


def parse_date(text: str) -> date | None:
    """Return the date for a day/month/year string, or None if it does not parse."""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), INPUT_DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(d: date) -> str:
    # d/M/yyyy, no zero padding; parse_date() accepts it back.
    return f"{d.day}/{d.month}/{d.year}"


def display_date(d: date) -> str:
    """User-facing form, e.g. "Dec 02 2023"."""
    return d.strftime(DISPLAY_DATE_FORMAT)


def is_bye(raw: str) -> bool:
    return raw.strip().lower() == BYE_KEYWORD
