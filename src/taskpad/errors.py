# src/taskpad/errors.py

"""
Error taxonomy.

Every error here is user-level and recoverable: the console connector shows
`str(err)` and keeps the session alive. Store errors are split so that the
bootstrap code can choose a policy (start empty vs abort).
"""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for all taskpad errors."""


class InvalidKeywordError(TrackerError):
    """First token of the input is not a known command."""


class InvalidDetailError(TrackerError):
    """Wrong argument count/shape for a command (bad index, extra words...)."""


class InvalidTaskDetailError(InvalidDetailError):
    """Missing/empty description, date or from/to span, or an unparsable date."""


class TaskIndexError(TrackerError, IndexError):
    """Index outside [0, size) of the task list."""


class StoreError(TrackerError):
    """Base class for store (file) problems."""


class StoreLoadError(StoreError):
    """Store could not be read."""


class StoreNotFoundError(StoreLoadError):
    """Store file does not exist."""


class StoreCorruptedError(StoreError):
    """A persisted line failed to replay."""


class StoreWriteError(StoreError):
    """I/O error while saving. In-memory tasks stay valid."""
