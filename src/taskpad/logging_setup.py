# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class ConsoleNoiseFilter(logging.Filter):
    """
    taskpad records pass (the handler level decides); everything else,
    captured warnings included, only at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskpad" or record.name.startswith("taskpad."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/taskpad",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """Install a filtered stderr handler and, unless log_dir is None, <log_dir>/taskpad.log."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "taskpad.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
