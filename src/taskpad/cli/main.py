# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the store), runs the console
REPL and saves on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StoreError
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state, save_tasks

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    if not state.dirty:
        return
    err = save_tasks(state)
    if err:
        print(f"[STORE] {err}", file=sys.stderr)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (store=%s)...", settings.app_name, settings.store_path)

    try:
        state = create_initial_state(settings=settings)
    except StoreError as e:
        logger.error("Could not load tasks: %s", e)
        print(f"Could not load tasks: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
