# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.bootstrap import save_tasks
from ..cli.parser import is_bye, parse, parse_command
from ..core.state import AppState
from ..errors import TrackerError

logger = logging.getLogger(__name__)

GOODBYE = "Bye. Hope to see you again soon!"


def _print(text: str) -> None:
    print(text, flush=True)


def handle_line(state: AppState, user_input: str) -> str:
    """
    Run one command and return the text to show.

    Command errors become their message; a mutating command is saved right
    away when write-through is on.
    """
    parts = parse(user_input)
    command = parse_command(parts[0] if parts else None)

    try:
        reply = state.handler.handle(user_input, command, state.tasks)
    except TrackerError as e:
        logger.debug("Command rejected input=%r: %s", user_input, e)
        return str(e)

    if state.handler.mutates(command):
        state.dirty = True
        if state.write_through:
            err = save_tasks(state)
            if err:
                reply = f"{reply}\n[STORE] {err}"
    return reply


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console connector started (tasks=%s).", state.tasks.size())
    _print(f"Hello! I'm {app_name}.\nWhat can I do for you?")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if is_bye(user_input):
            logger.info("Console exit command received.")
            break

        _print(handle_line(state, user_input))

    _print(GOODBYE)
    logger.info("Console connector finished.")
