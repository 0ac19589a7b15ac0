# src/yapper/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.state import AppState
from ..errors import YapperError

logger = logging.getLogger(__name__)

PROMPT = "> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    Resolve and run one input line. Returns the reply, or None for blank input.

    YapperError from the registry, the handler or the save is turned into its
    message; anything else propagates.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return None
    name = parts[0]
    args = parts[1] if len(parts) > 1 else ""

    try:
        command = state.aliases.resolve(name)
        reply = command(state, args)
        if command.mutates:
            state.task_store.save(state.tasks)
    except YapperError as e:
        logger.debug("Command %r failed (%s): %s", name, e.kind, e)
        return e.message
    return reply


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "yapper"))
    logger.info("Console loop started (tasks=%d).", len(state.tasks))
    print(f"Hello! I'm {app_name}. What can I do for you? (type help for commands)")

    while state.running:
        try:
            user_input = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console loop finished.")
