# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import Console, StdConsole
from ..core.state import AppState

logger = logging.getLogger(__name__)

STARTUP_TEXT = "Welcome to TaskList! Type 'help' for available commands."
PROMPT = "> "
QUIT_COMMANDS = ("quit", "exit")


def run_console_loop(
    state: AppState,
    console: Console | None = None,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Read commands line by line until "quit" (or EOF) and print the replies.

    A crashing handler is logged and reported; the loop keeps running.
    """
    console = console or StdConsole()
    registry = registry or command_registry

    logger.info("Console connector started.")
    console.write_line(STARTUP_TEXT)

    while True:
        console.write(PROMPT)
        try:
            line = console.read_line()
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write_line()
            break

        if line is None:
            logger.info("Console EOF received, exiting.")
            break

        user_input = line.strip()
        if not user_input:
            continue

        if user_input.lower() in QUIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed: %r", user_input)
            reply = "Internal error while handling a command."

        if reply:
            console.write_line(reply)

    logger.info("Console connector finished.")
