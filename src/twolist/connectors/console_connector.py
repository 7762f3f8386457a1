# src/twolist/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable

from ..cli.commands import CommandIO
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..todos.todo_api import placeholder_for, render_list

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")

InputFn = Callable[[str], str]


class ConsoleIO:
    """
    CommandIO over stdin/stdout.

    Each read runs input() on a daemon thread that hands the line back to
    the loop. A cancelled read (Ctrl+C) returns at once; a still-blocked
    reader thread does not hold up interpreter or event loop shutdown.
    """

    def __init__(self, input_fn: InputFn = input, print_fn: Callable[[str], None] = print) -> None:
        self._input = input_fn
        self._print = print_fn

    def emit(self, text: str) -> None:
        self._print(text)

    async def readline(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        fut: asyncio.Future[str] = loop.create_future()

        def _deliver(line: str | None, exc: Exception | None) -> None:
            if fut.done():
                return
            if exc is not None:
                fut.set_exception(exc)
            else:
                fut.set_result(line or "")

        def _read() -> None:
            try:
                line = self._input(prompt)
            except Exception as e:
                result: tuple[str | None, Exception | None] = (None, e)
            else:
                result = (line, None)
            # The loop may already be gone after Ctrl+C.
            with contextlib.suppress(RuntimeError):
                loop.call_soon_threadsafe(_deliver, *result)

        threading.Thread(target=_read, name="console-input", daemon=True).start()
        return await fut

    async def confirm(self, question: str) -> bool:
        try:
            answer = await self.readline(f"{question} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes", "i'm sure")


def _prompt(state: AppState) -> str:
    if state.store.edit_session is not None:
        return "edit> "
    return f"{placeholder_for(state.store.category)}> "


async def handle_line(state: AppState, line: str, io: CommandIO | None = None) -> str | None:
    """
    One user gesture.

    Slash commands go to the registry. A plain line saves the open edit if
    there is one, otherwise it becomes a new to-do in the active list.
    Returns what to print, or None for nothing.
    """
    if line.strip().startswith("/"):
        return await command_registry.handle(state, line.strip(), io)

    store = state.store
    if store.edit_session is not None:
        store.set_edit_text(line)
        if await store.commit_edit() is None:
            return "Text can't be empty."
        return render_list(store)

    store.set_draft(line)
    if await store.create() is None:
        return None
    return render_list(store)


async def run_console_loop(state: AppState, io: ConsoleIO | None = None) -> None:
    io = io or ConsoleIO()
    logger.info("Console connector started.")
    io.emit("Type a to-do and press Enter. Use /help for commands. Use /exit to quit.\n")
    io.emit(render_list(state.store))

    while True:
        try:
            line = await io.readline(_prompt(state))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            io.emit("")
            break
        except asyncio.CancelledError:
            logger.info("Console read cancelled, exiting.")
            io.emit("")
            raise

        if line.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            out = await handle_line(state, line, io)
        except Exception:
            logger.exception("Console handler crashed.")
            out = "Internal error while handling that line."

        if out is not None:
            io.emit(out)

    logger.info("Console connector finished.")
