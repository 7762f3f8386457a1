# src/twolist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol, cast

from ..core.state import AppState
from ..todos.todo_api import render_list, todo_id_at
from ..todos.todo_models import Category


class CommandIO(Protocol):
    """What a connector offers to command handlers besides the return value."""

    def emit(self, text: str) -> None: ...

    async def confirm(self, question: str) -> bool: ...


CommandHandler2 = Callable[[AppState, list[str]], Awaitable[str]]
CommandHandler3 = Callable[[AppState, list[str], CommandIO | None], Awaitable[str]]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /work, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        io: CommandIO | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return await h3(state, args, io)

        h2 = cast(CommandHandler2, handler)
        return await h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other line adds a to-do (or saves the open edit).")
        return "\n".join(lines)


registry = CommandRegistry()


def _bad_position(args: list[str], usage: str) -> str:
    if not args:
        return f"Usage: {usage}"
    return f"No to-do #{args[0]} in this list."


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state.store)


async def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    counts = store.counts()
    session = store.edit_session
    lines = [
        "Status:",
        f"  Showing: {store.category.value}",
        f"  Work: {counts[Category.WORK][0]} open, {counts[Category.WORK][1]} done",
        f"  Travel: {counts[Category.TRAVEL][0]} open, {counts[Category.TRAVEL][1]} done",
        f"  Editing: {'yes' if session is not None else 'no'}",
        f"  Storage: {getattr(state.settings, 'storage_backend', '?')}",
    ]
    return "\n".join(lines)


async def cmd_work(state: AppState, args: list[str]) -> str:
    await state.store.set_category(Category.WORK)
    return render_list(state.store)


async def cmd_travel(state: AppState, args: list[str]) -> str:
    await state.store.set_category(Category.TRAVEL)
    return render_list(state.store)


async def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text...>  -> add to the active list
    /add            -> add the pending draft (if any)
    """
    text = " ".join(args) if args else None
    res = await state.store.create(text)
    if res is None:
        return "Nothing to add."
    return render_list(state.store)


async def cmd_done(state: AppState, args: list[str]) -> str:
    todo_id = todo_id_at(state.store, args[0]) if args else None
    if todo_id is None:
        return _bad_position(args, "/done <n>")
    await state.store.toggle_complete(todo_id)
    return render_list(state.store)


async def cmd_rm(state: AppState, args: list[str], io: CommandIO | None = None) -> str:
    """
    /rm <n> -> delete after confirmation (unless confirm_delete is off)
    """
    todo_id = todo_id_at(state.store, args[0]) if args else None
    if todo_id is None:
        return _bad_position(args, "/rm <n>")

    if state.confirm_delete:
        ok = await io.confirm("Delete To Do? Are you sure?") if io is not None else False
        if not ok:
            return "Cancelled."

    await state.store.delete(todo_id)
    return render_list(state.store)


async def cmd_edit(state: AppState, args: list[str], io: CommandIO | None = None) -> str:
    """
    /edit <n>           -> start editing; the next plain line replaces the text
    /edit <n> <text...> -> replace the text right away
    """
    todo_id = todo_id_at(state.store, args[0]) if args else None
    if todo_id is None:
        return _bad_position(args, "/edit <n> [new text]")

    store = state.store
    store.begin_edit(todo_id)
    if len(args) > 1:
        await store.commit_edit(" ".join(args[1:]))
        return render_list(store)

    if io is not None:
        io.emit("Type the new text, then Enter. /save keeps it as is, /cancel aborts.")
    return render_list(store)


async def cmd_save(state: AppState, args: list[str]) -> str:
    if state.store.edit_session is None:
        return "Not editing anything."
    res = await state.store.commit_edit()
    if res is None:
        return "Text can't be empty."
    return render_list(state.store)


async def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.store.cancel_edit():
        return "Not editing anything."
    return render_list(state.store)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the active list.", aliases=["ls", "l"])
registry.register("status", cmd_status, help_text="Show counts and storage backend.")
registry.register("work", cmd_work, help_text="Switch to the Work list.", aliases=["w"])
registry.register("travel", cmd_travel, help_text="Switch to the Travel list.", aliases=["t"])
registry.register("add", cmd_add, help_text="Add a to-do: /add <text>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completed: /done <n>.", aliases=["x"])
registry.register("rm", cmd_rm, help_text="Delete a to-do: /rm <n>.", aliases=["del"])
registry.register("edit", cmd_edit, help_text="Edit a to-do: /edit <n> [text].", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the open edit.")
registry.register("cancel", cmd_cancel, help_text="Discard the open edit.")
