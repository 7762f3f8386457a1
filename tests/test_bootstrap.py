# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from twolist.cli.bootstrap import create_initial_state, load_state
from twolist.errors import PersistenceError
from twolist.logging_setup import CONSOLE_LEVELS, ConsoleLevelFilter, setup_logging
from twolist.storage import JSONFileKeyValueStorage
from twolist.todos.todo_models import Category

from .fakes import FailingStorage


@pytest.mark.asyncio
async def test_state_survives_restart_with_json_backend(settings: SimpleNamespace) -> None:
    settings.storage_backend = "json"

    state = create_initial_state(settings=settings)
    assert isinstance(state.store._storage, JSONFileKeyValueStorage)  # noqa: SLF001
    assert settings.data_dir.is_dir()
    await load_state(state)
    await state.store.create("Buy milk")
    await state.store.set_category(Category.TRAVEL)

    restarted = await load_state(create_initial_state(settings=settings))

    assert [i.text for i in restarted.store.items().values()] == ["Buy milk"]
    assert restarted.store.category is Category.TRAVEL


@pytest.mark.asyncio
async def test_strict_setting_reaches_store(settings: SimpleNamespace) -> None:
    settings.strict_persistence = True
    state = create_initial_state(settings=settings, storage=FailingStorage())

    with pytest.raises(PersistenceError):
        await state.store.create("a")


def test_confirm_delete_setting_reaches_state(settings: SimpleNamespace) -> None:
    settings.confirm_delete = False
    assert create_initial_state(settings=settings).confirm_delete is False


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("twolist.test").debug("hello file")
        for h in logging.getLogger().handlers:
            h.flush()
        assert log_file == tmp_path / "logs" / "twolist.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("twolist.todos.todo_store", logging.INFO, True),
        ("twolist", logging.DEBUG, True),
        ("twolist.storage.sqlite_kv", logging.INFO, False),
        ("twolist.storage.sqlite_kv", logging.WARNING, True),
        ("twolist.connectors.console_connector", logging.INFO, False),
        ("twolistx", logging.WARNING, False),
        ("py.warnings", logging.WARNING, False),
        ("asyncio", logging.WARNING, False),
        ("asyncio", logging.ERROR, True),
    ],
)
def test_console_filter_uses_longest_prefix(name: str, level: int, shown: bool) -> None:
    assert ConsoleLevelFilter(CONSOLE_LEVELS).filter(_record(name, level)) is shown


def test_console_filter_accepts_custom_levels() -> None:
    f = ConsoleLevelFilter({"app": logging.INFO}, default=logging.CRITICAL)
    assert f.floor_for("app.sub") == logging.INFO
    assert f.floor_for("other") == logging.CRITICAL
