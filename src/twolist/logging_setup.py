# src/twolist/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

# Console floor per logger prefix; the longest matching prefix wins.
# The file handler ignores these and keeps everything.
CONSOLE_LEVELS: dict[str, int] = {
    "twolist": logging.DEBUG,
    "twolist.storage": logging.WARNING,
    "twolist.connectors": logging.WARNING,
    "py.warnings": logging.ERROR,
}
DEFAULT_CONSOLE_FLOOR = logging.ERROR


class ConsoleLevelFilter(logging.Filter):
    """Per-module minimum level for the console handler."""

    def __init__(self, levels: Mapping[str, int], default: int = DEFAULT_CONSOLE_FLOOR) -> None:
        super().__init__()
        # Longest prefix first so "twolist.storage" beats "twolist".
        self._levels = sorted(levels.items(), key=lambda kv: len(kv[0]), reverse=True)
        self._default = default

    def floor_for(self, name: str) -> int:
        for prefix, level in self._levels:
            if name == prefix or name.startswith(prefix + "."):
                return level
        return self._default

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self.floor_for(record.name)


def setup_logging(
    *,
    log_dir: str | Path = ".local/twolist",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console_levels: Mapping[str, int] | None = None,
) -> Path:
    """
    Install a filtered stderr handler and a full file handler on the root logger.

    console_level is the handler threshold; console_levels (default
    CONSOLE_LEVELS) raises it further per module. Existing root handlers are
    replaced. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "twolist.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(ConsoleLevelFilter(CONSOLE_LEVELS if console_levels is None else console_levels))

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
