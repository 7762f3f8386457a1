# src/twolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the stored lists, then runs
the console presenter until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, load_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    state = create_initial_state(settings=settings)
    await load_state(state)
    await run_console_loop(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
