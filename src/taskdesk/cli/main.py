# src/taskdesk/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs the initial load
(snapshot or remote seed), then starts the console REPL.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, load_tasks, shutdown
from ..cli.render import render_load_error
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # file log level follows settings.log_level; console stays at WARNING
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, file_level=file_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        print("Loading tasks...", flush=True)
        if not load_tasks(state):
            print(render_load_error(state.error or "Unknown error"), file=sys.stderr)
            return 1

        run_console_loop(state)
        return 0
    finally:
        shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    sys.exit(main())
