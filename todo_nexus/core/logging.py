"""Logging setup shared by every entry point."""

import logging
import sys

LOG_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

# Package loggers that follow the configured level
APP_LOGGERS = (
    "todo_nexus.store.task_store",
    "todo_nexus.store.seed_data",
    "todo_nexus.actions.tools",
    "todo_nexus.main",
)


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging to stdout and set the app loggers' level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
    )

    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
