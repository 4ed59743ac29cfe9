"""Logging configuration — console output for the app, seeder, and access log."""
import logging
import sys

from app.config import LOG_LEVEL

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure the root logger once per process.

    Access log lines are already JSON, so the "access" logger gets a bare
    message formatter and does not propagate to the root handler.
    """
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    access = logging.getLogger("access")
    access.setLevel(level)
    access.handlers.clear()
    access_handler = logging.StreamHandler(sys.stdout)
    access_handler.setFormatter(logging.Formatter("%(message)s"))
    access.addHandler(access_handler)
    access.propagate = False
