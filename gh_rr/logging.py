"""Diagnostic logging for the CLI, configured from LOGGING_LEVEL / LOGGING_FORMAT.

Log records are for troubleshooting only (config path, resolved reviewers,
the gh/git command lines at DEBUG). Messages meant for the user are printed
by gh_rr.main. WARNING is the default so a normal run prints no records.
"""

import logging
from typing import TextIO

from gh_rr.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give WARNING."""
    return LEVELS.get(level.upper().strip(), LEVELS[DEFAULT_LEVEL])


def setup_logging(config: LoggingConfig, stream: TextIO | None = None) -> int:
    """Send records to stream (stderr by default) and return the level in effect.

    Replaces handlers installed by a previous call so repeated runs in one
    process do not duplicate output.
    """
    level = _resolve_level(config.level)
    logging.basicConfig(
        level=level,
        format=config.format or DEFAULT_FORMAT,
        stream=stream,
        force=True,
    )
    return level
