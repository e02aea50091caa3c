"""Logging setup for the metacompare command line.

Usage:
    from .logging_config import setup_logging

    # at the entry point
    setup_logging()

    # in any module
    logger = logging.getLogger(__name__)

Environment variables:
    METACOMPARE_LOG_LEVEL - DEBUG, INFO, WARNING or ERROR. Default: INFO
"""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "METACOMPARE_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
HANDLER_NAME = "metacompare"


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure the root logger to write to stderr.

    `level` wins over the environment variable.  Calling this again
    replaces the handler installed by an earlier call.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
