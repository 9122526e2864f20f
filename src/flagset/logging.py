# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Colored console logging for the flagset command line."""

import logging
import os
import sys

from yachalk import chalk

# ###############
# Public Interface
# ###############

LOG_LEVEL_ENV = "FLAGSET_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return chalk.red(message)
        if record.levelno >= logging.WARNING:
            return chalk.yellow(message)
        if record.levelno >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


def resolve_level(name: str | None) -> int | None:
    """Map a level name ("DEBUG") or number ("10") to a logging level.

    Returns None for empty or unknown values.
    """
    if not name:
        return None
    value = name.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Configure the package logger with colored output on stderr.

    If *level* is None, ``FLAGSET_LOG_LEVEL`` is consulted; the default is
    WARNING.
    """
    if level is None:
        level = resolve_level(os.environ.get(LOG_LEVEL_ENV)) or logging.WARNING

    package_logger = logging.getLogger("flagset")
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
