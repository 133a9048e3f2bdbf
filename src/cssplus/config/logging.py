# topmark:header:start
#
#   project      : CSSPlus
#   file         : logging.py
#   file_relpath : src/cssplus/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for CSSPlus: a TRACE level, a project logger class and colored output.

Log records go to stderr (stdout may carry the generated stylesheet). The level
comes from ``-v`` on the CLI or from the ``CSSPLUS_LOG_LEVEL`` environment
variable, which accepts a level name (``TRACE``, ``DEBUG``, ...) or a number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from cssplus.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Checked from the most severe level down; the first threshold reached wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class CssplusLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(CssplusLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CSSPLUS_LOG_LEVEL``, or None if unset or unknown."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None) -> None:
    """Send CSSPlus log records to stderr at ``level``.

    Args:
        level (int | None): Log level; None falls back to the environment, then
            to CRITICAL (quiet).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root_logger: logging.Logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def get_logger(name: str) -> CssplusLogger:
    """Return the `CssplusLogger` for ``name`` (usually ``__name__``)."""
    return cast("CssplusLogger", logging.getLogger(name))
