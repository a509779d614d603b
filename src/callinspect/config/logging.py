# topmark:header:start
#
#   project      : CallInspect
#   file         : logging.py
#   file_relpath : src/callinspect/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for CallInspect: a TRACE level below DEBUG and colored output.

Every module gets its logger from [`get_logger`][callinspect.config.logging.get_logger],
which returns a [`CallInspectLogger`][callinspect.config.logging.CallInspectLogger]
exposing ``logger.trace(...)``.

The library never installs handlers itself. The CLI and the test suite call
[`setup_logging`][callinspect.config.logging.setup_logging].
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from callinspect.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class CallInspectLogger(logging.Logger):
    """Logger with an extra ``trace`` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(CallInspectLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

#: Level names accepted in `CALLINSPECT_LOG_LEVEL` and in the `log_level` config key.
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one the record reaches picks the color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored message.
        """
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim(message)


def parse_log_level(value: str | int | None) -> int | None:
    """Convert a level name or number into a logging level.

    Args:
        value (str | int | None): A level name (``"TRACE"``, ``"debug"``...), a numeric
            string (``"10"``) or an integer.

    Returns:
        int | None: The logging level, or None if ``value`` is empty or unrecognized.
    """
    if value is None or isinstance(value, int):
        return value
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    return LEVEL_NAMES.get(name)


def resolve_env_log_level() -> int | None:
    """Return the level set in ``CALLINSPECT_LOG_LEVEL``, or None if unset or invalid."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Send log records to stdout through a single colored handler.

    Handlers installed by a previous call are replaced.

    Args:
        level (int | None): Root logger level. When None, ``CALLINSPECT_LOG_LEVEL``
            decides, and logging stays limited to CRITICAL if that is unset too.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> CallInspectLogger:
    """Return the [`CallInspectLogger`][callinspect.config.logging.CallInspectLogger] called ``name``."""
    return cast("CallInspectLogger", logging.getLogger(name))
