# topmark:header:start
#
#   project      : CallInspect
#   file         : options.py
#   file_relpath : src/callinspect/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for the CallInspect CLI and how they are resolved.

The decorators only declare options; turning their values into a log level or a
color decision happens in the ``resolve_*`` helpers, called once by the group.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, Final, ParamSpec, TypeVar

import click

from callinspect.cli.cli_types import EnumChoiceParam
from callinspect.cli.errors import CallInspectUsageError
from callinspect.config.logging import TRACE_LEVEL
from callinspect.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

# Index: number of -v flags, capped at the last entry.
_VERBOSE_LEVELS: Final[tuple[int, ...]] = (logging.INFO, logging.DEBUG, TRACE_LEVEL)


class ColorMode(Enum):
    """Requested color behavior (``--color``).

    Members:
      AUTO: Color when stdout is a terminal, unless NO_COLOR / FORCE_COLOR say otherwise.
      ALWAYS: Always color.
      NEVER: Never color.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_log_level(verbose_count: int, quiet_count: int) -> int | None:
    """Map ``-v`` / ``-q`` counts to a logging level.

    ``-v`` is INFO, ``-vv`` DEBUG, ``-vvv`` (or more) TRACE; ``-q`` is CRITICAL.

    Args:
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        The logging level, or None when neither flag was given.

    Raises:
        CallInspectUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise CallInspectUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS)) - 1]
    if quiet_count:
        return logging.CRITICAL
    return None


def resolve_color_mode(mode: ColorMode, *, stdout_isatty: bool | None = None) -> bool:
    """Decide whether output is colored.

    An explicit ``always`` or ``never`` wins. In ``auto`` mode, a non-empty
    ``FORCE_COLOR`` other than ``"0"`` enables color, a set ``NO_COLOR`` disables
    it, and otherwise color follows whether stdout is a terminal.

    Args:
        mode: The requested mode.
        stdout_isatty: Whether stdout is a terminal; detected when None.

    Returns:
        True to color output.
    """
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    return sys.stdout.isatty() if stdout_isatty is None else stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (both counting) to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    return click.option("-q", "--quiet", count=True, help="Only log critical errors.")(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color MODE`` and its ``--no-color`` shorthand to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    return click.option("--no-color", "no_color", is_flag=True, help="Same as --color=never.")(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` to a command; None means "use the configured format"."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
