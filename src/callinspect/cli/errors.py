# topmark:header:start
#
#   project      : CallInspect
#   file         : errors.py
#   file_relpath : src/callinspect/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CallInspect CLI.

Each error carries a sysexits-style [`ExitCode`][callinspect.cli.exit_codes.ExitCode];
Click prints the message to stderr as ``Error: <message>`` and exits with it.
"""

from __future__ import annotations

import click

from callinspect.cli.exit_codes import ExitCode


class CallInspectCliError(click.ClickException):
    """Base class for all CallInspect CLI errors."""

    exit_code = ExitCode.FAILURE


class CallInspectUsageError(CallInspectCliError):
    """Invalid invocation: conflicting flags, or a reference that is not callable."""

    exit_code = ExitCode.USAGE_ERROR


class CallInspectConfigError(CallInspectCliError):
    """Invalid configuration file or value."""

    exit_code = ExitCode.CONFIG_ERROR
