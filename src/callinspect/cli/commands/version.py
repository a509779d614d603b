# topmark:header:start
#
#   project      : CallInspect
#   file         : version.py
#   file_relpath : src/callinspect/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallInspect `version` command.

Prints the current CallInspect version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from callinspect.cli.options import output_format_option
from callinspect.constants import CALLINSPECT_VERSION
from callinspect.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from callinspect.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CallInspect.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of CallInspect.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        console.print(json.dumps({"version": CALLINSPECT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"**CallInspect version: {CALLINSPECT_VERSION}**")
    else:
        console.print(console.styled(CALLINSPECT_VERSION, bold=True))
