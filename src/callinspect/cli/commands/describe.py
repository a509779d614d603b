# topmark:header:start
#
#   project      : CallInspect
#   file         : describe.py
#   file_relpath : src/callinspect/cli/commands/describe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallInspect `describe` command.

Describes callables named on the command line. Each REF is a builtin name
(``len``), a dotted import path (``os.path.join``) or a static member
reference (``datetime.datetime::strptime``).

Output formats:
    - ``text``: ``name<TAB>file:line`` per reference (the location is omitted when
      unknown); with ``-v`` the kind is shown first.
    - ``markdown``: a table.
    - ``json``: a single array of objects.
    - ``ndjson``: one object per line.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from callinspect.cli.errors import CallInspectUsageError
from callinspect.cli.options import output_format_option
from callinspect.config.logging import get_logger
from callinspect.core.formats import OutputFormat
from callinspect.errors import InvalidArgumentError
from callinspect.inspector import from_value

if TYPE_CHECKING:
    from callinspect.cli.console import ConsoleLike
    from callinspect.config.logging import CallInspectLogger
    from callinspect.config.model import CallInspectConfig
    from callinspect.core.model import CallableDescription

logger: CallInspectLogger = get_logger(__name__)


def describe_refs(refs: tuple[str, ...]) -> list[CallableDescription]:
    """Describe each reference, failing on the first one that is not callable.

    Args:
        refs (tuple[str, ...]): String references from the command line.

    Returns:
        list[CallableDescription]: One description per reference, in order.

    Raises:
        CallInspectUsageError: If a reference does not name a callable.
    """
    descriptions: list[CallableDescription] = []
    for ref in refs:
        try:
            inspector = from_value(ref)
        except InvalidArgumentError as exc:
            raise CallInspectUsageError(f"{ref!r}: {exc}") from exc
        logger.debug("Describing %r", inspector)
        descriptions.append(inspector.describe())
    return descriptions


def render_text(console: ConsoleLike, descriptions: list[CallableDescription], *, verbose: bool) -> None:
    """Print one line per description."""
    for d in descriptions:
        parts: list[str] = []
        if verbose:
            parts.append(f"[{d.kind.value}]")
        parts.append(console.styled(d.name, bold=True))
        line: str = " ".join(parts)
        if d.location:
            line = f"{line}\t{d.location}"
        console.print(line)


def render_markdown(console: ConsoleLike, descriptions: list[CallableDescription]) -> None:
    """Print the descriptions as a Markdown table."""
    console.print("| Name | Kind | Location |")
    console.print("| --- | --- | --- |")
    for d in descriptions:
        location: str = f"`{d.location}`" if d.location else ""
        console.print(f"| `{d.name}` | {d.kind.value} | {location} |")


@click.command(
    name="describe",
    help="Describe callables: name, kind and definition site.",
)
@click.argument("refs", nargs=-1, required=True)
@output_format_option
def describe_command(
    *,
    refs: tuple[str, ...],
    output_format: OutputFormat | None = None,
) -> None:
    """Describe the callables named by REFS.

    Args:
        refs (tuple[str, ...]): Function names, dotted paths or ``Type::member`` references.
        output_format (OutputFormat | None): Output format; defaults to the configured one.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    config: CallInspectConfig = ctx.obj["config"]

    fmt: OutputFormat = output_format or config.output_format
    descriptions: list[CallableDescription] = describe_refs(refs)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([d.to_dict() for d in descriptions], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for d in descriptions:
            console.print(json.dumps(d.to_dict()))
    elif fmt == OutputFormat.MARKDOWN:
        render_markdown(console, descriptions)
    else:
        render_text(console, descriptions, verbose=ctx.obj.get("verbosity_level", 0) > 0)
