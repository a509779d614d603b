# topmark:header:start
#
#   project      : CallInspect
#   file         : console.py
#   file_relpath : src/callinspect/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

Commands write results through the console stored in ``ctx.obj["console"]``;
`logging` is reserved for diagnostics.
"""

from __future__ import annotations

from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What CLI commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to standard output."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style`` arguments, or unchanged."""
        ...


class ClickConsole:
    """[`ConsoleLike`][callinspect.cli.console.ConsoleLike] writing through ``click.echo``.

    Args:
        enable_color (bool): Keep ANSI styles; when False, ``styled`` returns plain text.
        out (TextIO | None): Output stream; None means the current stdout.
    """

    def __init__(self, *, enable_color: bool = True, out: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.out = out

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style``, or unchanged if color is disabled."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
