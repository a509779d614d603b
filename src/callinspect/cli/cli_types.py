# topmark:header:start
#
#   project      : CallInspect
#   file         : cli_types.py
#   file_relpath : src/callinspect/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for the CallInspect CLI."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice among the string values of an Enum.

    ``--format JSON`` and ``--format json`` both convert to ``OutputFormat.JSON``.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the accepted values in help output."""
        return "[" + "|".join(self.by_value) + "]"

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert ``value`` to an enum member, failing with a usage error otherwise."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.by_value)}",
                param,
                ctx,
            )
        return member
