# topmark:header:start
#
#   project      : StyleSpec
#   file         : cli_types.py
#   file_relpath : src/stylespec/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the StyleSpec CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click parameter accepting the (case-insensitive) values of a string Enum.

    Args:
        enum_cls (type[E]): The Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the accepted values in ``--help``."""
        return "[" + "|".join(self.by_value) + "]"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the Enum member for ``value``; fail with the list of choices otherwise."""
        if isinstance(value, self.enum_cls):
            return value
        member = self.by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.by_value)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values: ``eval "$(_STYLESPEC_COMPLETE=bash_source stylespec)"``."""
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(v) for v in self.by_value if v.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
