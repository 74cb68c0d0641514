# topmark:header:start
#
#   project      : StyleSpec
#   file         : cmd_common.py
#   file_relpath : src/stylespec/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by commands: reading shared state from the
Click context and rendering diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stylespec.cli.console import ClickConsole

if TYPE_CHECKING:
    from stylespec.cli_shared.console_api import ConsoleLike
    from stylespec.diagnostic.model import Diagnostic


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def format_diagnostic(console: ConsoleLike, diagnostic: Diagnostic) -> str:
    """Return a one-line, optionally colored rendering of a diagnostic."""
    level = diagnostic.level.value
    where = f"[{diagnostic.role}] " if diagnostic.role else ""
    fg = {"info": "blue", "warning": "yellow", "error": "bright_red"}[level]
    return f"{console.styled(level, fg=fg, bold=True)}: {where}{diagnostic.message}"
