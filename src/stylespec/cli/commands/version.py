# topmark:header:start
#
#   project      : StyleSpec
#   file         : version.py
#   file_relpath : src/stylespec/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec `version` command.

Prints the current StyleSpec version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from stylespec.cli.cmd_common import get_console, get_effective_verbosity
from stylespec.cli.options import output_format_option
from stylespec.cli_shared.utils import OutputFormat
from stylespec.constants import STYLESPEC_VERSION


@click.command(
    name="version",
    help="Show the current version of StyleSpec.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of StyleSpec."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if (output_format or OutputFormat.DEFAULT) == OutputFormat.JSON:
        console.print(json.dumps({"version": STYLESPEC_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("StyleSpec version:", bold=True, underline=True))
        console.print(f"    {console.styled(STYLESPEC_VERSION, bold=True)}")
    else:
        console.print(console.styled(STYLESPEC_VERSION, bold=True))
