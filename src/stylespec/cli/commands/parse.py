# topmark:header:start
#
#   project      : StyleSpec
#   file         : parse.py
#   file_relpath : src/stylespec/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec `parse` command.

Parses a single style string (plus optional decoration style and legacy color)
and prints the resolved style, either as normalized style strings or as JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from stylespec.cli.cmd_common import get_console, get_effective_verbosity
from stylespec.cli.errors import StylespecStyleError
from stylespec.cli.options import output_format_option, true_color_option
from stylespec.cli_shared.utils import OutputFormat
from stylespec.config.logging import get_logger
from stylespec.style.errors import StyleError
from stylespec.style.facade import style_from_str, style_from_str_with_deprecated_foreground
from stylespec.style.render import (
    color_to_token,
    decoration_style_to_string,
    style_to_dict,
    style_to_string,
)

if TYPE_CHECKING:
    from stylespec.cli_shared.console_api import ConsoleLike
    from stylespec.style.model import Style

logger = get_logger(__name__)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _print_style(console: ConsoleLike, style: Style, *, verbose: bool) -> None:
    console.print(f"{console.styled('style:', bold=True)}      {style_to_string(style)}")
    decoration = decoration_style_to_string(style.decoration_style) or "none"
    console.print(f"{console.styled('decoration:', bold=True)} {decoration}")
    if not verbose:
        return
    text = style.ansi_term_style
    console.print(
        f"  foreground: {color_to_token(text.foreground) if text.foreground else '-'}"
    )
    console.print(
        f"  background: {color_to_token(text.background) if text.background else '-'}"
    )
    console.print(
        f"  omitted: {_yes_no(style.is_omitted)}, raw: {_yes_no(style.is_raw)}, "
        f"syntax: {_yes_no(style.is_syntax_highlighted)}, emph: {_yes_no(style.is_emph)}"
    )


@click.command(
    name="parse",
    help="Parse a style string and print the resolved style.",
)
@click.argument("style_string", metavar="STYLE")
@click.option(
    "--decoration-style",
    "decoration_style",
    default=None,
    help="Decoration style string, e.g. 'box blue' or 'ul ol bold'.",
)
@click.option(
    "--deprecated-color",
    "deprecated_color",
    default=None,
    help="Legacy single color overriding the foreground of the text and its decoration.",
)
@click.option(
    "--special-attributes/--no-special-attributes",
    "special_attributes",
    default=True,
    help="Treat box/ul/ol/none/plain in STYLE as decoration keywords (default: on).",
)
@click.option("--emph", is_flag=True, default=False, help="Mark the style as an emphasis style.")
@true_color_option
@output_format_option
def parse_command(
    *,
    style_string: str,
    decoration_style: str | None,
    deprecated_color: str | None,
    special_attributes: bool,
    emph: bool,
    true_color: bool | None,
    output_format: OutputFormat | None,
) -> None:
    """Parse STYLE and print the resolved style."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    effective_true_color = True if true_color is None else true_color

    try:
        if special_attributes:
            style = style_from_str_with_deprecated_foreground(
                style_string,
                None,
                None,
                decoration_style,
                deprecated_color,
                effective_true_color,
                emph,
            )
        else:
            if deprecated_color is not None:
                console.warn("--deprecated-color is ignored with --no-special-attributes")
            style = style_from_str(
                style_string, None, None, decoration_style, effective_true_color, emph
            )
    except StyleError as exc:
        logger.debug("parse failed: %s", exc)
        raise StylespecStyleError(exc.message) from exc

    if (output_format or OutputFormat.DEFAULT) == OutputFormat.JSON:
        console.print(json.dumps(style_to_dict(style), indent=2))
    else:
        _print_style(console, style, verbose=get_effective_verbosity(ctx) > 0)
