# topmark:header:start
#
#   project      : StyleSpec
#   file         : check.py
#   file_relpath : src/stylespec/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec `check` command.

Loads a style table (``stylespec.toml`` or ``[tool.stylespec]`` in
``pyproject.toml``), resolves every role and reports all problems at once.

Exit codes:
    - ``SUCCESS`` when every role resolves;
    - ``FAILURE`` when at least one role has an invalid style string;
    - ``CONFIG_ERROR`` when the table cannot be loaded;
    - ``FILE_NOT_FOUND`` when an explicit path does not exist.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import click

from stylespec.cli.cmd_common import format_diagnostic, get_console, get_effective_verbosity
from stylespec.cli.errors import StylespecConfigError, StylespecFileNotFoundError
from stylespec.cli.options import output_format_option, true_color_option
from stylespec.cli_shared.exit_codes import ExitCode
from stylespec.cli_shared.utils import OutputFormat
from stylespec.config.errors import StyleConfigError
from stylespec.config.loader import load_config
from stylespec.config.logging import get_logger
from stylespec.config.resolve import resolve_styles
from stylespec.diagnostic.model import DiagnosticLevel
from stylespec.style.render import decoration_style_to_string, style_to_dict, style_to_string

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Validate every style of a style table (stylespec.toml or pyproject.toml).",
)
@click.argument(
    "config_path",
    metavar="[CONFIG]",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@true_color_option
@output_format_option
def check_command(
    *,
    config_path: Path | None,
    true_color: bool | None,
    output_format: OutputFormat | None,
) -> None:
    """Resolve all style roles of a config file and report problems."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if config_path is not None and not config_path.exists():
        raise StylespecFileNotFoundError(f"Config file not found: {config_path}")
    try:
        config = load_config(config_path)
    except StyleConfigError as exc:
        raise StylespecConfigError(str(exc)) from exc
    if true_color is not None:
        config = replace(config, true_color=true_color)

    resolution = resolve_styles(config)
    stats = resolution.diagnostics.stats()

    if (output_format or OutputFormat.DEFAULT) == OutputFormat.JSON:
        payload = {
            "source": str(config.source) if config.source else None,
            "true_color": config.true_color,
            "styles": {name: style_to_dict(s) for name, s in resolution.styles.items()},
            "diagnostics": [d.to_dict() for d in resolution.diagnostics],
            "summary": stats.to_dict(),
        }
        console.print(json.dumps(payload, indent=2))
    else:
        if vlevel > 0:
            for name, style in resolution.styles.items():
                decoration = decoration_style_to_string(style.decoration_style)
                suffix = f" | {decoration}" if decoration else ""
                ok = console.styled("ok", fg="green")
                console.print(f"{ok}: [{name}] {style_to_string(style)}{suffix}")
        for diagnostic in resolution.diagnostics:
            if diagnostic.level == DiagnosticLevel.INFO and vlevel <= 0:
                continue
            console.print(format_diagnostic(console, diagnostic))
        if vlevel >= 0:
            console.print(
                f"{len(resolution.styles)} of {len(config.roles)} style(s) valid, "
                f"{stats.n_error} error(s), {stats.n_warning} warning(s)"
            )

    if not resolution.ok:
        ctx.exit(ExitCode.FAILURE)
