# topmark:header:start
#
#   project      : StyleSpec
#   file         : color.py
#   file_relpath : src/stylespec/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whether the CLI's own output is colored.

This is unrelated to the styles being parsed: it only decides if labels such
as ``error:`` or ``style:`` are printed with ANSI escapes.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True if program output should use ANSI colors.

    JSON output is never colored. Otherwise an explicit ``--color always|never``
    wins, then ``FORCE_COLOR`` (any value but ``"0"``), then ``NO_COLOR``, and
    finally whether stdout is a terminal.

    Args:
        color_mode_override: Mode from ``--color``; None or ``AUTO`` defer to the
            environment.
        output_format: The selected ``--format`` value, if any.
        stdout_isatty: TTY status override, mainly for tests.

    Returns:
        Whether to emit ANSI colors.
    """
    if output_format is not None and output_format.lower() == "json":
        return False
    if color_mode_override in (ColorMode.ALWAYS, ColorMode.NEVER):
        return color_mode_override is ColorMode.ALWAYS

    if os.getenv("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return _stdout_is_tty() if stdout_isatty is None else stdout_isatty
