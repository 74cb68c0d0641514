# topmark:header:start
#
#   project      : StyleSpec
#   file         : errors.py
#   file_relpath : src/stylespec/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the StyleSpec CLI.

This is the only layer that turns errors into output and an exit status:
commands catch `StyleError` / `StyleConfigError` from the library and re-raise
them as one of the classes below, which Click prints and exits with.
"""

from __future__ import annotations

from typing import IO, Any

import click

from stylespec.cli_shared.exit_codes import ExitCode


class StylespecError(click.ClickException):
    """Base class for all StyleSpec CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no ``Error:`` prefix, no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class StylespecStyleError(StylespecError):
    """Error for invalid style or decoration style strings."""

    exit_code = ExitCode.FAILURE


class StylespecUsageError(StylespecError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class StylespecConfigError(StylespecError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class StylespecFileNotFoundError(StylespecError):
    """Error when the config path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
