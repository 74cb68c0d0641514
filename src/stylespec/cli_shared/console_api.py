# topmark:header:start
#
#   project      : StyleSpec
#   file         : console_api.py
#   file_relpath : src/stylespec/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Protocol for the console that commands print through.

Commands depend on this protocol rather than on Click, which keeps program
output (stdout/stderr) apart from logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Print to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Print a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Print an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with ANSI styling, or unchanged when color is off."""
        ...
