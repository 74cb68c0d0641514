# topmark:header:start
#
#   project      : StyleSpec
#   file         : errors.py
#   file_relpath : src/stylespec/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while loading StyleSpec configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StyleConfigError(Exception):
    """The style table configuration is missing, unreadable or malformed.

    Attributes:
        path (Path | None): The config file concerned, if known.
    """

    path: Path | None

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.path = path
