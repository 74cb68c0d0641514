# topmark:header:start
#
#   project      : StyleSpec
#   file         : types.py
#   file_relpath : src/stylespec/style/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types for resolved colors and terminal styles.

All types in this module are frozen dataclasses: they are built once by the
parser and compared structurally afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias


@dataclass(frozen=True)
class FixedColor:
    """A color from the fixed 256-color ANSI palette.

    Attributes:
        code (int): Palette index (0..255). Codes 0..15 are the named ANSI colors.
    """

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 255:
            raise ValueError(f"ANSI color code out of range: {self.code}")


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit true color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range: {channel}")

    @property
    def hex(self) -> str:
        """Return the color as ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color: TypeAlias = FixedColor | RgbColor


@dataclass(frozen=True)
class TerminalStyle:
    """Colors and boolean text attributes applied to a run of terminal text.

    An instance built with no arguments is the default style: no colors and
    every attribute off.
    """

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def with_foreground(self, color: Color | None) -> TerminalStyle:
        """Return a copy of this style with a different foreground color."""
        return replace(self, foreground=color)

    @property
    def is_default(self) -> bool:
        """Return True if this is the default (empty) style."""
        return self == TerminalStyle()
