# topmark:header:start
#
#   project      : StyleSpec
#   file         : model.py
#   file_relpath : src/stylespec/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The fully resolved `Style` of one style role (e.g. "added lines")."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from stylespec.style.decoration import NO_DECORATION, DecorationStyle
from stylespec.style.parser import parse_style
from stylespec.style.types import TerminalStyle

if TYPE_CHECKING:
    from stylespec.style.types import Color


@dataclass(frozen=True)
class Style:
    """Text style, derived flags and decoration of one style role.

    Attributes:
        ansi_term_style (TerminalStyle): Colors and attributes of the text itself.
        is_emph (bool): Whether this role is an emphasis style.
        is_omitted (bool): The text should not be shown (``omit``).
        is_raw (bool): The text should be shown without restyling (``raw``).
        is_syntax_highlighted (bool): The foreground comes from syntax highlighting.
        decoration_style (DecorationStyle): Box / line decoration, if any.
    """

    ansi_term_style: TerminalStyle = field(default_factory=TerminalStyle)
    is_emph: bool = False
    is_omitted: bool = False
    is_raw: bool = False
    is_syntax_highlighted: bool = False
    decoration_style: DecorationStyle = NO_DECORATION

    @classmethod
    def from_str(
        cls,
        style_string: str,
        foreground_default: Color | None,
        background_default: Color | None,
        decoration_style_string: str | None,
        true_color: bool,
        is_emph: bool,
    ) -> Style:
        """Build a Style from a style string and an optional decoration style string.

        Args:
            style_string (str): Space-separated colors and attributes.
            foreground_default (Color | None): Color used for an ``auto`` foreground.
            background_default (Color | None): Color used for an ``auto`` background.
            decoration_style_string (str | None): Decoration style; None or empty
                means no decoration.
            true_color (bool): Whether colors may resolve to 24-bit RGB.
            is_emph (bool): Whether this is an emphasis style.

        Returns:
            Style: The resolved style.

        Raises:
            StyleError: If either string is invalid.
        """
        parsed = parse_style(style_string, foreground_default, background_default, true_color)
        decoration_style = (
            DecorationStyle.from_str(decoration_style_string, true_color)
            if decoration_style_string
            else NO_DECORATION
        )
        return cls(
            ansi_term_style=parsed.style,
            is_emph=is_emph,
            is_omitted=parsed.is_omitted,
            is_raw=parsed.is_raw,
            is_syntax_highlighted=parsed.is_syntax_highlighted,
            decoration_style=decoration_style,
        )

    @property
    def decoration_ansi_term_style(self) -> TerminalStyle | None:
        """Return the terminal style used to draw the decoration, if any."""
        return self.decoration_style.style
