# topmark:header:start
#
#   project      : StyleSpec
#   file         : facade.py
#   file_relpath : src/stylespec/style/facade.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level constructors combining defaults, both parsers and legacy flags.

Three levels, each building on the previous one:

1. `style_from_str`: main style string plus a separate decoration style string.
2. `style_from_str_with_special_decoration_attributes`: decoration keywords
   (``box``, ``ul``, ``ol``, ``none``, ...) may also appear in the main style
   string, where they re-tag the decoration.
3. `style_from_str_with_deprecated_foreground`: additionally honors a legacy
   single-color argument that overrides the foreground of both the text and
   the decoration.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from stylespec.config.logging import get_logger
from stylespec.style.decoration import apply_special_decoration_attribute
from stylespec.style.keywords import DecorationKind
from stylespec.style.model import Style
from stylespec.style.parser import parse_style
from stylespec.style.tokens import extract_decoration_attributes, resolve_decoration_kind
from stylespec.style.types import TerminalStyle

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger
    from stylespec.style.types import Color

logger: StylespecLogger = get_logger(__name__)


def style_from_str(
    style_string: str,
    foreground_default: Color | None = None,
    background_default: Color | None = None,
    decoration_style_string: str | None = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """Build a Style from a style string and an optional decoration style string.

    See `Style.from_str`.
    """
    return Style.from_str(
        style_string,
        foreground_default,
        background_default,
        decoration_style_string,
        true_color,
        is_emph,
    )


def style_from_str_with_special_decoration_attributes(
    style_string: str,
    foreground_default: Color | None = None,
    background_default: Color | None = None,
    decoration_style_string: str | None = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """Build a Style, treating ``box``, ``ul``, ``ol``, etc. as decoration keywords.

    The decoration keyword is removed from ``style_string`` before parsing it
    and then applied to the decoration built from ``decoration_style_string``.
    ``none`` is special: it resets the text style to the default instead.

    Raises:
        StyleError: If either string is invalid.
    """
    extracted = extract_decoration_attributes(style_string)
    kind = resolve_decoration_kind(extracted.attributes, style_string)
    style = style_from_str(
        extracted.style_string,
        foreground_default,
        background_default,
        decoration_style_string,
        true_color,
        is_emph,
    )
    if kind is None:
        return style
    if kind is DecorationKind.NONE:
        return replace(style, ansi_term_style=TerminalStyle())
    return replace(
        style,
        decoration_style=apply_special_decoration_attribute(style.decoration_style, kind),
    )


def style_from_str_with_deprecated_foreground(
    style_string: str,
    foreground_default: Color | None = None,
    background_default: Color | None = None,
    decoration_style_string: str | None = None,
    deprecated_foreground_color: str | None = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """As `style_from_str_with_special_decoration_attributes`, honoring a legacy color.

    When ``deprecated_foreground_color`` is given, the foreground it specifies
    replaces the foreground of the text style and of the decoration style (if
    there is one). Any attributes in the legacy argument are ignored.

    Raises:
        StyleError: If any of the strings is invalid.
    """
    style = style_from_str_with_special_decoration_attributes(
        style_string,
        foreground_default,
        background_default,
        decoration_style_string,
        true_color,
        is_emph,
    )
    if deprecated_foreground_color is None:
        return style

    foreground = parse_style(deprecated_foreground_color, None, None, true_color).style.foreground
    logger.info(
        "Deprecated color argument %r overrides foreground of style %r",
        deprecated_foreground_color,
        style_string,
    )
    return replace(
        style,
        ansi_term_style=style.ansi_term_style.with_foreground(foreground),
        decoration_style=style.decoration_style.with_foreground(foreground),
    )
