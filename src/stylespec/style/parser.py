# topmark:header:start
#
#   project      : StyleSpec
#   file         : parser.py
#   file_relpath : src/stylespec/style/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style string parser.

A style string holds zero, one or two colors (foreground, then background)
and any number of text attributes, in any order::

    bold red underline green blink

Attribute keywords never take a color slot. The sentinels ``omit`` and
``raw`` set flags on the result, and ``syntax`` fills the foreground slot
without naming a color (the text keeps its syntax-highlighting colors).

Color slots are tracked by `ColorSlotState`:

    NO_COLORS_SEEN --color--> FOREGROUND_SEEN --color--> BOTH_SEEN --color--> error
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from stylespec.config.logging import get_logger
from stylespec.style.colors import color_from_rgb_or_ansi_code_with_default
from stylespec.style.errors import InvalidStyleStringError, MisplacedSyntaxError
from stylespec.style.keywords import ATTRIBUTE_KEYWORDS, OMIT, RAW, SYNTAX
from stylespec.style.tokens import tokenize
from stylespec.style.types import TerminalStyle

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger
    from stylespec.style.types import Color

logger: StylespecLogger = get_logger(__name__)


class ColorSlotState(Enum):
    """Which color slots of a style string have been filled so far."""

    NO_COLORS_SEEN = "no-colors-seen"
    FOREGROUND_SEEN = "foreground-seen"
    BOTH_SEEN = "both-seen"


class ParsedStyle(NamedTuple):
    """Result of `parse_style`.

    Attributes:
        style (TerminalStyle): Colors and attributes.
        is_omitted (bool): ``omit`` was present.
        is_raw (bool): ``raw`` was present.
        is_syntax_highlighted (bool): ``syntax`` was used as the foreground.
    """

    style: TerminalStyle
    is_omitted: bool = False
    is_raw: bool = False
    is_syntax_highlighted: bool = False


def parse_style(
    style_string: str,
    foreground_default: Color | None,
    background_default: Color | None,
    true_color: bool,
) -> ParsedStyle:
    """Parse a style string into a terminal style and its derived flags.

    Args:
        style_string (str): The style string, e.g. ``"bold red green"``.
        foreground_default (Color | None): Color used for an ``auto`` foreground.
        background_default (Color | None): Color used for an ``auto`` background.
        true_color (bool): Whether colors may resolve to 24-bit RGB.

    Returns:
        ParsedStyle: The parsed style and its ``omit`` / ``raw`` / ``syntax`` flags.

    Raises:
        MisplacedSyntaxError: If ``syntax`` is used as the background color.
        InvalidStyleStringError: If more than two color tokens are present.
        InvalidColorError: If a color token cannot be resolved.
    """
    style = TerminalStyle()
    state = ColorSlotState.NO_COLORS_SEEN
    is_omitted = False
    is_raw = False
    is_syntax_highlighted = False

    for token in tokenize(style_string):
        attribute = ATTRIBUTE_KEYWORDS.get(token)
        if attribute is not None:
            logger.trace("%r: attribute %s", token, attribute)
            style = replace(style, **{attribute: True})
        elif token == OMIT:
            is_omitted = True
        elif token == RAW:
            is_raw = True
        elif state is ColorSlotState.NO_COLORS_SEEN:
            if token == SYNTAX:
                is_syntax_highlighted = True
            else:
                style = replace(
                    style,
                    foreground=color_from_rgb_or_ansi_code_with_default(
                        token, foreground_default, true_color
                    ),
                )
            logger.trace("%r: foreground", token)
            state = ColorSlotState.FOREGROUND_SEEN
        elif state is ColorSlotState.FOREGROUND_SEEN:
            if token == SYNTAX:
                logger.debug("'syntax' used as background in %r", style_string)
                raise MisplacedSyntaxError(style_string)
            style = replace(
                style,
                background=color_from_rgb_or_ansi_code_with_default(
                    token, background_default, true_color
                ),
            )
            logger.trace("%r: background", token)
            state = ColorSlotState.BOTH_SEEN
        else:
            logger.debug("Too many colors in %r (extra token %r)", style_string, token)
            raise InvalidStyleStringError(style_string)

    parsed = ParsedStyle(style, is_omitted, is_raw, is_syntax_highlighted)
    logger.debug("Parsed style %r: %r", style_string, parsed)
    return parsed
