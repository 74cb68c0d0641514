# topmark:header:start
#
#   project      : StyleSpec
#   file         : tokens.py
#   file_relpath : src/stylespec/style/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizing style strings and splitting off decoration keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from stylespec.config.logging import get_logger
from stylespec.style.errors import DecorationConflictError
from stylespec.style.keywords import (
    CLEARING_DECORATIONS,
    OMIT,
    VISIBLE_DECORATIONS,
    DecorationAttributes,
    DecorationKind,
)

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger

logger: StylespecLogger = get_logger(__name__)

_QUOTES = "\"'"


def tokenize(style_string: str) -> list[str]:
    """Split a style string into normalized tokens.

    The string is lower-cased and split on whitespace; quote characters are
    trimmed from both ends of each token. No validation happens here.

    Args:
        style_string (str): The raw style string.

    Returns:
        list[str]: The tokens in input order (empty for an empty string).
    """
    return [word.strip(_QUOTES) for word in style_string.lower().split()]


class ExtractedDecoration(NamedTuple):
    """Result of `extract_decoration_attributes`.

    Attributes:
        style_string (str): The remaining tokens, joined by single spaces.
        attributes (DecorationAttributes): Decoration keywords found.
    """

    style_string: str
    attributes: DecorationAttributes


def extract_decoration_attributes(style_string: str) -> ExtractedDecoration:
    """Remove decoration keywords from a style string.

    Recognized keywords are those of `DecorationKind` except ``omit``, which
    stays in the stream because the style parser owns it.

    Args:
        style_string (str): The raw style string.

    Returns:
        ExtractedDecoration: The plain style string and the keywords seen.
    """
    attributes = DecorationAttributes.empty()
    plain_tokens: list[str] = []
    for token in tokenize(style_string):
        kind = None if token == OMIT else DecorationKind.parse(token)
        if kind is None:
            plain_tokens.append(token)
        else:
            attributes |= kind.attributes
    return ExtractedDecoration(" ".join(plain_tokens), attributes)


def resolve_decoration_kind(
    attributes: DecorationAttributes,
    source: str,
) -> DecorationKind | None:
    """Resolve the decoration keywords of one style string to a single kind.

    Policy when several keywords appear:

    - ``ul`` together with ``ol`` means `DecorationKind.UNDEROVERLINE`;
    - ``box`` cannot be combined with ``ul`` or ``ol``;
    - ``none`` / ``plain`` cannot be combined with a visible decoration;
    - ``none`` wins over ``plain``;
    - repeating a keyword is harmless.

    Args:
        attributes (DecorationAttributes): Keywords found by the extractor.
        source (str): The style string, for error messages.

    Returns:
        DecorationKind | None: The requested kind, or None if no keyword was present.

    Raises:
        DecorationConflictError: If the keywords cannot be combined.
    """
    visible = attributes & VISIBLE_DECORATIONS
    if visible and attributes & CLEARING_DECORATIONS:
        raise DecorationConflictError(source)
    if DecorationAttributes.BOX in visible and visible != DecorationAttributes.BOX:
        raise DecorationConflictError(source)

    for kind in (
        DecorationKind.BOX,
        DecorationKind.UNDEROVERLINE,
        DecorationKind.UNDERLINE,
        DecorationKind.OVERLINE,
    ):
        if visible and visible == kind.attributes:
            return kind

    if DecorationAttributes.NONE in attributes:
        return DecorationKind.NONE
    if DecorationAttributes.PLAIN in attributes:
        return DecorationKind.PLAIN
    return None
