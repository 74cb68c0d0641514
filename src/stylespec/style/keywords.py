# topmark:header:start
#
#   project      : StyleSpec
#   file         : keywords.py
#   file_relpath : src/stylespec/style/keywords.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reserved words of the style string grammar.

A style string token is either:

- a text attribute keyword (``bold``, ``ul``, ...), see `ATTRIBUTE_KEYWORDS`;
- a sentinel (``syntax``, ``omit``, ``raw``) toggling a derived flag;
- a decoration keyword (``box``, ``ul``, ``ol``, ...), see `DecorationKind`;
  only recognized where decorations are being extracted;
- otherwise a color token handed to the color resolver.
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Final

from stylespec.core.enum_mixins import KeyedStrEnum

SYNTAX: Final[str] = "syntax"
OMIT: Final[str] = "omit"
RAW: Final[str] = "raw"

# Token -> name of the boolean field on `TerminalStyle`
ATTRIBUTE_KEYWORDS: Final[dict[str, str]] = {
    "blink": "blink",
    "bold": "bold",
    "dim": "dim",
    "hidden": "hidden",
    "italic": "italic",
    "reverse": "reverse",
    "strike": "strikethrough",
    "ul": "underline",
    "underline": "underline",
}

# Canonical token per boolean field, in rendering order
ATTRIBUTE_TOKENS: Final[dict[str, str]] = {
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "blink": "blink",
    "reverse": "reverse",
    "hidden": "hidden",
    "strikethrough": "strike",
}


class DecorationAttributes(Flag):
    """Decoration keywords seen while scanning a style string.

    ``BOX``, ``OVERLINE`` and ``UNDERLINE`` are visible decorations;
    ``PLAIN`` and ``NONE`` record an explicit request for no decoration.
    """

    BOX = auto()
    OVERLINE = auto()
    UNDERLINE = auto()
    PLAIN = auto()
    NONE = auto()

    @classmethod
    def empty(cls) -> DecorationAttributes:
        """Return the empty flag set."""
        return cls(0)


VISIBLE_DECORATIONS: Final[DecorationAttributes] = (
    DecorationAttributes.BOX | DecorationAttributes.OVERLINE | DecorationAttributes.UNDERLINE
)
CLEARING_DECORATIONS: Final[DecorationAttributes] = (
    DecorationAttributes.PLAIN | DecorationAttributes.NONE
)


class DecorationKind(KeyedStrEnum):
    """The decoration types a style string can request.

    ``PLAIN`` removes the decoration. ``NONE`` does the same inside a
    decoration style string, but inside a main style string it also resets
    the text style (see
    `stylespec.style.facade.style_from_str_with_special_decoration_attributes`).
    """

    BOX = ("box", "Box around the text")
    UNDERLINE = ("underline", "Line below the text", ("ul",))
    OVERLINE = ("overline", "Line above the text", ("ol",))
    UNDEROVERLINE = ("underoverline", "Lines above and below the text")
    PLAIN = ("plain", "No decoration", (OMIT,))
    NONE = ("none", "No decoration and no text style")

    @property
    def attributes(self) -> DecorationAttributes:
        """Return the decoration attribute flags this kind stands for."""
        return _KIND_ATTRIBUTES[self]

    @property
    def is_visible(self) -> bool:
        """Return True for kinds that draw something."""
        return bool(self.attributes & VISIBLE_DECORATIONS)


_KIND_ATTRIBUTES: Final[dict[DecorationKind, DecorationAttributes]] = {
    DecorationKind.BOX: DecorationAttributes.BOX,
    DecorationKind.UNDERLINE: DecorationAttributes.UNDERLINE,
    DecorationKind.OVERLINE: DecorationAttributes.OVERLINE,
    DecorationKind.UNDEROVERLINE: DecorationAttributes.UNDERLINE | DecorationAttributes.OVERLINE,
    DecorationKind.PLAIN: DecorationAttributes.PLAIN,
    DecorationKind.NONE: DecorationAttributes.NONE,
}
