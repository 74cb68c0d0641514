# topmark:header:start
#
#   project      : StyleSpec
#   file         : decoration.py
#   file_relpath : src/stylespec/style/decoration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoration styles: boxes and lines drawn around or beside text.

A decoration style string names one decoration type plus the colors and
attributes used to draw it, e.g. ``"box ul"`` is invalid but ``"ol blue"`` and
``"box bold yellow"`` are fine. The decoration's own `TerminalStyle` is
independent of the style of the text it decorates.

`DecorationStyle` is a closed variant: ``kind`` is one of the visible
`DecorationKind` members and ``style`` is the carried terminal style, or
``kind`` is None for `NO_DECORATION`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stylespec.config.logging import get_logger
from stylespec.style.errors import (
    InvalidDecorationContentError,
    MissingDecorationKindError,
    UnknownDecorationAttributeError,
)
from stylespec.style.keywords import RAW, SYNTAX, DecorationKind
from stylespec.style.parser import parse_style
from stylespec.style.tokens import extract_decoration_attributes, resolve_decoration_kind
from stylespec.style.types import TerminalStyle

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger
    from stylespec.style.types import Color

logger: StylespecLogger = get_logger(__name__)


@dataclass(frozen=True)
class DecorationStyle:
    """A decoration type together with the terminal style used to draw it.

    Attributes:
        kind (DecorationKind | None): ``BOX``, ``UNDERLINE``, ``OVERLINE`` or
            ``UNDEROVERLINE``; None means no decoration.
        style (TerminalStyle | None): The decoration's own style; None exactly
            when ``kind`` is None.
    """

    kind: DecorationKind | None = None
    style: TerminalStyle | None = None

    def __post_init__(self) -> None:
        if self.kind is None:
            if self.style is not None:
                raise ValueError("NoDecoration does not carry a style")
            return
        if not self.kind.is_visible:
            raise ValueError(f"Not a visible decoration kind: {self.kind.key}")
        if self.style is None:
            raise ValueError(f"Decoration {self.kind.key!r} requires a style")

    @classmethod
    def box(cls, style: TerminalStyle) -> DecorationStyle:
        """Return a Box decoration."""
        return cls(DecorationKind.BOX, style)

    @classmethod
    def underline(cls, style: TerminalStyle) -> DecorationStyle:
        """Return an Underline decoration."""
        return cls(DecorationKind.UNDERLINE, style)

    @classmethod
    def overline(cls, style: TerminalStyle) -> DecorationStyle:
        """Return an Overline decoration."""
        return cls(DecorationKind.OVERLINE, style)

    @classmethod
    def underoverline(cls, style: TerminalStyle) -> DecorationStyle:
        """Return an Underoverline decoration."""
        return cls(DecorationKind.UNDEROVERLINE, style)

    @property
    def is_decorated(self) -> bool:
        """Return False for `NO_DECORATION`."""
        return self.kind is not None

    def with_foreground(self, color: Color | None) -> DecorationStyle:
        """Return a copy whose carried style has a new foreground.

        `NO_DECORATION` is returned unchanged.
        """
        if self.kind is None or self.style is None:
            return self
        return DecorationStyle(self.kind, self.style.with_foreground(color))

    def retag(self, kind: DecorationKind) -> DecorationStyle:
        """Return this decoration re-tagged as ``kind``, keeping its terminal style.

        Starting from `NO_DECORATION`, the default terminal style is carried.
        ``PLAIN`` and ``NONE`` yield `NO_DECORATION`.
        """
        if not kind.is_visible:
            return NO_DECORATION
        return DecorationStyle(kind, self.style or TerminalStyle())

    @classmethod
    def from_str(cls, style_string: str, true_color: bool) -> DecorationStyle:
        """Parse a decoration style string.

        Args:
            style_string (str): E.g. ``"box"``, ``"ul blue"``, ``"ol ul bold red"``.
            true_color (bool): Whether colors may resolve to 24-bit RGB.

        Returns:
            DecorationStyle: The decoration, or `NO_DECORATION`.

        Raises:
            InvalidDecorationContentError: If ``raw`` or ``syntax`` is present.
            MissingDecorationKindError: If a color is given but no decoration type.
            DecorationConflictError: If incompatible decoration keywords are combined.
            StyleError: Any error raised by the style parser.
        """
        extracted = extract_decoration_attributes(style_string)
        kind = resolve_decoration_kind(extracted.attributes, style_string)
        parsed = parse_style(extracted.style_string, None, None, true_color)
        if parsed.is_raw:
            raise InvalidDecorationContentError(RAW, style_string)
        if parsed.is_syntax_highlighted:
            raise InvalidDecorationContentError(SYNTAX, style_string)

        if kind is not None:
            if kind.is_visible:
                return cls(kind, parsed.style)
            return NO_DECORATION
        if parsed.is_omitted:
            return NO_DECORATION
        if parsed.style.foreground is None and parsed.style.background is None:
            # Empty, or attributes only: nothing says what to draw.
            return NO_DECORATION
        logger.debug("Decoration style string %r has no decoration type", style_string)
        raise MissingDecorationKindError(style_string)


NO_DECORATION: DecorationStyle = DecorationStyle()


def apply_special_decoration_attribute(
    decoration_style: DecorationStyle,
    special_attribute: str | DecorationKind,
) -> DecorationStyle:
    """Overlay a decoration keyword onto an existing decoration style.

    The carried terminal style is preserved; only the decoration type changes.

    Args:
        decoration_style (DecorationStyle): The decoration to re-tag.
        special_attribute (str | DecorationKind): One of ``box``, ``ul`` /
            ``underline``, ``ol`` / ``overline``, ``underoverline``, ``none``,
            ``omit``, ``plain`` (or the corresponding `DecorationKind`).

    Returns:
        DecorationStyle: The re-tagged decoration.

    Raises:
        UnknownDecorationAttributeError: If the keyword is not recognized.
    """
    kind = (
        special_attribute
        if isinstance(special_attribute, DecorationKind)
        else DecorationKind.parse(special_attribute)
    )
    if kind is None:
        raise UnknownDecorationAttributeError(str(special_attribute))
    return decoration_style.retag(kind)
