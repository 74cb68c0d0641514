# topmark:header:start
#
#   project      : StyleSpec
#   file         : test_decoration.py
#   file_relpath : tests/style/test_decoration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DecorationStyle` parsing and re-tagging."""

from __future__ import annotations

import pytest

from stylespec.style.decoration import (
    NO_DECORATION,
    DecorationStyle,
    apply_special_decoration_attribute,
)
from stylespec.style.errors import (
    DecorationConflictError,
    InvalidColorError,
    InvalidDecorationContentError,
    InvalidStyleStringError,
    MissingDecorationKindError,
    UnknownDecorationAttributeError,
)
from stylespec.style.keywords import DecorationKind
from stylespec.style.types import TerminalStyle
from tests.conftest import named, parametrize


def test_box_without_style() -> None:
    """A bare keyword gives a decoration drawn in the default style."""
    assert DecorationStyle.from_str("box", True) == DecorationStyle.box(TerminalStyle())


def test_underline_with_color() -> None:
    """Colors after the keyword style the decoration itself."""
    decoration = DecorationStyle.from_str("ul blue", True)
    assert decoration == DecorationStyle.underline(TerminalStyle(foreground=named("blue")))
    assert decoration.is_decorated


def test_keyword_position_does_not_matter() -> None:
    """The decoration keyword may appear anywhere."""
    assert DecorationStyle.from_str("bold yellow ol", True) == DecorationStyle.overline(
        TerminalStyle(foreground=named("yellow"), bold=True)
    )


def test_underoverline() -> None:
    """``ul`` and ``ol`` together draw both lines."""
    assert DecorationStyle.from_str("ol ul red", True) == DecorationStyle.underoverline(
        TerminalStyle(foreground=named("red"))
    )


@parametrize("style_string", ["", "   ", "none", "plain", "omit", "none red", "omit blue", "bold"])
def test_no_decoration(style_string: str) -> None:
    """Empty, clearing or attribute-only strings mean no decoration."""
    decoration = DecorationStyle.from_str(style_string, True)
    assert decoration == NO_DECORATION
    assert not decoration.is_decorated
    assert decoration.style is None


@parametrize("style_string,keyword", [("raw red", "raw"), ("syntax red", "syntax"), ("box raw", "raw")])
def test_raw_and_syntax_are_forbidden(style_string: str, keyword: str) -> None:
    """``raw`` and ``syntax`` are rejected, naming the forbidden keyword."""
    with pytest.raises(InvalidDecorationContentError) as exc_info:
        DecorationStyle.from_str(style_string, True)
    assert exc_info.value.keyword == keyword
    assert exc_info.value.message == f"'{keyword}' may not be used in a decoration style."


def test_color_without_kind_is_an_error() -> None:
    """A color with nothing to draw it on is rejected."""
    with pytest.raises(MissingDecorationKindError):
        DecorationStyle.from_str("blue", True)


def test_conflicting_kinds_are_rejected() -> None:
    """``box`` cannot be combined with a line."""
    with pytest.raises(DecorationConflictError):
        DecorationStyle.from_str("box ul", True)


def test_parser_errors_propagate() -> None:
    """Errors from the style parser are raised unchanged."""
    with pytest.raises(InvalidStyleStringError):
        DecorationStyle.from_str("box red green blue", True)
    with pytest.raises(InvalidColorError):
        DecorationStyle.from_str("box notacolor", True)


def test_variant_invariants() -> None:
    """Visible kinds need a style; NoDecoration has none."""
    with pytest.raises(ValueError):
        DecorationStyle(DecorationKind.BOX, None)
    with pytest.raises(ValueError):
        DecorationStyle(None, TerminalStyle())
    with pytest.raises(ValueError):
        DecorationStyle(DecorationKind.PLAIN, TerminalStyle())


def test_with_foreground() -> None:
    """Only the carried style's foreground changes."""
    box = DecorationStyle.box(TerminalStyle(foreground=named("red"), background=named("blue")))
    assert box.with_foreground(named("green")) == DecorationStyle.box(
        TerminalStyle(foreground=named("green"), background=named("blue"))
    )
    assert NO_DECORATION.with_foreground(named("green")) is NO_DECORATION


@parametrize(
    "attribute,expected_kind",
    [
        ("box", DecorationKind.BOX),
        ("ul", DecorationKind.UNDERLINE),
        ("underline", DecorationKind.UNDERLINE),
        ("ol", DecorationKind.OVERLINE),
        ("overline", DecorationKind.OVERLINE),
        ("underoverline", DecorationKind.UNDEROVERLINE),
        (DecorationKind.BOX, DecorationKind.BOX),
    ],
)
def test_apply_special_attribute_keeps_style(
    attribute: str | DecorationKind, expected_kind: DecorationKind
) -> None:
    """Re-tagging keeps the carried terminal style."""
    style = TerminalStyle(foreground=named("cyan"), italic=True)
    result = apply_special_decoration_attribute(DecorationStyle.overline(style), attribute)
    assert result == DecorationStyle(expected_kind, style)


def test_apply_special_attribute_to_no_decoration() -> None:
    """Re-tagging NoDecoration carries the default style."""
    assert apply_special_decoration_attribute(NO_DECORATION, "box") == DecorationStyle.box(
        TerminalStyle()
    )


@parametrize("attribute", ["none", "plain", "omit"])
def test_apply_clearing_attribute(attribute: str) -> None:
    """Clearing keywords drop the decoration."""
    box = DecorationStyle.box(TerminalStyle(bold=True))
    assert apply_special_decoration_attribute(box, attribute) == NO_DECORATION


def test_apply_unknown_attribute() -> None:
    """Unknown keywords are rejected."""
    with pytest.raises(UnknownDecorationAttributeError):
        apply_special_decoration_attribute(NO_DECORATION, "zigzag")
