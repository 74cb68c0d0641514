# topmark:header:start
#
#   project      : StyleSpec
#   file         : render.py
#   file_relpath : src/stylespec/style/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render parsed styles back to style strings and plain data.

The string forms produced here parse back to equal values::

    parse_style(terminal_style_to_string(s.style, ...), None, None, True) == s

This only holds with ``true_color=True``: without it, RGB colors are
approximated by palette colors when re-parsed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from stylespec.style.colors import ANSI_NUMBER_TO_NAME, NORMAL_COLOR
from stylespec.style.keywords import ATTRIBUTE_TOKENS, OMIT, RAW, SYNTAX
from stylespec.style.types import FixedColor

if TYPE_CHECKING:
    from stylespec.style.decoration import DecorationStyle
    from stylespec.style.model import Style
    from stylespec.style.types import Color, TerminalStyle


def color_to_token(color: Color) -> str:
    """Return the style string token for a resolved color."""
    if isinstance(color, FixedColor):
        return ANSI_NUMBER_TO_NAME.get(color.code, str(color.code))
    return color.hex


def _attribute_tokens(style: TerminalStyle) -> list[str]:
    return [token for field_name, token in ATTRIBUTE_TOKENS.items() if getattr(style, field_name)]


def terminal_style_to_string(
    style: TerminalStyle,
    *,
    is_omitted: bool = False,
    is_raw: bool = False,
    is_syntax_highlighted: bool = False,
) -> str:
    """Return a style string that parses back to ``style`` and the given flags.

    Colors come first (``normal`` holds the foreground slot when only a
    background is set), then attributes, then the ``omit`` / ``raw`` sentinels.
    """
    tokens: list[str] = []
    if is_syntax_highlighted:
        tokens.append(SYNTAX)
    elif style.foreground is not None:
        tokens.append(color_to_token(style.foreground))
    elif style.background is not None:
        tokens.append(NORMAL_COLOR)
    if style.background is not None:
        tokens.append(color_to_token(style.background))
    tokens.extend(_attribute_tokens(style))
    if is_omitted:
        tokens.append(OMIT)
    if is_raw:
        tokens.append(RAW)
    return " ".join(tokens)


def decoration_style_to_string(decoration: DecorationStyle) -> str:
    """Return a decoration style string for ``decoration`` (empty for no decoration)."""
    if decoration.kind is None or decoration.style is None:
        return ""
    # ``ul`` / ``underline`` always name the decoration type in this context
    rest = terminal_style_to_string(replace(decoration.style, underline=False))
    return f"{decoration.kind.key} {rest}".rstrip()


def style_to_string(style: Style) -> str:
    """Return the main style string of ``style`` (decoration excluded)."""
    return terminal_style_to_string(
        style.ansi_term_style,
        is_omitted=style.is_omitted,
        is_raw=style.is_raw,
        is_syntax_highlighted=style.is_syntax_highlighted,
    )


def color_to_dict(color: Color | None) -> dict[str, Any] | None:
    """Return a JSON-friendly mapping for a color."""
    if color is None:
        return None
    if isinstance(color, FixedColor):
        return {"type": "fixed", "code": color.code, "token": color_to_token(color)}
    return {"type": "rgb", "r": color.r, "g": color.g, "b": color.b, "token": color.hex}


def terminal_style_to_dict(style: TerminalStyle) -> dict[str, Any]:
    """Return a JSON-friendly mapping for a terminal style."""
    return {
        "foreground": color_to_dict(style.foreground),
        "background": color_to_dict(style.background),
        "attributes": {name: getattr(style, name) for name in ATTRIBUTE_TOKENS},
    }


def style_to_dict(style: Style) -> dict[str, Any]:
    """Return a JSON-friendly mapping for a resolved style."""
    decoration = style.decoration_style
    return {
        "style": terminal_style_to_dict(style.ansi_term_style),
        "is_emph": style.is_emph,
        "is_omitted": style.is_omitted,
        "is_raw": style.is_raw,
        "is_syntax_highlighted": style.is_syntax_highlighted,
        "decoration": {
            "kind": decoration.kind.key if decoration.kind is not None else None,
            "style": (
                terminal_style_to_dict(decoration.style) if decoration.style is not None else None
            ),
        },
        "style_string": style_to_string(style),
        "decoration_style_string": decoration_style_to_string(decoration),
    }
