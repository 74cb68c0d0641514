# topmark:header:start
#
#   project      : StyleSpec
#   file         : strategies_style.py
#   file_relpath : tests/style/strategies_style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for resolved styles.

Only styles that are expressible as token strings are generated: a
syntax-highlighted style never has a foreground color.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from hypothesis import strategies as st

from stylespec.style.decoration import DecorationStyle
from stylespec.style.keywords import ATTRIBUTE_TOKENS, DecorationKind
from stylespec.style.parser import ParsedStyle
from stylespec.style.types import FixedColor, RgbColor, TerminalStyle

if TYPE_CHECKING:
    from stylespec.style.types import Color

_byte = st.integers(min_value=0, max_value=255)


def s_color() -> st.SearchStrategy[Color]:
    """Generate palette or RGB colors."""
    return st.one_of(
        st.builds(FixedColor, _byte),
        st.builds(RgbColor, _byte, _byte, _byte),
    )


@st.composite
def s_terminal_style(draw: st.DrawFn, *, allow_foreground: bool = True) -> TerminalStyle:
    """Generate a terminal style with optional colors and random attributes."""
    foreground = draw(st.none() | s_color()) if allow_foreground else None
    background = draw(st.none() | s_color())
    flags = {name: draw(st.booleans()) for name in ATTRIBUTE_TOKENS}
    return TerminalStyle(foreground=foreground, background=background, **flags)


@st.composite
def s_parsed_style(draw: st.DrawFn) -> ParsedStyle:
    """Generate a parse result together with its derived flags."""
    is_syntax_highlighted = draw(st.booleans())
    style = draw(s_terminal_style(allow_foreground=not is_syntax_highlighted))
    return ParsedStyle(
        style,
        is_omitted=draw(st.booleans()),
        is_raw=draw(st.booleans()),
        is_syntax_highlighted=is_syntax_highlighted,
    )


@st.composite
def s_decoration_style(draw: st.DrawFn) -> DecorationStyle:
    """Generate a visible decoration whose style does not underline."""
    kind = draw(st.sampled_from([k for k in DecorationKind if k.is_visible]))
    style = draw(s_terminal_style())
    return DecorationStyle(kind, replace(style, underline=False))
