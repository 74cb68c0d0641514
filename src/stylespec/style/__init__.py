# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style string parsing.

Design:
    - Raw strings are tokenized (`tokens`), decoration keywords are split off
      (`tokens.extract_decoration_attributes`), the rest is classified into
      attributes, sentinels and colors (`parser.parse_style`).
    - Results are immutable values: `TerminalStyle`, `DecorationStyle`, `Style`.
    - Errors are raised as `StyleError` subclasses; nothing in this package
      prints or exits.
"""

from __future__ import annotations

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
    MisplacedSyntaxError,
    MissingDecorationKindError,
    StyleError,
    UnknownDecorationAttributeError,
)
from stylespec.style.facade import (
    style_from_str,
    style_from_str_with_deprecated_foreground,
    style_from_str_with_special_decoration_attributes,
)
from stylespec.style.keywords import DecorationAttributes, DecorationKind
from stylespec.style.model import Style
from stylespec.style.parser import ParsedStyle, parse_style
from stylespec.style.types import Color, FixedColor, RgbColor, TerminalStyle

__all__ = [
    "NO_DECORATION",
    "Color",
    "DecorationAttributes",
    "DecorationConflictError",
    "DecorationKind",
    "DecorationStyle",
    "FixedColor",
    "InvalidColorError",
    "InvalidDecorationContentError",
    "InvalidStyleStringError",
    "MisplacedSyntaxError",
    "MissingDecorationKindError",
    "ParsedStyle",
    "RgbColor",
    "Style",
    "StyleError",
    "TerminalStyle",
    "UnknownDecorationAttributeError",
    "apply_special_decoration_attribute",
    "parse_style",
    "style_from_str",
    "style_from_str_with_deprecated_foreground",
    "style_from_str_with_special_decoration_attributes",
]
