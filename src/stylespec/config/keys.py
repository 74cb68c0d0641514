# topmark:header:start
#
#   project      : StyleSpec
#   file         : keys.py
#   file_relpath : src/stylespec/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for StyleSpec configuration.

Keys defined here are the external configuration API, as it appears in
``stylespec.toml`` and in ``[tool.stylespec]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StyleSpec configuration."""

    # Top level
    KEY_TRUE_COLOR: Final[str] = "true_color"

    # [styles.<role>]
    SECTION_STYLES: Final[str] = "styles"

    KEY_STYLE: Final[str] = "style"
    KEY_DECORATION_STYLE: Final[str] = "decoration_style"
    KEY_DEPRECATED_COLOR: Final[str] = "deprecated_color"
    KEY_FOREGROUND_DEFAULT: Final[str] = "foreground_default"
    KEY_BACKGROUND_DEFAULT: Final[str] = "background_default"
    KEY_EMPH: Final[str] = "emph"
    KEY_SPECIAL_ATTRIBUTES: Final[str] = "special_attributes"

    TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({KEY_TRUE_COLOR, SECTION_STYLES})

    ROLE_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_STYLE,
            KEY_DECORATION_STYLE,
            KEY_DEPRECATED_COLOR,
            KEY_FOREGROUND_DEFAULT,
            KEY_BACKGROUND_DEFAULT,
            KEY_EMPH,
            KEY_SPECIAL_ATTRIBUTES,
        }
    )
