# topmark:header:start
#
#   project      : StyleSpec
#   file         : colors.py
#   file_relpath : src/stylespec/style/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color token resolution.

Maps a single color token to a resolved color value:

- ``#rrggbb``: an `RgbColor` when the terminal supports true color, otherwise
  the nearest entry of the xterm 256-color palette.
- ``0``..``255``: a `FixedColor` with that palette index.
- an ANSI color name (``red``, ``bright-blue``, ...): the matching `FixedColor`.

The ``*_with_default`` variant additionally understands the two pseudo-colors
``normal`` (no color) and ``auto`` (use the caller-supplied default).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from stylespec.config.logging import get_logger
from stylespec.style.errors import InvalidColorError
from stylespec.style.types import Color, FixedColor, RgbColor

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger

logger: StylespecLogger = get_logger(__name__)

ANSI_COLOR_NAMES: Final[dict[str, int]] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "purple": 5,
    "cyan": 6,
    "white": 7,
    "bright-black": 8,
    "bright-red": 9,
    "bright-green": 10,
    "bright-yellow": 11,
    "bright-blue": 12,
    "bright-magenta": 13,
    "bright-purple": 13,
    "bright-cyan": 14,
    "bright-white": 15,
}

# Canonical name per palette index (``purple`` is an alias of ``magenta``)
ANSI_NUMBER_TO_NAME: Final[dict[int, str]] = {
    code: name
    for name, code in reversed(ANSI_COLOR_NAMES.items())
}

NORMAL_COLOR: Final[str] = "normal"
AUTO_COLOR: Final[str] = "auto"

_HEX_RE: Final[re.Pattern[str]] = re.compile(r"#([0-9a-f]{6})", re.IGNORECASE)
_CODE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]{1,3}")

# Channel levels of the 6x6x6 color cube (palette indices 16..231)
_CUBE_LEVELS: Final[tuple[int, ...]] = (0, 95, 135, 175, 215, 255)


def ansi_color_name_to_number(name: str) -> int | None:
    """Return the palette index of an ANSI color name, or None if unknown."""
    return ANSI_COLOR_NAMES.get(name.lower())


def _nearest_cube_index(value: int) -> int:
    return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - value))


def ansi256_from_rgb(r: int, g: int, b: int) -> int:
    """Return the xterm-256 palette index closest to an RGB color.

    Candidates are the 6x6x6 color cube and the 24-step grey ramp; the
    system colors 0..15 are never returned since terminals redefine them.
    """
    ri, gi, bi = _nearest_cube_index(r), _nearest_cube_index(g), _nearest_cube_index(b)
    cube = (_CUBE_LEVELS[ri], _CUBE_LEVELS[gi], _CUBE_LEVELS[bi])
    cube_index = 16 + 36 * ri + 6 * gi + bi

    average = (r + g + b) // 3
    grey_step = 23 if average > 238 else max(0, (average - 3) // 10)
    grey_level = 8 + 10 * grey_step
    grey_index = 232 + grey_step

    def distance(candidate: tuple[int, int, int]) -> int:
        return sum((c - v) ** 2 for c, v in zip(candidate, (r, g, b), strict=True))

    if distance((grey_level, grey_level, grey_level)) < distance(cube):
        return grey_index
    return cube_index


def color_from_rgb_or_ansi_code(token: str, true_color: bool) -> Color:
    """Resolve a color token that names an actual color.

    Args:
        token (str): A ``#rrggbb`` hex color, a palette index or an ANSI color name.
        true_color (bool): Whether 24-bit colors may be returned. When False, RGB
            colors are approximated with the 256-color palette.

    Returns:
        Color: The resolved color.

    Raises:
        InvalidColorError: If the token is not a recognized color.
    """
    match = _HEX_RE.fullmatch(token)
    if match:
        value = int(match.group(1), 16)
        rgb = RgbColor(value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF)
        if true_color:
            return rgb
        return FixedColor(ansi256_from_rgb(rgb.r, rgb.g, rgb.b))

    if _CODE_RE.fullmatch(token):
        code = int(token)
        if code <= 255:
            return FixedColor(code)

    code_from_name = ansi_color_name_to_number(token)
    if code_from_name is not None:
        return FixedColor(code_from_name)

    logger.debug("Cannot resolve color token %r", token)
    raise InvalidColorError(token)


def color_from_rgb_or_ansi_code_with_default(
    token: str,
    default: Color | None,
    true_color: bool,
) -> Color | None:
    """Resolve a color token, honoring the ``normal`` and ``auto`` pseudo-colors.

    Args:
        token (str): The color token.
        default (Color | None): Color used when the token is ``auto``.
        true_color (bool): Whether 24-bit colors may be returned.

    Returns:
        Color | None: ``None`` for ``normal``, ``default`` for ``auto``, the
            resolved color otherwise.

    Raises:
        InvalidColorError: If the token is not a recognized color.
    """
    lowered = token.lower()
    if lowered == NORMAL_COLOR:
        return None
    if lowered == AUTO_COLOR:
        return default
    return color_from_rgb_or_ansi_code(lowered, true_color)
