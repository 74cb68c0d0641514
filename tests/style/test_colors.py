# topmark:header:start
#
#   project      : StyleSpec
#   file         : test_colors.py
#   file_relpath : tests/style/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color token resolution."""

from __future__ import annotations

import pytest

from stylespec.style.colors import (
    ANSI_NUMBER_TO_NAME,
    ansi256_from_rgb,
    ansi_color_name_to_number,
    color_from_rgb_or_ansi_code,
    color_from_rgb_or_ansi_code_with_default,
)
from stylespec.style.errors import InvalidColorError
from stylespec.style.types import FixedColor, RgbColor
from tests.conftest import parametrize


@parametrize(
    "name,code",
    [
        ("black", 0),
        ("red", 1),
        ("magenta", 5),
        ("purple", 5),
        ("white", 7),
        ("bright-black", 8),
        ("bright-purple", 13),
        ("bright-white", 15),
        ("RED", 1),
    ],
)
def test_ansi_color_names(name: str, code: int) -> None:
    """ANSI color names map to palette indices 0..15."""
    assert ansi_color_name_to_number(name) == code
    assert color_from_rgb_or_ansi_code(name.lower(), True) == FixedColor(code)


def test_canonical_names_prefer_magenta() -> None:
    """``purple`` is an alias; ``magenta`` is the canonical name."""
    assert ANSI_NUMBER_TO_NAME[5] == "magenta"
    assert ANSI_NUMBER_TO_NAME[13] == "bright-magenta"
    assert len(ANSI_NUMBER_TO_NAME) == 16


@parametrize("token,code", [("0", 0), ("7", 7), ("42", 42), ("255", 255), ("007", 7)])
def test_palette_indices(token: str, code: int) -> None:
    """Numbers up to 255 are palette indices."""
    assert color_from_rgb_or_ansi_code(token, True) == FixedColor(code)


@parametrize("token", ["256", "1000", "-1", "#12345", "#1234567", "#gggggg", "rgb", "bright"])
def test_invalid_tokens(token: str) -> None:
    """Anything else is rejected with the token in the message."""
    with pytest.raises(InvalidColorError) as exc_info:
        color_from_rgb_or_ansi_code(token, True)
    assert exc_info.value.message == f"Invalid color or style attribute: {token}"


def test_hex_true_color() -> None:
    """Hex colors resolve to RGB with true color enabled."""
    assert color_from_rgb_or_ansi_code("#0a0B0c", True) == RgbColor(10, 11, 12)


@parametrize(
    "rgb,code",
    [
        ((255, 0, 0), 196),
        ((0, 0, 0), 16),
        ((255, 255, 255), 231),
        ((0, 95, 135), 24),
        ((128, 128, 128), 244),
    ],
)
def test_ansi256_from_rgb(rgb: tuple[int, int, int], code: int) -> None:
    """RGB colors map to the nearest cube or grey-ramp entry."""
    assert ansi256_from_rgb(*rgb) == code


def test_hex_without_true_color() -> None:
    """Hex colors are approximated without true color."""
    assert color_from_rgb_or_ansi_code("#ff0000", False) == FixedColor(196)


def test_with_default() -> None:
    """``normal`` gives no color and ``auto`` gives the default."""
    default = FixedColor(3)
    assert color_from_rgb_or_ansi_code_with_default("normal", default, True) is None
    assert color_from_rgb_or_ansi_code_with_default("AUTO", default, True) == default
    assert color_from_rgb_or_ansi_code_with_default("auto", None, True) is None
    assert color_from_rgb_or_ansi_code_with_default("Blue", default, True) == FixedColor(4)


def test_value_type_validation() -> None:
    """Out-of-range color values cannot be constructed."""
    with pytest.raises(ValueError):
        FixedColor(256)
    with pytest.raises(ValueError):
        RgbColor(0, 300, 0)
    assert RgbColor(255, 128, 0).hex == "#ff8000"
