# topmark:header:start
#
#   project      : StyleSpec
#   file         : enum_mixins.py
#   file_relpath : src/stylespec/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for StyleSpec (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: a ``str`` Enum whose ``.value`` is a stable keyword and
      which carries a human label plus alias keywords. ``parse()`` maps any
      keyword or alias back to the member, which lets a single table drive
      both tokenizing and reporting.

Example:
    ```python
    class Line(KeyedStrEnum):
        UNDER = ("underline", "Line below the text", ("ul",))
        OVER = ("overline", "Line above the text", ("ol",))

    assert Line.parse("UL") is Line.UNDER
    assert Line.UNDER.keywords == ("underline", "ul")
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize a keyword for comparison (trimmed, case-insensitive)."""
    return s.strip().lower()


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable keyword; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative keywords accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable keyword (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable keyword (same as `.value`)."""
        return str(self.value)

    @property
    def keywords(self) -> tuple[str, ...]:
        """Return the key followed by all aliases."""
        return (self.key, *self.aliases)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a keyword into an enum member.

        Matches the stable key (`.value`) and any configured alias,
        case-insensitively. Returns None when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for m in cls:
            if token in m.keywords:
                return m
        return None
