# topmark:header:start
#
#   project      : StyleSpec
#   file         : model.py
#   file_relpath : src/stylespec/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable style table configuration.

A style table maps role names (``"file"``, ``"minus"``, ``"hunk-header"``,
...) to the raw strings a user configured for that role. Nothing is parsed
here; see `stylespec.config.resolve` for turning roles into `Style` values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from stylespec.diagnostic.model import Diagnostic


@dataclass(frozen=True)
class StyleRoleConfig:
    """Raw configuration of one style role.

    Attributes:
        name (str): Role name (the TOML table name under ``[styles]``).
        style (str): Main style string.
        decoration_style (str | None): Decoration style string.
        deprecated_color (str | None): Legacy single-color argument overriding
            the foreground of the text and of its decoration.
        foreground_default (str | None): Color token used for an ``auto`` foreground.
        background_default (str | None): Color token used for an ``auto`` background.
        emph (bool): Whether this role is an emphasis style.
        special_attributes (bool): Whether decoration keywords (``box``, ``ul``, ...)
            in ``style`` apply to the decoration.
    """

    name: str
    style: str
    decoration_style: str | None = None
    deprecated_color: str | None = None
    foreground_default: str | None = None
    background_default: str | None = None
    emph: bool = False
    special_attributes: bool = True


@dataclass(frozen=True)
class StyleTableConfig:
    """A loaded style table.

    Attributes:
        roles (tuple[StyleRoleConfig, ...]): Roles in file order.
        true_color (bool): Whether colors may resolve to 24-bit RGB.
        source (Path | None): File the table was read from, if any.
        diagnostics (tuple[Diagnostic, ...]): Non-fatal findings from loading
            (e.g. unknown keys).
    """

    roles: tuple[StyleRoleConfig, ...] = ()
    true_color: bool = True
    source: Path | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    def role(self, name: str) -> StyleRoleConfig | None:
        """Return the role with the given name, if configured."""
        for role in self.roles:
            if role.name == name:
                return role
        return None
