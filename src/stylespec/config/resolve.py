# topmark:header:start
#
#   project      : StyleSpec
#   file         : resolve.py
#   file_relpath : src/stylespec/config/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a style table into `Style` values.

Each role is parsed independently: an invalid style string is recorded as an
error diagnostic for its role and the remaining roles are still resolved, so
a single run reports every problem in the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from stylespec.config.logging import get_logger
from stylespec.diagnostic.model import DiagnosticLog
from stylespec.style.colors import color_from_rgb_or_ansi_code
from stylespec.style.errors import StyleError
from stylespec.style.facade import style_from_str, style_from_str_with_deprecated_foreground

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger
    from stylespec.config.model import StyleRoleConfig, StyleTableConfig
    from stylespec.style.model import Style
    from stylespec.style.types import Color

logger: StylespecLogger = get_logger(__name__)


@dataclass
class StyleResolution:
    """Outcome of resolving a style table.

    Attributes:
        styles (dict[str, Style]): Successfully resolved roles, in table order.
        diagnostics (DiagnosticLog): Loader findings plus one error per failed role.
    """

    styles: dict[str, Style] = field(default_factory=lambda: {})
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @property
    def ok(self) -> bool:
        """Return True if every role was resolved."""
        return not self.diagnostics.has_error()


def _default_color(token: str | None, true_color: bool) -> Color | None:
    if token is None:
        return None
    return color_from_rgb_or_ansi_code(token.lower(), true_color)


def resolve_role(role: StyleRoleConfig, *, true_color: bool) -> Style:
    """Resolve one role of a style table.

    Args:
        role (StyleRoleConfig): The role's raw strings.
        true_color (bool): Whether colors may resolve to 24-bit RGB.

    Returns:
        Style: The resolved style.

    Raises:
        StyleError: If one of the role's strings is invalid.
    """
    foreground_default = _default_color(role.foreground_default, true_color)
    background_default = _default_color(role.background_default, true_color)
    if role.special_attributes:
        return style_from_str_with_deprecated_foreground(
            role.style,
            foreground_default,
            background_default,
            role.decoration_style,
            role.deprecated_color,
            true_color,
            role.emph,
        )
    return style_from_str(
        role.style,
        foreground_default,
        background_default,
        role.decoration_style,
        true_color,
        role.emph,
    )


def resolve_styles(config: StyleTableConfig) -> StyleResolution:
    """Resolve every role of a style table.

    Args:
        config (StyleTableConfig): The loaded table.

    Returns:
        StyleResolution: Resolved styles and diagnostics.
    """
    resolution = StyleResolution()
    resolution.diagnostics.extend(config.diagnostics)

    for role in config.roles:
        if role.deprecated_color is not None:
            if role.special_attributes:
                resolution.diagnostics.add_info(
                    "deprecated_color is deprecated; set the color in style and "
                    "decoration_style instead",
                    role=role.name,
                )
            else:
                resolution.diagnostics.add_warning(
                    "deprecated_color is ignored when special_attributes = false",
                    role=role.name,
                )
        try:
            resolution.styles[role.name] = resolve_role(role, true_color=config.true_color)
        except StyleError as exc:
            logger.debug("Role %r failed to resolve: %s", role.name, exc)
            resolution.diagnostics.add_error(exc.message, role=role.name)

    logger.info(
        "Resolved %d of %d style role(s)", len(resolution.styles), len(config.roles)
    )
    return resolution
