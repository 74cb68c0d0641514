# topmark:header:start
#
#   project      : StyleSpec
#   file         : loader.py
#   file_relpath : src/stylespec/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load style tables from TOML.

Sources, in order of precedence when no explicit path is given:

- ``stylespec.toml`` in the working directory (keys at the top level);
- ``pyproject.toml`` in the working directory (keys under ``[tool.stylespec]``).

Parsing is done with `tomlkit` and unwrapped to plain `dict` structures.
Value types are validated here; style strings themselves are only parsed by
`stylespec.config.resolve`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from stylespec.config.errors import StyleConfigError
from stylespec.config.keys import Toml
from stylespec.config.logging import get_logger
from stylespec.config.model import StyleRoleConfig, StyleTableConfig
from stylespec.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION, STYLESPEC_TOML_NAME
from stylespec.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from stylespec.config.logging import StylespecLogger

TomlTable = dict[str, Any]

logger: StylespecLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        StyleConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise StyleConfigError(f"cannot read file: {e.strerror or e}", path) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise StyleConfigError(f"invalid TOML: {e}", path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pyproject_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.stylespec]`` table of a parsed ``pyproject.toml``, if present."""
    table: Any = data
    for key in PYPROJECT_TOOL_SECTION:
        if not isinstance(table, dict) or key not in table:
            return None
        table = cast("TomlTable", table)[key]
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_path(cwd: Path | None = None) -> Path | None:
    """Return the config file to use for ``cwd``, or None if there is none.

    A ``pyproject.toml`` only counts when it has a ``[tool.stylespec]`` table.

    Raises:
        StyleConfigError: If ``pyproject.toml`` exists but cannot be parsed.
    """
    base = cwd or Path.cwd()
    candidate = base / STYLESPEC_TOML_NAME
    if candidate.is_file():
        logger.debug("Discovered %s", candidate)
        return candidate
    candidate = base / PYPROJECT_TOML_NAME
    if candidate.is_file():
        section = extract_pyproject_section(load_toml_dict(candidate))
        if section is not None:
            logger.debug("Discovered [tool.stylespec] in %s", candidate)
            return candidate
    return None


def _get_str(table: TomlTable, key: str, *, role: str, path: Path | None) -> str | None:
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise StyleConfigError(
        f"[styles.{role}] {key} must be a string, got {type(value).__name__}", path
    )


def _get_bool(table: TomlTable, key: str, default: bool, *, where: str, path: Path | None) -> bool:
    value: Any = table.get(key, default)
    if isinstance(value, bool):
        return value
    raise StyleConfigError(f"{where} {key} must be a boolean, got {type(value).__name__}", path)


def config_from_toml_dict(data: TomlTable, *, source: Path | None = None) -> StyleTableConfig:
    """Build a `StyleTableConfig` from a parsed (and un-nested) TOML table.

    Args:
        data (TomlTable): Table holding ``true_color`` and ``[styles.*]``.
        source (Path | None): File the table came from, for messages.

    Returns:
        StyleTableConfig: The style table. Unknown keys are reported as
            warning diagnostics.

    Raises:
        StyleConfigError: If a value has the wrong type or a role lacks ``style``.
    """
    diagnostics = DiagnosticLog()
    for key in data:
        if key not in Toml.TOP_LEVEL_KEYS:
            diagnostics.add_warning(f"Unknown configuration key: {key!r}")

    true_color = _get_bool(data, Toml.KEY_TRUE_COLOR, True, where="top-level", path=source)

    styles_any: Any = data.get(Toml.SECTION_STYLES, {})
    if not isinstance(styles_any, dict):
        raise StyleConfigError(f"[{Toml.SECTION_STYLES}] must be a table", source)
    styles = cast("dict[str, Any]", styles_any)

    roles: list[StyleRoleConfig] = []
    for name, table_any in styles.items():
        if not isinstance(table_any, dict):
            raise StyleConfigError(f"[styles.{name}] must be a table", source)
        table = cast("TomlTable", table_any)
        for key in table:
            if key not in Toml.ROLE_KEYS:
                diagnostics.add_warning(f"Unknown key in [styles.{name}]: {key!r}", role=name)

        style = _get_str(table, Toml.KEY_STYLE, role=name, path=source)
        if style is None:
            raise StyleConfigError(f"[styles.{name}] is missing the {Toml.KEY_STYLE!r} key", source)
        where = f"[styles.{name}]"
        roles.append(
            StyleRoleConfig(
                name=name,
                style=style,
                decoration_style=_get_str(
                    table, Toml.KEY_DECORATION_STYLE, role=name, path=source
                ),
                deprecated_color=_get_str(
                    table, Toml.KEY_DEPRECATED_COLOR, role=name, path=source
                ),
                foreground_default=_get_str(
                    table, Toml.KEY_FOREGROUND_DEFAULT, role=name, path=source
                ),
                background_default=_get_str(
                    table, Toml.KEY_BACKGROUND_DEFAULT, role=name, path=source
                ),
                emph=_get_bool(table, Toml.KEY_EMPH, False, where=where, path=source),
                special_attributes=_get_bool(
                    table, Toml.KEY_SPECIAL_ATTRIBUTES, True, where=where, path=source
                ),
            )
        )

    logger.info("Loaded %d style role(s) from %s", len(roles), source or "<memory>")
    return StyleTableConfig(
        roles=tuple(roles),
        true_color=true_color,
        source=source,
        diagnostics=tuple(diagnostics),
    )


def load_config(path: Path | None = None) -> StyleTableConfig:
    """Load a style table from ``path`` or from the discovered config file.

    Args:
        path (Path | None): Explicit config file. ``pyproject.toml`` files are
            read from their ``[tool.stylespec]`` table.

    Returns:
        StyleTableConfig: The loaded table.

    Raises:
        StyleConfigError: If no config file is found, or it cannot be loaded.
    """
    if path is None:
        path = discover_config_path()
        if path is None:
            raise StyleConfigError(
                f"No {STYLESPEC_TOML_NAME} or {PYPROJECT_TOML_NAME} with [tool.stylespec] found"
            )

    data = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        section = extract_pyproject_section(data)
        if section is None:
            raise StyleConfigError("no [tool.stylespec] table", path)
        data = section
    return config_from_toml_dict(data, source=path)
