# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for StyleSpec.

Submodules:
    - `logging`: TRACE-aware logger class and colored formatter.
    - `keys`: canonical TOML section and key names.
    - `model`: immutable style table configuration.
    - `loader`: discovery and `tomlkit`-based loading of ``stylespec.toml`` /
      ``[tool.stylespec]`` in ``pyproject.toml``.
    - `resolve`: turning a style table into resolved `Style` values.

This package module deliberately imports nothing so that `stylespec.style`
can depend on `stylespec.config.logging` without import cycles.
"""

from __future__ import annotations
