# topmark:header:start
#
#   project      : StyleSpec
#   file         : constants.py
#   file_relpath : src/stylespec/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

STYLESPEC_VERSION: str = get_version("stylespec")

# Environment variable consulted by `setup_logging()`
LOG_LEVEL_ENV_VAR: str = "STYLESPEC_LOG_LEVEL"

# Config discovery, in order of precedence:
STYLESPEC_TOML_NAME: str = "stylespec.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, str] = ("tool", "stylespec")
