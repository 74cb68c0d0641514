# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec CLI subcommands."""

from __future__ import annotations
