# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (exit codes, color, formats)."""

from __future__ import annotations
