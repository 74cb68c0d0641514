# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for StyleSpec."""

from __future__ import annotations
