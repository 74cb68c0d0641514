# topmark:header:start
#
#   project      : StyleSpec
#   file         : __init__.py
#   file_relpath : src/stylespec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleSpec package.

StyleSpec parses whitespace-separated style strings (as found in command-line
flags and config files) into structured terminal styles: colors, text
attributes and an optional box / underline / overline decoration. It exposes
both a small typed API and a CLI for validating style tables.
"""

from __future__ import annotations
