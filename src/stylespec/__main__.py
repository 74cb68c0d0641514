# topmark:header:start
#
#   project      : StyleSpec
#   file         : __main__.py
#   file_relpath : src/stylespec/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running StyleSpec via ``python -m stylespec``.

Delegates directly to :func:`stylespec.cli.main.cli`, so the module interface
and the ``stylespec`` console script share a single entry point.

Examples:
    Validate the style table of the current project::

        python -m stylespec check
"""

from __future__ import annotations

from stylespec.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
