# topmark:header:start
#
#   project      : StyleSpec
#   file         : exit_codes.py
#   file_relpath : src/stylespec/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the StyleSpec CLI.

StyleSpec aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. An invalid style string
exits with the generic ``FAILURE`` code (1).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StyleSpec CLI.

    Attributes:
        SUCCESS: Successful execution; every style parsed.
        FAILURE: At least one style string is invalid.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Config path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
