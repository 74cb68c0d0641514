# topmark:header:start
#
#   project      : StyleSpec
#   file         : errors.py
#   file_relpath : src/stylespec/style/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while parsing style strings.

Every parse failure is a user input error: the message identifies the
offending string verbatim and the user fixes it by editing that string. The
parsing layer only raises; converting an error into console output and an
exit status is left to the CLI (see `stylespec.cli.errors`).
"""

from __future__ import annotations


class StyleError(ValueError):
    """Base class for all style parsing errors.

    Attributes:
        source (str): The style string (or token) that could not be parsed.
    """

    source: str

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source

    @property
    def message(self) -> str:
        """Return the user-facing message."""
        return str(self)


class InvalidStyleStringError(StyleError):
    """More than two color-like tokens were supplied."""

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Invalid style string: {source}. See the STYLES section of stylespec --help.",
            source,
        )


class MisplacedSyntaxError(StyleError):
    """The ``syntax`` sentinel was used as the background color."""

    def __init__(self, source: str) -> None:
        super().__init__(
            "You have used the special color 'syntax' as a background color "
            "(second color in a style string). It may only be used as a foreground "
            "color (first color in a style string).",
            source,
        )


class InvalidDecorationContentError(StyleError):
    """A decoration style string contains ``raw`` or ``syntax``.

    Attributes:
        keyword (str): The forbidden keyword.
    """

    keyword: str

    def __init__(self, keyword: str, source: str) -> None:
        super().__init__(f"'{keyword}' may not be used in a decoration style.", source)
        self.keyword = keyword


class InvalidColorError(StyleError):
    """A color token could not be resolved by the color resolver."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid color or style attribute: {token}", token)


class DecorationConflictError(StyleError):
    """A style string names decoration keywords that cannot be combined."""

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Conflicting decoration attributes in style string: {source!r}. "
            "Use at most one of 'box', 'ul', 'ol' (or 'ul ol' for both lines), "
            "or 'none' / 'plain' on their own.",
            source,
        )


class MissingDecorationKindError(StyleError):
    """A decoration style string sets colors but no decoration type."""

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Decoration style string {source!r} does not name a decoration type "
            "(one of 'box', 'ul', 'ol', 'underoverline', 'none', 'plain', 'omit').",
            source,
        )


class UnknownDecorationAttributeError(StyleError):
    """A special decoration attribute token is not recognized."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown decoration attribute: {token!r}", token)
