# topmark:header:start
#
#   project      : StyleSpec
#   file         : model.py
#   file_relpath : src/stylespec/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for StyleSpec.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message + role).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding and summarizing
      diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from stylespec.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stylespec.config.logging import StylespecLogger


logger: StylespecLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional role.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): Human-readable message.
        role (str | None): Style role the diagnostic refers to, if any.
    """

    level: DiagnosticLevel
    message: str
    role: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {"level": self.level.value, "role": self.role, "message": self.message}


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return {"info": self.n_info, "warning": self.n_warning, "error": self.n_error}


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics gathered while resolving a style table."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s] %s: %r", diagnostic.level.value, diagnostic.role, diagnostic.message
        )

    def add_info(self, message: str, *, role: str | None = None) -> None:
        """Add an ``info`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            role: The style role concerned, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, role))

    def add_warning(self, message: str, *, role: str | None = None) -> None:
        """Add a ``warning`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            role: The style role concerned, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, role))

    def add_error(self, message: str, *, role: str | None = None) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            role: The style role concerned, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, role))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics from another source, in order."""
        for diagnostic in diagnostics:
            self._add(diagnostic)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def for_role(self, role: str) -> list[Diagnostic]:
        """Return the diagnostics concerning one style role."""
        return [d for d in self.items if d.role == role]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-level counts.
    """
    items = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
