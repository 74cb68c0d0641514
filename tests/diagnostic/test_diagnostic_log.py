# topmark:header:start
#
#   project      : StyleSpec
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DiagnosticLog` and per-level statistics."""

from __future__ import annotations

from stylespec.diagnostic import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    compute_diagnostic_stats,
)


def test_log_add_and_stats() -> None:
    """Each add_* helper appends one diagnostic of its level."""
    log = DiagnosticLog()
    log.add_info("a")
    log.add_warning("b", role="file")
    log.add_error("c", role="file")
    log.add_error("d")

    assert len(log) == 4
    assert log.has_warning() and log.has_error()
    stats = log.stats()
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 1, 2, 4)
    assert stats.to_dict() == {"info": 1, "warning": 1, "error": 2}
    assert [d.message for d in log.for_role("file")] == ["b", "c"]


def test_empty_log() -> None:
    """An empty log has no warnings or errors."""
    log = DiagnosticLog()
    assert not log.has_warning()
    assert not log.has_error()
    assert log.stats().total == 0
    assert list(log) == []


def test_extend_keeps_order() -> None:
    """Extending appends diagnostics in order."""
    first = Diagnostic(DiagnosticLevel.WARNING, "first")
    second = Diagnostic(DiagnosticLevel.INFO, "second", role="x")
    log = DiagnosticLog()
    log.extend([first, second])
    assert list(log) == [first, second]


def test_to_dict_and_compute_stats() -> None:
    """Diagnostics serialize to plain mappings."""
    d = Diagnostic(DiagnosticLevel.ERROR, "boom", role="minus")
    assert d.to_dict() == {"level": "error", "role": "minus", "message": "boom"}
    assert compute_diagnostic_stats([d, d]).n_error == 2
