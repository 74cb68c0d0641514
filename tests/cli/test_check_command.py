# topmark:header:start
#
#   project      : StyleSpec
#   file         : test_check_command.py
#   file_relpath : tests/cli/test_check_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `stylespec check` exit codes and output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FAILURE,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path

VALID = """\
[styles.file]
style = "blue"
decoration_style = "ul ol"

[styles.minus]
style = "normal auto"
background_default = "#3f0001"
"""

INVALID = """\
[styles.file]
style = "red green blue"

[styles.hunk]
style = "bold"
decoration_style = "box"

[styles.zero]
style = "red syntax"
"""


def test_check_discovers_stylespec_toml(tmp_path: Path) -> None:
    """Without a path, ``stylespec.toml`` in the working directory is used."""
    (tmp_path / "stylespec.toml").write_text(VALID, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "check"])
    assert_SUCCESS(result)
    assert "2 of 2 style(s) valid, 0 error(s), 0 warning(s)" in result.output


def test_check_discovers_pyproject(tmp_path: Path) -> None:
    """``[tool.stylespec]`` in ``pyproject.toml`` is used as a fallback."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.stylespec.styles.file]\nstyle = "bold"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["--no-color", "check"])
    assert_SUCCESS(result)
    assert "1 of 1 style(s) valid" in result.output


def test_check_verbose_lists_styles(tmp_path: Path) -> None:
    """``-v`` prints every resolved style."""
    path = tmp_path / "styles.toml"
    path.write_text(VALID, encoding="utf-8")
    result = run_cli(["--no-color", "-v", "check", str(path)])
    assert_SUCCESS(result)
    assert "ok: [file] blue | underoverline" in result.output


def test_check_reports_every_invalid_role(tmp_path: Path) -> None:
    """Every failing role is reported and the command fails."""
    path = tmp_path / "stylespec.toml"
    path.write_text(INVALID, encoding="utf-8")
    result = run_cli(["--no-color", "check", str(path)])
    assert_FAILURE(result)
    assert "error: [file] Invalid style string: red green blue." in result.output
    assert "error: [zero] You have used the special color 'syntax'" in result.output
    assert "1 of 3 style(s) valid, 2 error(s)" in result.output


def test_check_quiet_prints_only_problems(tmp_path: Path) -> None:
    """``-q`` suppresses the summary but not the errors."""
    path = tmp_path / "stylespec.toml"
    path.write_text(INVALID, encoding="utf-8")
    result = run_cli(["--no-color", "-q", "check", str(path)])
    assert_FAILURE(result)
    assert "style(s) valid" not in result.output
    assert "error: [file]" in result.output


def test_check_json(tmp_path: Path) -> None:
    """``--format json`` reports styles, diagnostics and counts."""
    path = tmp_path / "stylespec.toml"
    path.write_text(INVALID, encoding="utf-8")
    result = run_cli(["check", str(path), "--format", "json"])
    assert_FAILURE(result)
    data = json.loads(result.output)
    assert list(data["styles"]) == ["hunk"]
    assert data["styles"]["hunk"]["decoration"]["kind"] == "box"
    assert data["summary"] == {"info": 0, "warning": 0, "error": 2}
    assert [d["role"] for d in data["diagnostics"]] == ["file", "zero"]


def test_check_true_color_override(tmp_path: Path) -> None:
    """``--no-true-color`` overrides the config file."""
    path = tmp_path / "stylespec.toml"
    path.write_text(VALID, encoding="utf-8")
    result = run_cli(["check", str(path), "--no-true-color", "--format", "json"])
    assert_SUCCESS(result)
    data = json.loads(result.output)
    assert data["true_color"] is False
    assert data["styles"]["minus"]["style"]["background"]["type"] == "fixed"


def test_check_warns_on_unknown_keys(tmp_path: Path) -> None:
    """Unknown keys are warnings; the check still succeeds."""
    path = tmp_path / "stylespec.toml"
    path.write_text('[styles.file]\nstyle = "red"\ncolour = "blue"\n', encoding="utf-8")
    result = run_cli(["--no-color", "check", str(path)])
    assert_SUCCESS(result)
    assert "warning: [file] Unknown key in [styles.file]: 'colour'" in result.output


def test_check_missing_path(tmp_path: Path) -> None:
    """A missing explicit path exits with FILE_NOT_FOUND."""
    result = run_cli(["check", str(tmp_path / "missing.toml")])
    assert_FILE_NOT_FOUND(result)


def test_check_no_config(tmp_path: Path) -> None:
    """Without any config file the command exits with CONFIG_ERROR."""
    result = run_cli_in(tmp_path, ["check"])
    assert_CONFIG_ERROR(result)
    assert "No stylespec.toml" in result.output


def test_check_malformed_config(tmp_path: Path) -> None:
    """Malformed TOML exits with CONFIG_ERROR."""
    path = tmp_path / "stylespec.toml"
    path.write_text("[styles.file]\nstyle = 'red'\nemph = maybe\n", encoding="utf-8")
    result = run_cli(["check", str(path)])
    assert_CONFIG_ERROR(result)
