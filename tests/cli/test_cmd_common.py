# topmark:header:start
#
#   project      : header42
#   file         : test_cmd_common.py
#   file_relpath : tests/cli/test_cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared per-file helpers used by `check` and `update`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from header42.cli.cmd_common import open_file
from header42.cli.exit_codes import ExitCode
from header42.config import Settings
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_open_file_reads_recognized_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "a.c"
    path.write_text("int a;\n", encoding="utf-8")

    loaded, report = open_file(path, settings=Settings.defaults())

    assert loaded is not None
    assert loaded.document.text == "int a;\n"
    assert report.language == "c"
    assert report.error is None


def test_open_file_skips_unsupported_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01")

    loaded, report = open_file(path, settings=Settings.defaults())

    assert loaded is None
    assert report.error is None
    assert report.message == "unsupported file type"


def test_open_file_does_not_read_excluded_language(tmp_path: Path) -> None:
    path: Path = tmp_path / "ci.yml"
    path.write_bytes(b"\xff\xfe not utf-8")

    loaded, report = open_file(path, settings=Settings(exclude_languages=("yaml",)))

    assert loaded is None
    assert report.error is None
    assert report.language == "yaml"
    assert report.message == "language 'yaml' is excluded"


def test_open_file_reports_undecodable_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "a.c"
    path.write_bytes(b"\xff\xfe not utf-8")

    loaded, report = open_file(path, settings=Settings.defaults())

    assert loaded is None
    assert report.error is ExitCode.ENCODING_ERROR
    assert report.language == "c"


def test_check_and_update_skip_the_same_files(isolation: Path) -> None:
    (isolation / "header42.toml").write_text('exclude_languages = ["yaml"]\n', encoding="utf-8")
    (isolation / "ci.yml").write_bytes(b"\xff\xfe not utf-8")
    (isolation / "data.bin").write_bytes(b"\x00\x01")

    check: Result = run_cli_in(isolation, ["-v", "check", "ci.yml", "data.bin"])
    update: Result = run_cli_in(isolation, ["-v", "update", "ci.yml", "data.bin"])

    for result in (check, update):
        assert_SUCCESS(result)
        assert "ci.yml: skipped (language 'yaml' is excluded)" in result.output
        assert "data.bin: skipped (unsupported file type)" in result.output
