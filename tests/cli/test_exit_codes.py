# topmark:header:start
#
#   project      : header42
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: exit codes for usage, missing, encoding and I/O failures."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from header42.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_USAGE_ERROR, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_no_paths_is_a_usage_error(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["update"])

    assert_USAGE_ERROR(result)
    assert "No paths given" in result.output


def test_verbose_and_quiet_are_mutually_exclusive(isolation: Path) -> None:
    assert_USAGE_ERROR(run_cli_in(isolation, ["-v", "-q", "version"]))


def test_missing_path_exits_with_file_not_found(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["check", "nope.c"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "No such file or directory: nope.c" in result.output


def test_binary_file_exits_with_encoding_error(isolation: Path) -> None:
    (isolation / "blob.c").write_bytes(b"\xff\xfe\x00\x81")
    (isolation / "ok.c").write_text("int a;\n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["update", "--write", "blob.c", "ok.c"])

    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
    assert "blob.c: not a UTF-8 text file" in result.output
    assert "Updated:" in (isolation / "ok.c").read_text(encoding="utf-8")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="needs POSIX permissions enforced for a non-root user",
)
def test_unreadable_file_exits_with_io_error(isolation: Path) -> None:
    f: Path = isolation / "secret.c"
    f.write_text("int a;\n", encoding="utf-8")
    f.chmod(0)
    try:
        result: Result = run_cli_in(isolation, ["update", "secret.c"])
    finally:
        f.chmod(0o644)

    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "secret.c:" in result.output
