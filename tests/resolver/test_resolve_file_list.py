# topmark:header:start
#
#   project      : header42
#   file         : test_resolve_file_list.py
#   file_relpath : tests/resolver/test_resolve_file_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File resolver: expansion, recognition and gitignore-style exclusion."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from header42.file_resolver import resolve_file_list


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for rel in (
        "src/main.c",
        "src/util.h",
        "src/notes.txt",
        "src/gen/auto.c",
        "Makefile",
        ".git/hooks/pre-commit.sh",
    ):
        p: Path = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_directory_expansion_keeps_recognized_files(tree: Path) -> None:
    files: list[Path] = resolve_file_list(["."])
    assert [p.as_posix() for p in files] == [
        "Makefile",
        "src/gen/auto.c",
        "src/main.c",
        "src/util.h",
    ]


def test_explicit_files_are_kept_even_when_unrecognized(tree: Path) -> None:
    assert resolve_file_list(["src/notes.txt"]) == [Path("src/notes.txt")]


def test_glob_expansion(tree: Path) -> None:
    assert resolve_file_list(["src/*.c"]) == [Path("src/main.c")]
    assert resolve_file_list(["src/**/*.c"]) == [Path("src/gen/auto.c"), Path("src/main.c")]


def test_exclude_patterns_use_gitignore_semantics(tree: Path) -> None:
    files: list[Path] = resolve_file_list(["src"], exclude_patterns=["gen/", "*.h"])
    assert files == [Path("src/main.c")]


def test_results_are_deduplicated(tree: Path) -> None:
    assert resolve_file_list(["src/main.c", "src", "src/*.c"]).count(Path("src/main.c")) == 1


def test_missing_path_yields_nothing(tree: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    assert resolve_file_list(["missing.c", "*.rs"]) == []
    assert "No such file or directory: missing.c" in caplog.text
    assert "No matches for glob pattern: *.rs" in caplog.text
