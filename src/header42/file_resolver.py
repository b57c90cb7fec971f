# topmark:header:start
#
#   project      : header42
#   file         : file_resolver.py
#   file_relpath : src/header42/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input paths into the list of files to process.

Semantics:
  1. **Expansion**: positional paths may be files, directories (recursive) or
     glob patterns (expanded relative to the current working directory).
  2. **Recognition**: files found by expanding a directory or a glob are kept only
     when their file type is recognized. Files named explicitly are always kept so
     the caller can report them (or force a language).
  3. **Exclusion**: files matching any exclude pattern (gitignore semantics,
     relative to ``root``) are removed.
  4. The result is a **sorted**, de-duplicated list of paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from header42.config.logging import get_logger
from header42.filetypes import detect_language

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)

# Directories never descended into during expansion.
_SKIPPED_DIRS: Final[frozenset[str]] = frozenset({".git", ".hg", ".svn"})


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _expand(raw: str) -> tuple[list[Path], bool]:
    """Expand one positional argument.

    Returns:
        tuple[list[Path], bool]: The expanded paths and whether they were named
            explicitly (a literal file path).
    """
    if any(ch in raw for ch in "*?["):
        pattern = Path(raw)
        if pattern.is_absolute():
            anchor = Path(pattern.anchor)
            matches: list[Path] = sorted(anchor.glob(str(pattern.relative_to(anchor))))
        else:
            matches = sorted(Path(".").glob(raw))
        if not matches:
            logger.warning("No matches for glob pattern: %s", raw)
        return matches, False
    p = Path(raw)
    if p.is_dir():
        return sorted(p.rglob("*")), False
    if p.is_file():
        return [p], True
    logger.warning("No such file or directory: %s", raw)
    return [], False


def _in_skipped_dir(path: Path) -> bool:
    return any(part in _SKIPPED_DIRS for part in path.parts[:-1])


def resolve_file_list(
    paths: Sequence[str],
    *,
    exclude_patterns: Iterable[str] = (),
    root: Path | None = None,
) -> list[Path]:
    """Return the files to process for the given positional paths.

    Args:
        paths (Sequence[str]): Files, directories or glob patterns.
        exclude_patterns (Iterable[str]): Gitignore-style patterns of files to skip.
        root (Path | None): Base directory for exclude patterns (defaults to CWD).

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    base: Path = root or Path.cwd()
    selected: set[Path] = set()

    for raw in paths:
        expanded, explicit = _expand(raw)
        for p in expanded:
            if not p.is_file():
                continue
            if explicit:
                selected.add(p)
            elif not _in_skipped_dir(p) and detect_language(p) is not None:
                selected.add(p)

    patterns: list[str] = list(exclude_patterns)
    if patterns:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, patterns)
        kept: set[Path] = {p for p in selected if not spec.match_file(_rel_for_match(p, base))}
        logger.debug("Excluded %d file(s) by pattern", len(selected) - len(kept))
        selected = kept

    result: list[Path] = sorted(selected)
    logger.debug("Resolved %d file(s): %s", len(result), result)
    return result
