# topmark:header:start
#
#   project      : header42
#   file         : diff.py
#   file_relpath : src/header42/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview.

Used by the CLI to show what a header update would change before files are
written.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from header42.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from header42.core.document import Document

logger = get_logger(__name__)


def unified_diff(original: Document, updated: Document, name: str) -> list[str]:
    """Return a unified diff between two documents.

    Args:
        original (Document): Document before the update.
        updated (Document): Document after the update.
        name (str): File name shown in the ``---``/``+++`` lines.

    Returns:
        list[str]: Diff lines (with terminators); empty when both are equal.
    """
    diff: list[str] = list(
        difflib.unified_diff(
            list(original.lines),
            list(updated.lines),
            fromfile=f"{name} (original)",
            tofile=f"{name} (updated)",
        )
    )
    logger.trace("Diff for %s has %d line(s)", name, len(diff))
    return diff


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        # Show control characters explicitly.
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
