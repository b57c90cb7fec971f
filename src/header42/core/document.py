# topmark:header:start
#
#   project      : header42
#   file         : document.py
#   file_relpath : src/header42/core/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory text document made of lines.

A [`Document`][header42.core.document.Document] is an immutable sequence of
lines, each keeping its own terminator (``\\n``, ``\\r\\n`` or ``\\r``), plus a
line-to-offset mapping. Only these three sequences end a line; other Unicode
line separators are regular characters, the way text editors count lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from header42.core.locator import HeaderSpan

_LINE_RE: Final[re.Pattern[str]] = re.compile(r".*?(?:\r\n|\r|\n)|.+", re.DOTALL)


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, keeping the terminators."""
    return _LINE_RE.findall(text)


def detect_newline(lines: list[str]) -> str:
    r"""Return the first newline sequence found in ``lines`` (``"\n"`` if none)."""
    for ln in lines:
        if ln.endswith("\r\n"):
            return "\r\n"
        if ln.endswith("\n"):
            return "\n"
        if ln.endswith("\r"):
            return "\r"
    return "\n"


def strip_newline(line: str) -> str:
    """Return ``line`` without its terminator."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


@dataclass(frozen=True)
class Document:
    """Immutable text document.

    Attributes:
        lines (tuple[str, ...]): Lines of the document, terminators included.
    """

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> Document:
        """Build a document from raw text."""
        return cls(tuple(split_lines(text)))

    @classmethod
    def from_lines(cls, lines: list[str] | tuple[str, ...]) -> Document:
        """Build a document from lines that may lack terminators.

        Missing terminators are added (``"\\n"``) to every line but the last.
        """
        out: list[str] = []
        for index, line in enumerate(lines):
            if index < len(lines) - 1 and strip_newline(line) == line:
                line += "\n"
            out.append(line)
        return cls(tuple(out))

    @property
    def text(self) -> str:
        """Full text of the document."""
        return "".join(self.lines)

    @property
    def newline(self) -> str:
        """Newline sequence used by the document."""
        return detect_newline(list(self.lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def stripped_lines(self) -> list[str]:
        """Return the lines without their terminators."""
        return [strip_newline(line) for line in self.lines]

    def line_offsets(self) -> list[int]:
        """Return the character offset at which each line starts."""
        offsets: list[int] = []
        pos = 0
        for line in self.lines:
            offsets.append(pos)
            pos += len(line)
        return offsets

    def offset_of(self, line: int) -> int:
        """Return the offset of the start of ``line``.

        Lines past the end clamp to the end of the document.
        """
        if line <= 0:
            return 0
        if line >= len(self.lines):
            return sum(len(ln) for ln in self.lines)
        return self.line_offsets()[line]

    def span_text(self, span: HeaderSpan) -> str:
        """Return the text covered by ``span``."""
        return "".join(self.lines[span.start_line : span.end_line])

    def replace_span(self, span: HeaderSpan, text: str) -> Document:
        """Return a new document with the lines of ``span`` replaced by ``text``."""
        start: int = self.offset_of(span.start_line)
        end: int = self.offset_of(span.end_line)
        full: str = self.text
        return Document.from_text(full[:start] + text + full[end:])

    def insert_at_start(self, text: str) -> Document:
        """Return a new document with ``text`` inserted at line 0, column 0."""
        return Document.from_text(text + self.text)
