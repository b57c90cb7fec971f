# topmark:header:start
#
#   project      : header42
#   file         : locator.py
#   file_relpath : src/header42/core/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate an existing header and read back its preserved fields.

A header is recognized by the ``Updated:`` keyword within the first lines of a
document. The header is assumed to start at the first line of the document and
to end with the border that follows the (last) ``Updated:`` line.

The ``Created:`` line is the only information carried over from an existing
header: it keeps the original creation date and author across regenerations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from header42.config.logging import get_logger
from header42.constants import DEFAULT_SCAN_LIMIT, UPDATED_MARKER
from header42.core.delimiters import supported_languages

if TYPE_CHECKING:
    from collections.abc import Sequence

    from header42.config.logging import Header42Logger
    from header42.core.delimiters import DelimiterPair

logger: Header42Logger = get_logger(__name__)

# Greedy date capture: the last " by " on the line separates date and author.
_CREATED_RE: Final[re.Pattern[str]] = re.compile(r"Created: (?P<date>.*) by (?P<name>.*)")


@dataclass(frozen=True)
class HeaderSpan:
    """Line range ``[start_line, end_line)`` covered by a header block.

    Attributes:
        start_line (int): First line of the header (inclusive).
        end_line (int): Line following the closing border (exclusive).
    """

    start_line: int
    end_line: int

    def __len__(self) -> int:
        return self.end_line - self.start_line


@dataclass(frozen=True)
class CreationInfo:
    """Creation metadata preserved across header regenerations."""

    created_at: str
    created_by: str


def locate(lines: Sequence[str], scan_limit: int = DEFAULT_SCAN_LIMIT) -> HeaderSpan | None:
    """Find the line range of an existing header.

    Args:
        lines (Sequence[str]): Document lines (with or without terminators).
        scan_limit (int): Maximum number of leading lines to inspect.

    Returns:
        HeaderSpan | None: ``[0, last_updated_line + 2)`` when one of the scanned
            lines contains ``"Updated:"``, otherwise ``None``.
    """
    last_match: int | None = None
    for index, line in enumerate(lines[:scan_limit]):
        if UPDATED_MARKER in line:
            last_match = index

    if last_match is None:
        logger.trace("No '%s' line in the first %d line(s)", UPDATED_MARKER, scan_limit)
        return None

    span = HeaderSpan(start_line=0, end_line=last_match + 2)
    logger.debug(
        "Existing header located at lines [%d, %d) (%d lines)",
        span.start_line,
        span.end_line,
        len(span),
    )
    return span


def _closing_tokens(delimiters: DelimiterPair | None) -> list[str]:
    if delimiters is not None:
        return [delimiters.end] if delimiters.end else []
    tokens: set[str] = {pair.end for pair in supported_languages().values() if pair.end}
    # Longest first so "*/" wins over a shorter token sharing its tail.
    return sorted(tokens, key=len, reverse=True)


def extract_creation_info(
    header_text: str,
    delimiters: DelimiterPair | None = None,
) -> CreationInfo | None:
    """Extract the ``Created: <date> by <name>`` values from a header.

    Rendered header lines end with padding and the closing comment token; both
    are removed from ``<name>``.

    Args:
        header_text (str): Text of the header block (one or more lines).
        delimiters (DelimiterPair | None): Delimiters the header was rendered with.
            When ``None``, any closing token of the delimiter table is stripped.

    Returns:
        CreationInfo | None: The trimmed date and author, or ``None`` when no line
            matches.
    """
    match = _CREATED_RE.search(header_text)
    if match is None:
        logger.debug("No 'Created:' line found in header")
        return None

    created_at: str = match.group("date").strip()
    created_by: str = match.group("name").strip()
    for token in _closing_tokens(delimiters):
        if created_by.endswith(token):
            created_by = created_by[: -len(token)].rstrip()
            break

    logger.trace("Preserving creation info: %s by %s", created_at, created_by)
    return CreationInfo(created_at=created_at, created_by=created_by)
