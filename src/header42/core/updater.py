# topmark:header:start
#
#   project      : header42
#   file         : updater.py
#   file_relpath : src/header42/core/updater.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Insert or refresh the header of a document.

This module ties the pure building blocks together:

1. resolve the comment delimiters for the document language,
2. locate an existing header,
3. read back its creation info,
4. derive the header fields and render the block,
5. replace the existing header or insert the block at the start of the document.

No I/O happens here: the caller provides a [`Document`][header42.core.document.Document]
and receives a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.constants import DEFAULT_SCAN_LIMIT
from header42.core.delimiters import resolve
from header42.core.fields import derive_fields
from header42.core.locator import extract_creation_info, locate
from header42.core.renderer import render

if TYPE_CHECKING:
    from collections.abc import Collection

    from header42.config.logging import Header42Logger
    from header42.core.delimiters import DelimiterPair
    from header42.core.document import Document
    from header42.core.fields import FieldSources
    from header42.core.locator import CreationInfo, HeaderSpan
    from header42.core.renderer import HeaderFields

logger: Header42Logger = get_logger(__name__)


class UpdateMode(Enum):
    """How to treat documents without a header.

    Attributes:
        INSERT_OR_REPLACE: Insert a header when none exists, refresh it otherwise.
        REFRESH_ONLY: Refresh existing headers; leave other documents untouched.
    """

    INSERT_OR_REPLACE = "insert_or_replace"
    REFRESH_ONLY = "refresh_only"


class UpdateOutcome(Enum):
    """Result of a header update.

    Attributes:
        INSERTED: A new header was inserted at the start of the document.
        REPLACED: The existing header was replaced by a different one.
        UNCHANGED: The existing header was already up to date.
        SKIPPED: The document was left untouched (excluded language, or no header
            to refresh in ``REFRESH_ONLY`` mode).
    """

    INSERTED = "inserted"
    REPLACED = "replaced"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of [`update_header`][header42.core.updater.update_header].

    Attributes:
        outcome (UpdateOutcome): What happened to the document.
        original (Document): Input document.
        updated (Document): Resulting document (``original`` when nothing changed).
        span (HeaderSpan | None): Span of the existing header, if any.
        delimiters (DelimiterPair | None): Delimiters used for rendering.
        fields (HeaderFields | None): Rendered field values (``None`` when skipped).
        header (str): Rendered header text (empty when skipped).
        reason (str): Human-readable explanation for skipped documents.
    """

    outcome: UpdateOutcome
    original: Document
    updated: Document
    span: HeaderSpan | None = None
    delimiters: DelimiterPair | None = None
    fields: HeaderFields | None = None
    header: str = ""
    reason: str = ""

    @property
    def changed(self) -> bool:
        """Whether the updated document differs from the original."""
        return self.outcome in (UpdateOutcome.INSERTED, UpdateOutcome.REPLACED)


def update_header(
    document: Document,
    *,
    language_id: str,
    file_name: str,
    sources: FieldSources,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    excluded: Collection[str] = (),
    mode: UpdateMode = UpdateMode.INSERT_OR_REPLACE,
) -> UpdateResult:
    """Insert or refresh the header of ``document``.

    Args:
        document (Document): Document to update.
        language_id (str): Language identifier of the document.
        file_name (str): Base name written on the ``File:`` line.
        sources (FieldSources): Configuration, environment and clock.
        scan_limit (int): Number of leading lines searched for an existing header.
        excluded (Collection[str]): Language identifiers that never get a header.
        mode (UpdateMode): Whether documents without a header get one.

    Returns:
        UpdateResult: The outcome and the resulting document.
    """
    delims: DelimiterPair | None = resolve(language_id, excluded)
    if delims is None:
        return UpdateResult(
            outcome=UpdateOutcome.SKIPPED,
            original=document,
            updated=document,
            reason=f"language '{language_id}' is excluded",
        )

    span: HeaderSpan | None = locate(document.stripped_lines(), scan_limit)
    if span is None and mode is UpdateMode.REFRESH_ONLY:
        return UpdateResult(
            outcome=UpdateOutcome.SKIPPED,
            original=document,
            updated=document,
            delimiters=delims,
            reason="no header to refresh",
        )

    creation: CreationInfo | None = None
    if span is not None:
        creation = extract_creation_info(document.span_text(span), delims)

    fields: HeaderFields = derive_fields(file_name, sources, creation)
    header: str = render(fields, delims, newline=document.newline)

    if span is None:
        logger.info("Inserting header into %s", file_name)
        return UpdateResult(
            outcome=UpdateOutcome.INSERTED,
            original=document,
            updated=document.insert_at_start(header),
            delimiters=delims,
            fields=fields,
            header=header,
        )

    updated: Document = document.replace_span(span, header)
    outcome = UpdateOutcome.UNCHANGED if updated == document else UpdateOutcome.REPLACED
    logger.info("Header of %s: %s", file_name, outcome.value)
    return UpdateResult(
        outcome=outcome,
        original=document,
        updated=document if outcome is UpdateOutcome.UNCHANGED else updated,
        span=span,
        delimiters=delims,
        fields=fields,
        header=header,
    )
