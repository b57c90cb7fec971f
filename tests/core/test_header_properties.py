# topmark:header:start
#
#   project      : header42
#   file         : test_header_properties.py
#   file_relpath : tests/core/test_header_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for rendering, round-trip and update idempotence."""

from __future__ import annotations

from datetime import datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from header42.constants import HEADER_WIDTH
from header42.core.delimiters import DelimiterPair
from header42.core.document import Document
from header42.core.locator import CreationInfo, HeaderSpan, extract_creation_info, locate
from header42.core.renderer import HeaderFields, render
from header42.core.updater import UpdateOutcome, update_header
from tests.conftest import make_sources
from tests.strategies_header42 import (
    s_any_delimiters,
    s_author,
    s_document_body,
    s_header_fields,
    s_language_delimiters,
    s_timestamp,
)

pytestmark = pytest.mark.core


@settings(max_examples=200)
@given(fields=s_header_fields(), delims=s_any_delimiters)
def test_render_lines_are_always_header_width(
    fields: HeaderFields, delims: DelimiterPair
) -> None:
    lines: list[str] = render(fields, delims).split("\n")
    assert lines.pop() == ""
    assert len(lines) == 13
    assert all(len(line) == HEADER_WIDTH for line in lines)


@given(
    created_at=s_timestamp,
    created_by=s_author,
    user=s_author,
    delims=s_language_delimiters,
)
def test_render_locate_extract_round_trip(
    created_at: str, created_by: str, user: str, delims: DelimiterPair
) -> None:
    fields = HeaderFields(
        file_name="file.c",
        user=user,
        mail=f"{user}@student.42.fr",
        updated_at="2024/01/01 00:00:00",
        created_at=created_at,
        created_by=created_by,
    )
    text: str = render(fields, delims)
    span = locate(text.splitlines())
    assert span == HeaderSpan(0, 13)
    assert extract_creation_info(text, delims) == CreationInfo(created_at, created_by)


@given(
    body=s_document_body(),
    language_id=st.sampled_from(["c", "python", "lua", "html", "unknown"]),
)
def test_update_is_idempotent_for_same_timestamp(body: str, language_id: str) -> None:
    now = datetime(2024, 5, 4, 3, 2, 1)
    sources = make_sources(now=now)
    first = update_header(
        Document.from_text(body), language_id=language_id, file_name="f", sources=sources
    )
    assert first.outcome is UpdateOutcome.INSERTED
    second = update_header(first.updated, language_id=language_id, file_name="f", sources=sources)
    assert second.outcome is UpdateOutcome.UNCHANGED
    assert second.updated.text == first.updated.text
    assert first.updated.text.endswith(body)


@pytest.mark.hypothesis_slow
@settings(max_examples=1000, deadline=None)
@given(
    body=s_document_body(),
    language_id=st.sampled_from(["c", "python", "lua", "html", "unknown"]),
    later=st.datetimes(min_value=datetime(2024, 5, 5), max_value=datetime(2099, 1, 1)),
)
def test_refresh_keeps_body_and_line_count(body: str, language_id: str, later: datetime) -> None:
    created = update_header(
        Document.from_text(body),
        language_id=language_id,
        file_name="f",
        sources=make_sources(now=datetime(2024, 5, 4, 3, 2, 1)),
    ).updated
    refreshed = update_header(
        created, language_id=language_id, file_name="f", sources=make_sources(now=later)
    )
    assert refreshed.outcome is UpdateOutcome.REPLACED
    assert refreshed.updated.line_count == created.line_count
    assert refreshed.updated.text.endswith(body)
    assert refreshed.updated.stripped_lines()[10] == created.stripped_lines()[10]
