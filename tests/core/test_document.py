# topmark:header:start
#
#   project      : header42
#   file         : test_document.py
#   file_relpath : tests/core/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document model: line splitting, newline detection, offsets and edits."""

from __future__ import annotations

import pytest

from header42.core.document import Document, detect_newline, split_lines, strip_newline
from header42.core.locator import HeaderSpan

pytestmark = pytest.mark.core


def test_split_lines_keeps_mixed_terminators() -> None:
    assert split_lines("a\nb\r\nc\rd") == ["a\n", "b\r\n", "c\r", "d"]


def test_split_lines_empty_text() -> None:
    assert split_lines("") == []


def test_split_lines_does_not_split_on_unicode_separators() -> None:
    assert split_lines("a\u2028b\n") == ["a\u2028b\n"]


@pytest.mark.parametrize(
    "text, expected",
    [("a\r\nb\n", "\r\n"), ("a\nb\r\n", "\n"), ("a\rb", "\r"), ("no newline", "\n")],
)
def test_detect_newline_uses_first_terminator(text: str, expected: str) -> None:
    assert detect_newline(split_lines(text)) == expected


def test_strip_newline() -> None:
    assert strip_newline("x\r\n") == "x"
    assert strip_newline("x\r") == "x"
    assert strip_newline("x") == "x"


def test_text_round_trip_is_lossless() -> None:
    text = "one\r\ntwo\n\nthree"
    assert Document.from_text(text).text == text


def test_from_lines_adds_missing_terminators_except_last() -> None:
    doc = Document.from_lines(["int main() {}", "x"])
    assert doc.lines == ("int main() {}\n", "x")
    assert doc.line_count == 2


def test_line_offsets_and_clamping() -> None:
    doc = Document.from_text("ab\ncd\r\nef")
    assert doc.line_offsets() == [0, 3, 7]
    assert doc.offset_of(0) == 0
    assert doc.offset_of(2) == 7
    assert doc.offset_of(10) == 9


def test_replace_span_replaces_whole_lines() -> None:
    doc = Document.from_text("h1\nh2\nbody\n")
    updated: Document = doc.replace_span(HeaderSpan(0, 2), "H\n")
    assert updated.text == "H\nbody\n"
    assert doc.text == "h1\nh2\nbody\n"


def test_replace_span_past_end_replaces_to_end() -> None:
    doc = Document.from_text("h1\nh2")
    assert doc.replace_span(HeaderSpan(0, 5), "H\n").text == "H\n"


def test_insert_at_start() -> None:
    doc = Document.from_text("body")
    assert doc.insert_at_start("H\n").lines == ("H\n", "body")
