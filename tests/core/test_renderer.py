# topmark:header:start
#
#   project      : header42
#   file         : test_renderer.py
#   file_relpath : tests/core/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header renderer: fixed layout, width and truncation."""

from __future__ import annotations

import pytest

from header42.constants import ASCII_ART, HEADER_WIDTH
from header42.core.delimiters import C_STYLE, DOUBLE_DASH, HASH, MARKUP, DelimiterPair
from header42.core.renderer import HeaderFields, border_line, content_line, render, render_lines

pytestmark = pytest.mark.core

FIELDS = HeaderFields(
    file_name="main.c",
    user="abay",
    mail="abay@student.42.fr",
    updated_at="2024/01/02 00:00:00",
    created_at="2024/01/01 00:00:00",
    created_by="abay",
)


def test_border_line_c_style() -> None:
    assert border_line(C_STYLE) == "/*" + "*" * 75 + "*/"


def test_border_line_markup_is_all_stars() -> None:
    assert border_line(MARKUP) == "*" * HEADER_WIDTH


def test_content_line_pads_text() -> None:
    line: str = content_line("File: main.c", C_STYLE)
    assert line.startswith("/* File: main.c ")
    assert line.endswith(" */")
    assert len(line) == HEADER_WIDTH


def test_content_line_truncates_overlong_text() -> None:
    line: str = content_line("x" * 200, HASH)
    assert line == "# " + "x" * 75 + " #"


def test_content_line_with_empty_delimiters_keeps_spacing() -> None:
    line: str = content_line("File: a.md", MARKUP)
    assert line.startswith(" File: a.md")
    assert line.endswith(" ")
    assert len(line) == HEADER_WIDTH


@pytest.mark.parametrize("delims", [C_STYLE, HASH, DOUBLE_DASH, MARKUP])
def test_render_produces_thirteen_lines_of_fixed_width(delims: DelimiterPair) -> None:
    text: str = render(FIELDS, delims)
    lines: list[str] = text.split("\n")
    assert lines[-1] == ""
    assert len(lines[:-1]) == 13
    assert all(len(line) == HEADER_WIDTH for line in lines[:-1])


def test_render_layout_order() -> None:
    lines: list[str] = render_lines(FIELDS, C_STYLE)
    border: str = border_line(C_STYLE)
    assert lines[0] == lines[7] == lines[12] == border
    for art, line in zip(ASCII_ART, lines[1:7]):
        assert line.startswith("/* " + art)
    assert lines[8].startswith("/* File: main.c ")
    assert lines[9].startswith("/* By: abay <abay@student.42.fr> ")
    assert lines[10].startswith("/* Created: 2024/01/01 00:00:00 by abay ")
    assert lines[11].startswith("/* Updated: 2024/01/02 00:00:00 by abay ")


def test_render_uses_requested_newline() -> None:
    text: str = render(FIELDS, HASH, newline="\r\n")
    assert text.count("\r\n") == 13
    assert text.endswith("#\r\n")


def test_render_truncates_long_file_name() -> None:
    long_name: str = "a" * 120 + ".c"
    line: str = render_lines(
        HeaderFields(
            file_name=long_name,
            user="abay",
            mail="abay@student.42.fr",
            updated_at="2024/01/02 00:00:00",
            created_at="2024/01/01 00:00:00",
            created_by="abay",
        ),
        C_STYLE,
    )[8]
    assert len(line) == HEADER_WIDTH
    assert line == "/* " + ("File: " + long_name)[:73] + " */"
