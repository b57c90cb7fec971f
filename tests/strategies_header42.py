# topmark:header:start
#
#   project      : header42
#   file         : strategies_header42.py
#   file_relpath : tests/strategies_header42.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for header fields, delimiters and document bodies."""

from __future__ import annotations

from datetime import datetime

from hypothesis import strategies as st

from header42.core.delimiters import DelimiterPair, supported_languages
from header42.core.renderer import HeaderFields

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Printable single-line text: no line breaks and no surrogates.
s_field_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs", "Cc", "Zl", "Zp"),
    ),
    max_size=120,
)

# Author names survive the round-trip when they are trimmed, contain no " by "
# and do not end with a closing comment token.
s_author: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(categories=("Ll", "Lu", "Nd"), max_codepoint=0x24F),
    min_size=1,
    max_size=20,
)

s_timestamp: st.SearchStrategy[str] = st.datetimes(
    min_value=datetime(1970, 1, 1), max_value=datetime(2099, 12, 31)
).map(lambda d: d.strftime("%Y/%m/%d %H:%M:%S"))

s_language_delimiters: st.SearchStrategy[DelimiterPair] = st.sampled_from(
    sorted(set(supported_languages().values()), key=lambda p: (p.start, p.end))
)

s_any_delimiters: st.SearchStrategy[DelimiterPair] = st.builds(
    DelimiterPair,
    st.text(alphabet="/*#-<!>", max_size=4),
    st.text(alphabet="/*#-<!>", max_size=4),
)


@st.composite
def s_header_fields(draw: st.DrawFn) -> HeaderFields:
    """Header fields with arbitrary single-line text."""
    return HeaderFields(
        file_name=draw(s_field_text),
        user=draw(s_field_text),
        mail=draw(s_field_text),
        updated_at=draw(s_field_text),
        created_at=draw(s_field_text),
        created_by=draw(s_field_text),
    )


@st.composite
def s_document_body(draw: st.DrawFn) -> str:
    """Source text without a header: a few lines joined by one line ending."""
    newline: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[str] = draw(
        st.lists(
            st.text(
                alphabet=st.characters(exclude_categories=("Cs", "Cc", "Zl", "Zp")),
                max_size=40,
            ).filter(lambda s: "Updated:" not in s),
            max_size=8,
        )
    )
    text: str = newline.join(lines)
    if lines and draw(st.booleans()):
        text += newline
    return text
