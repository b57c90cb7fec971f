# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure header logic: delimiters, locating, field derivation and rendering.

Nothing in this package performs I/O. Callers pass text in and get text back.
"""

from __future__ import annotations

from header42.core.delimiters import DelimiterPair, resolve, supported_languages
from header42.core.document import Document
from header42.core.fields import FieldSources, derive_fields, format_timestamp, parse_timestamp
from header42.core.locator import CreationInfo, HeaderSpan, extract_creation_info, locate
from header42.core.renderer import HeaderFields, render
from header42.core.updater import UpdateMode, UpdateOutcome, UpdateResult, update_header

__all__ = [
    "CreationInfo",
    "DelimiterPair",
    "Document",
    "FieldSources",
    "HeaderFields",
    "HeaderSpan",
    "UpdateMode",
    "UpdateOutcome",
    "UpdateResult",
    "derive_fields",
    "extract_creation_info",
    "format_timestamp",
    "locate",
    "parse_timestamp",
    "render",
    "resolve",
    "supported_languages",
    "update_header",
]
