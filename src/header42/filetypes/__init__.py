# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type recognition: maps paths to header42 language identifiers."""

from __future__ import annotations

from header42.filetypes.base import FileType
from header42.filetypes.instances import detect_language, get_file_type_registry

__all__ = ["FileType", "detect_language", "get_file_type_registry"]
