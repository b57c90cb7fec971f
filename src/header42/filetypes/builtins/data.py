# topmark:header:start
#
#   project      : header42
#   file         : data.py
#   file_relpath : src/header42/filetypes/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup, documentation and data formats.

Exports:
    FILETYPES (list[FileType]): HTML, Markdown, SQL, XML and YAML.

Notes:
    HTML, Markdown and XML headers are written without comment tokens.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="html",
        extensions=[".html", ".htm"],
        filenames=[],
        patterns=[],
        description="HTML documents (*.html, *.htm)",
    ),
    FileType(
        name="markdown",
        extensions=[".md", ".markdown"],
        filenames=[],
        patterns=[],
        description="Markdown documents (*.md, *.markdown)",
    ),
    FileType(
        name="sql",
        extensions=[".sql"],
        filenames=[],
        patterns=[],
        description="SQL scripts (*.sql)",
    ),
    FileType(
        name="xml",
        extensions=[".xml", ".xsd", ".xsl", ".svg"],
        filenames=[],
        patterns=[],
        description="XML documents (*.xml, *.xsd, *.xsl, *.svg)",
    ),
    FileType(
        name="yaml",
        extensions=[".yaml", ".yml"],
        filenames=[],
        patterns=[],
        description="YAML documents (*.yaml, *.yml)",
    ),
]
