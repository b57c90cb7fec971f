# topmark:header:start
#
#   project      : header42
#   file         : cstyle.py
#   file_relpath : src/header42/filetypes/builtins/cstyle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Languages framed with ``/* ... */`` block comments.

Exports:
    FILETYPES (list[FileType]): C, C++, CSS, Go, Java, JavaScript, Kotlin, PHP,
        Rust, SCSS, Swift and TypeScript.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="c",
        extensions=[".c", ".h"],
        filenames=[],
        patterns=[],
        description="C sources and headers (*.c, *.h)",
    ),
    FileType(
        name="cpp",
        extensions=[".cc", ".cxx", ".cpp", ".hh", ".hpp", ".hxx", ".tpp", ".ipp"],
        filenames=[],
        patterns=[],
        description="C++ sources and headers (*.cpp, *.hpp, *.tpp, ...)",
    ),
    FileType(
        name="css",
        extensions=[".css"],
        filenames=[],
        patterns=[],
        description="Cascading style sheets (*.css)",
    ),
    FileType(
        name="go",
        extensions=[".go"],
        filenames=[],
        patterns=[],
        description="Go sources (*.go)",
    ),
    FileType(
        name="java",
        extensions=[".java"],
        filenames=[],
        patterns=[],
        description="Java sources (*.java)",
    ),
    FileType(
        name="javascript",
        extensions=[".js", ".mjs", ".cjs", ".jsx"],
        filenames=[],
        patterns=[],
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    FileType(
        name="kotlin",
        extensions=[".kt", ".kts"],
        filenames=[],
        patterns=[],
        description="Kotlin sources and scripts (*.kt, *.kts)",
    ),
    FileType(
        name="php",
        extensions=[".php"],
        filenames=[],
        patterns=[],
        description="PHP sources (*.php)",
    ),
    FileType(
        name="rust",
        extensions=[".rs"],
        filenames=[],
        patterns=[],
        description="Rust sources (*.rs)",
    ),
    FileType(
        name="scss",
        extensions=[".scss"],
        filenames=[],
        patterns=[],
        description="Sass style sheets (*.scss)",
    ),
    FileType(
        name="swift",
        extensions=[".swift"],
        filenames=[],
        patterns=[],
        description="Swift sources (*.swift)",
    ),
    FileType(
        name="typescript",
        extensions=[".ts", ".tsx", ".mts", ".cts"],
        filenames=[],
        patterns=[],
        description="TypeScript sources (*.ts, *.tsx, *.mts, *.cts)",
    ),
]
