# topmark:header:start
#
#   project      : header42
#   file         : scripting.py
#   file_relpath : src/header42/filetypes/builtins/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scripting languages and build files using line comments.

Exports:
    FILETYPES (list[FileType]): Dockerfile, Haskell, Lua, Makefile, Perl,
        Python, R, Ruby and shell scripts.

Notes:
    - Makefiles and Dockerfiles are identified by file name.
    - Shell scripts use the ``shellscript`` identifier.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="dockerfile",
        extensions=[".dockerfile"],
        filenames=["Dockerfile", "Containerfile"],
        patterns=[r"Dockerfile\..+"],
        description="Docker build files (Dockerfile, *.dockerfile)",
    ),
    FileType(
        name="haskell",
        extensions=[".hs", ".lhs"],
        filenames=[],
        patterns=[],
        description="Haskell sources (*.hs, *.lhs)",
    ),
    FileType(
        name="lua",
        extensions=[".lua"],
        filenames=[],
        patterns=[],
        description="Lua scripts (*.lua)",
    ),
    FileType(
        name="makefile",
        extensions=[".mk", ".mak"],
        filenames=["Makefile", "makefile", "GNUmakefile"],
        patterns=[],
        description="Make build scripts (Makefile, *.mk)",
    ),
    FileType(
        name="perl",
        extensions=[".pl", ".pm"],
        filenames=[],
        patterns=[],
        description="Perl scripts/modules (*.pl, *.pm)",
    ),
    FileType(
        name="python",
        extensions=[".py", ".pyi"],
        filenames=[],
        patterns=[],
        description="Python sources and stubs (*.py, *.pyi)",
    ),
    FileType(
        name="r",
        extensions=[".R", ".r"],
        filenames=[],
        patterns=[],
        description="R scripts (*.R, *.r)",
    ),
    FileType(
        name="ruby",
        extensions=[".rb"],
        filenames=["Rakefile", "Gemfile"],
        patterns=[],
        description="Ruby sources (*.rb, Rakefile, Gemfile)",
    ),
    FileType(
        name="shellscript",
        extensions=[".sh", ".bash", ".zsh"],
        filenames=[],
        patterns=[],
        description="POSIX/Bash/Zsh shell scripts",
    ),
]
