# topmark:header:start
#
#   project      : header42
#   file         : base.py
#   file_relpath : src/header42/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type definition used to map paths to language identifiers.

A [`FileType`][header42.filetypes.base.FileType] is named after the language
identifier understood by [`header42.core.delimiters.resolve`][]. Recognition is
name-based only: file extension first, then exact file name, then regex
patterns against the base name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from header42.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)


@dataclass
class FileType:
    r"""A file type recognized by header42.

    Attributes:
        name (str): Language identifier (e.g. ``"python"``, ``"shellscript"``).
        extensions (list[str]): Filename extensions, leading dot included (``.py``).
        filenames (list[str]): Exact base names (e.g. ``"Makefile"``). Values
            containing a path separator (``/`` or ``\\``) match the tail of the path.
        patterns (list[str]): Regular expressions matched against the base name
            with `re.fullmatch`.
        description (str): Human-readable description.
    """

    name: str
    extensions: list[str]
    filenames: list[str]
    patterns: list[str]
    description: str

    _compiled_patterns: list[re.Pattern[str]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def matches(self, path: Path) -> bool:
        """Return whether ``path`` belongs to this file type.

        Args:
            path (Path): The path to the file to check.

        Returns:
            bool: True if an extension, file name or pattern matches.
        """
        if self.extensions and path.suffix in self.extensions:
            return True

        basename: str = path.name
        posix: str = path.as_posix()
        for fname in self.filenames:
            if "/" in fname or "\\" in fname:
                if posix.endswith(fname):
                    return True
            elif basename == fname:
                return True

        if self.patterns:
            if self._compiled_patterns is None:
                try:
                    self._compiled_patterns = [re.compile(p) for p in self.patterns]
                except re.error as e:
                    logger.error("Invalid pattern in file type '%s': %s", self.name, e)
                    self._compiled_patterns = []
            return any(regex.fullmatch(basename) for regex in self._compiled_patterns)

        return False
