# topmark:header:start
#
#   project      : header42
#   file         : file.py
#   file_relpath : src/header42/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write documents on disk.

Files are decoded as UTF-8 with newline translation disabled, so ``\\r\\n`` and
``\\r`` line endings survive a read/write cycle unchanged. A leading UTF-8 BOM is
kept out of the document and written back in front of it.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from header42.config.logging import get_logger
from header42.core.document import Document

logger = get_logger(__name__)

BOM: str = "\ufeff"


@dataclass(frozen=True)
class LoadedFile:
    """A document read from disk.

    Attributes:
        path (Path): Source path.
        document (Document): Decoded content (BOM removed).
        has_bom (bool): Whether the file started with a UTF-8 BOM.
    """

    path: Path
    document: Document
    has_bom: bool = False


def read_document(path: Path) -> LoadedFile:
    """Read ``path`` as a UTF-8 document.

    Raises:
        UnicodeDecodeError: If the file is not valid UTF-8 (e.g. a binary file).
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8", newline="") as fh:
        text: str = fh.read()
    has_bom: bool = text.startswith(BOM)
    if has_bom:
        text = text[len(BOM) :]
    logger.trace("Read %d character(s) from %s", len(text), path)
    return LoadedFile(path=path, document=Document.from_text(text), has_bom=has_bom)


def write_document(loaded: LoadedFile, document: Document) -> None:
    """Atomically replace the file of ``loaded`` with ``document``.

    The content is written to a temporary file in the same directory which then
    replaces the original; file permissions are preserved.

    Raises:
        OSError: If the file cannot be written.
    """
    path: Path = loaded.path
    text: str = (BOM if loaded.has_bom else "") + document.text
    mode: int = path.stat().st_mode & 0o7777
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d character(s) to %s", len(text), path)
