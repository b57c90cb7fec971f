# topmark:header:start
#
#   project      : header42
#   file         : instances.py
#   file_relpath : src/header42/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type registry and path-to-language detection.

The registry is constructed lazily on first access and cached thereafter. The
returned mapping is a plain ``dict`` but should be treated as immutable by
callers.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import import_module
from typing import TYPE_CHECKING, Any, Final, cast

from header42.config.logging import get_logger

from .base import FileType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "header42.filetypes.builtins.cstyle",
    "header42.filetypes.builtins.scripting",
    "header42.filetypes.builtins.data",
)


def _iter_builtin_filetypes() -> Iterable[FileType]:
    """Yield built-in FileType objects from the grouped modules."""
    for modname in _BUILTIN_MODULES:
        filetypes: Any = getattr(import_module(modname), "FILETYPES", None)
        if not isinstance(filetypes, list):
            logger.warning("Module %s has no FILETYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", filetypes):
            if isinstance(obj, FileType):
                yield obj
            else:
                logger.warning("Non-FileType entry in %s.FILETYPES: %r", modname, obj)


def _generate_registry(filetypes: Iterable[FileType]) -> dict[str, FileType]:
    """Generate a registry mapping file type names to their definitions."""
    registry: dict[str, FileType] = {}
    for ft in filetypes:
        if ft.name in registry:
            raise ValueError(f"Duplicate FileType name: {ft.name}")
        registry[ft.name] = ft
    return registry


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return (and cache) the FileType registry."""
    registry: dict[str, FileType] = _generate_registry(_iter_builtin_filetypes())
    logger.debug("Loaded %d file types", len(registry))
    return registry


def detect_language(path: Path) -> str | None:
    """Return the language identifier for ``path``.

    Args:
        path (Path): File path (only the name is inspected).

    Returns:
        str | None: Name of the first matching file type, or ``None`` when the
            path is not recognized.
    """
    for ft in get_file_type_registry().values():
        if ft.matches(path):
            logger.trace("%s recognized as %s", path, ft.name)
            return ft.name
    logger.debug("No file type recognized for %s", path)
    return None
