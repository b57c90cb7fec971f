# topmark:header:start
#
#   project      : header42
#   file         : delimiters.py
#   file_relpath : src/header42/core/delimiters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment delimiters per language identifier.

The header is framed by a pair of comment tokens that depends on the language of
the document. The mapping is an explicit lookup table keyed by language
identifier (``"c"``, ``"python"``, ...). Identifiers missing from the table get
C-style block delimiters, so resolution only yields ``None`` for languages the
caller explicitly excludes.

Layout examples (first columns of the top border):

    /*****...*/     C-style languages
    #*****...#      hash-comment languages
    --*****...--    double-dash languages
    *****...        markup languages (no comment tokens)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from header42.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Collection

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)


@dataclass(frozen=True)
class DelimiterPair:
    """Opening and closing comment tokens for a header line.

    Attributes:
        start (str): Token emitted at the start of every header line.
        end (str): Token emitted at the end of every header line. Empty for markup
            languages; identical to ``start`` for line-comment languages.
    """

    start: str
    end: str


C_STYLE: Final[DelimiterPair] = DelimiterPair("/*", "*/")
MARKUP: Final[DelimiterPair] = DelimiterPair("", "")
HASH: Final[DelimiterPair] = DelimiterPair("#", "#")
DOUBLE_DASH: Final[DelimiterPair] = DelimiterPair("--", "--")

DEFAULT_DELIMITERS: Final[DelimiterPair] = C_STYLE

_LANGUAGE_DELIMITERS: Final[dict[str, DelimiterPair]] = {
    # C-style block comments
    "c": C_STYLE,
    "cpp": C_STYLE,
    "java": C_STYLE,
    "javascript": C_STYLE,
    "typescript": C_STYLE,
    "php": C_STYLE,
    "css": C_STYLE,
    "scss": C_STYLE,
    "go": C_STYLE,
    "rust": C_STYLE,
    "swift": C_STYLE,
    "kotlin": C_STYLE,
    # Markup: the block is written without comment tokens
    "html": MARKUP,
    "xml": MARKUP,
    "markdown": MARKUP,
    # Hash line comments
    "makefile": HASH,
    "python": HASH,
    "shellscript": HASH,
    "yaml": HASH,
    "dockerfile": HASH,
    "ruby": HASH,
    "perl": HASH,
    "r": HASH,
    # Double-dash line comments
    "lua": DOUBLE_DASH,
    "sql": DOUBLE_DASH,
    "haskell": DOUBLE_DASH,
}


def resolve(language_id: str, excluded: Collection[str] = ()) -> DelimiterPair | None:
    """Return the comment delimiters for a language identifier.

    Args:
        language_id (str): Language identifier of the document (e.g. ``"c"``).
        excluded (Collection[str]): Language identifiers that must never receive a
            header. Supplied by configuration; empty by default.

    Returns:
        DelimiterPair | None: The delimiters for ``language_id``; the C-style pair
            for identifiers missing from the table; ``None`` only when
            ``language_id`` is excluded.
    """
    if language_id in excluded:
        logger.debug("Language '%s' is excluded from header processing", language_id)
        return None

    pair: DelimiterPair | None = _LANGUAGE_DELIMITERS.get(language_id)
    if pair is None:
        logger.debug(
            "Language '%s' not in delimiter table, using default %s",
            language_id,
            DEFAULT_DELIMITERS,
        )
        return DEFAULT_DELIMITERS
    return pair


def supported_languages() -> dict[str, DelimiterPair]:
    """Return a copy of the language-to-delimiter table."""
    return dict(_LANGUAGE_DELIMITERS)
