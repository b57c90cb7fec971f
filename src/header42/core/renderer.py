# topmark:header:start
#
#   project      : header42
#   file         : renderer.py
#   file_relpath : src/header42/core/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the fixed-width header block.

Every rendered line is exactly ``HEADER_WIDTH`` (79) characters wide, not
counting the line terminator. The block always has 13 lines:

    border
    6 x ASCII-art line
    border
    File: <file name>
    By: <user> <<mail>>
    Created: <date> by <author>
    Updated: <date> by <user>
    border

Content lines are framed as ``start + " " + text + " " + end``; text longer than
the room left between the delimiters is truncated, shorter text is padded with
spaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.constants import ASCII_ART, HEADER_WIDTH

if TYPE_CHECKING:
    from header42.config.logging import Header42Logger
    from header42.core.delimiters import DelimiterPair

logger: Header42Logger = get_logger(__name__)


@dataclass(frozen=True)
class HeaderFields:
    """Values rendered into the information lines of a header.

    Attributes:
        file_name (str): Base name of the file.
        user (str): Current user (author of this update).
        mail (str): E-mail address of the current user.
        updated_at (str): Timestamp of this update (``YYYY/MM/DD HH:MM:SS``).
        created_at (str): Timestamp of the header creation.
        created_by (str): Author of the header creation.
    """

    file_name: str
    user: str
    mail: str
    updated_at: str
    created_at: str
    created_by: str


def border_line(delims: DelimiterPair) -> str:
    """Return a border line (without terminator) for the given delimiters."""
    fill: int = HEADER_WIDTH - len(delims.start) - len(delims.end)
    return delims.start + "*" * fill + delims.end


def content_line(text: str, delims: DelimiterPair) -> str:
    """Return a content line (without terminator) framed by the delimiters.

    Args:
        text (str): Text to place between the delimiters.
        delims (DelimiterPair): Comment delimiters.

    Returns:
        str: ``start + " " + text + " " + end`` with ``text`` truncated or padded
            so the line is exactly ``HEADER_WIDTH`` characters long.
    """
    left: str = delims.start + " "
    right: str = " " + delims.end
    available: int = HEADER_WIDTH - len(left) - len(right)
    if len(text) > available:
        logger.debug("Truncating header text to %d characters: %r", available, text)
        text = text[:available]
    return left + text.ljust(available) + right


def render_lines(fields: HeaderFields, delims: DelimiterPair) -> list[str]:
    """Return the 13 header lines, without line terminators."""
    border: str = border_line(delims)

    lines: list[str] = [border]
    lines.extend(content_line(art, delims) for art in ASCII_ART)
    lines.append(border)
    lines.append(content_line(f"File: {fields.file_name}", delims))
    lines.append(content_line(f"By: {fields.user} <{fields.mail}>", delims))
    lines.append(content_line(f"Created: {fields.created_at} by {fields.created_by}", delims))
    lines.append(content_line(f"Updated: {fields.updated_at} by {fields.user}", delims))
    lines.append(border)
    return lines


def render(fields: HeaderFields, delims: DelimiterPair, newline: str = "\n") -> str:
    """Render the header block as a single string.

    Args:
        fields (HeaderFields): Values for the information lines.
        delims (DelimiterPair): Comment delimiters of the target language.
        newline (str): Terminator appended to every line.

    Returns:
        str: The 13 header lines, each terminated by ``newline``.
    """
    lines: list[str] = render_lines(fields, delims)
    logger.trace("Rendered %d header lines for %s", len(lines), fields.file_name)
    return "".join(line + newline for line in lines)
