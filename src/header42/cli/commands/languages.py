# topmark:header:start
#
#   project      : header42
#   file         : languages.py
#   file_relpath : src/header42/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``languages`` command: list language identifiers and delimiters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import get_console
from header42.core.delimiters import DEFAULT_DELIMITERS, supported_languages
from header42.filetypes import get_file_type_registry

if TYPE_CHECKING:
    from header42.cli.console import ClickConsole
    from header42.core.delimiters import DelimiterPair


def _format_pair(pair: DelimiterPair) -> str:
    if not pair.start and not pair.end:
        return "(none)"
    return f"{pair.start} {pair.end}"


@click.command(
    name="languages",
    help="List supported language identifiers with their comment delimiters.",
)
@click.pass_context
def languages_command(ctx: click.Context) -> None:
    """List the delimiter table."""
    console: ClickConsole = get_console(ctx)
    registry = get_file_type_registry()
    table: dict[str, DelimiterPair] = supported_languages()
    width: int = max(len(name) for name in table)

    for name in sorted(table):
        ft = registry.get(name)
        patterns: str = ", ".join([*ft.extensions, *ft.filenames]) if ft else ""
        line: str = f"{name:<{width}}  {_format_pair(table[name]):<7}  {patterns}"
        console.print(line.rstrip())

    console.detail("")
    console.detail(f"Other identifiers use: {_format_pair(DEFAULT_DELIMITERS)}")
