# topmark:header:start
#
#   project      : header42
#   file         : version.py
#   file_relpath : src/header42/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``version`` command."""

from __future__ import annotations

import click

from header42.cli.cmd_common import get_console
from header42.constants import HEADER42_VERSION


@click.command(
    name="version",
    help="Show the current version of header42.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the installed version."""
    get_console(ctx).print(HEADER42_VERSION)
