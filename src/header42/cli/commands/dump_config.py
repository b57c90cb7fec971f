# topmark:header:start
#
#   project      : header42
#   file         : dump_config.py
#   file_relpath : src/header42/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``dump-config`` command.

Prints the effective settings (configuration file merged with command-line
overrides) as ``header42.toml`` content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import build_settings, get_console
from header42.cli.options import settings_options
from header42.config import render_settings_toml

if TYPE_CHECKING:
    from header42.cli.console import ClickConsole
    from header42.config import Settings


@click.command(
    name="dump-config",
    help="Print the effective settings as TOML.",
)
@settings_options
@click.pass_context
def dump_config_command(
    ctx: click.Context,
    config_path: str | None,
    username: str | None,
    email: str | None,
    scan_limit: int | None,
) -> None:
    """Dump the effective configuration."""
    console: ClickConsole = get_console(ctx)
    settings: Settings = build_settings(
        config_path=config_path,
        username=username,
        email=email,
        scan_limit=scan_limit,
    )
    source: str = str(settings.source) if settings.source else "built-in defaults"
    console.print(f"# Source: {source}")
    console.print(render_settings_toml(settings), nl=False)
