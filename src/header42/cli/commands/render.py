# topmark:header:start
#
#   project      : header42
#   file         : render.py
#   file_relpath : src/header42/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``render`` command: print a fresh header to stdout."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import build_settings, get_console, parse_now_option
from header42.cli.exit_codes import ExitCode
from header42.cli.options import identity_options
from header42.core.delimiters import DEFAULT_DELIMITERS, resolve
from header42.core.fields import derive_fields
from header42.core.renderer import render
from header42.filetypes import detect_language

if TYPE_CHECKING:
    from datetime import datetime

    from header42.cli.console import ClickConsole
    from header42.config import Settings
    from header42.core.delimiters import DelimiterPair


@click.command(
    name="render",
    help="Print a new 42 header for FILE_NAME.",
)
@click.argument("file_name")
@click.option(
    "--language",
    "language_override",
    default=None,
    help="Language identifier (default: detected from FILE_NAME).",
)
@click.option(
    "--now",
    "now",
    callback=parse_now_option,
    default=None,
    help="Timestamp to write, as 'YYYY/MM/DD HH:MM:SS' (default: current local time).",
)
@identity_options
@click.pass_context
def render_command(
    ctx: click.Context,
    file_name: str,
    language_override: str | None,
    now: datetime | None,
    config_path: str | None,
    username: str | None,
    email: str | None,
) -> None:
    """Render a header without touching any file."""
    console: ClickConsole = get_console(ctx)
    settings: Settings = build_settings(
        config_path=config_path,
        username=username,
        email=email,
    )
    language: str | None = language_override or detect_language(Path(file_name))
    delims: DelimiterPair | None = (
        resolve(language, settings.exclude_languages) if language else DEFAULT_DELIMITERS
    )
    if delims is None:
        console.warn(f"Language '{language}' is excluded by configuration.")
        ctx.exit(ExitCode.SUCCESS)

    fields = derive_fields(Path(file_name).name, settings.field_sources(now=now))
    console.print(render(fields, delims), nl=False)
