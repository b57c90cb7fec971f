# topmark:header:start
#
#   project      : header42
#   file         : check.py
#   file_relpath : src/header42/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``check`` command.

Reports recognized files that do not carry a header yet. Files are never
modified. Exits with ``WOULD_CHANGE`` (2) when at least one file lacks a header,
so the command can gate CI pipelines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import build_settings, collect_files, get_console, open_file
from header42.cli.exit_codes import ExitCode
from header42.cli.options import file_selection_options, settings_options
from header42.config.logging import get_logger
from header42.core.locator import locate

if TYPE_CHECKING:
    from pathlib import Path

    from header42.cli.cmd_common import FileReport
    from header42.cli.console import ClickConsole
    from header42.config import Settings
    from header42.config.logging import Header42Logger
    from header42.core.locator import HeaderSpan
    from header42.utils.file import LoadedFile

logger: Header42Logger = get_logger(__name__)


@click.command(
    name="check",
    help="Report files in PATHS that have no 42 header.",
)
@file_selection_options
@settings_options
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    language_override: str | None,
    config_path: str | None,
    username: str | None,
    email: str | None,
    scan_limit: int | None,
) -> None:
    """Check that headers are present."""
    console: ClickConsole = get_console(ctx)
    settings: Settings = build_settings(
        config_path=config_path,
        username=username,
        email=email,
        scan_limit=scan_limit,
        exclude_patterns=exclude_patterns,
    )
    files: list[Path] = collect_files(paths, settings)
    logger.info("Checking %d file(s)", len(files))

    missing: int = 0
    failure: ExitCode | None = None
    for path in files:
        loaded: LoadedFile | None
        report: FileReport
        loaded, report = open_file(path, settings=settings, language_override=language_override)
        if report.error is not None:
            console.error(f"{path}: {report.message}")
            failure = failure or report.error
            continue
        if loaded is None:
            console.detail(f"{path}: skipped ({report.message})")
            continue

        span: HeaderSpan | None = locate(loaded.document.stripped_lines(), settings.scan_limit)
        if span is None:
            missing += 1
            console.info(f"{path}: {console.styled('missing header', fg='yellow')}")
        else:
            console.detail(f"{path}: header found (lines {span.start_line + 1}-{span.end_line})")

    console.info(f"{missing} of {len(files)} file(s) missing a header.")
    if failure is not None:
        ctx.exit(failure)
    ctx.exit(ExitCode.WOULD_CHANGE if missing else ExitCode.SUCCESS)
