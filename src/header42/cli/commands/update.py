# topmark:header:start
#
#   project      : header42
#   file         : update.py
#   file_relpath : src/header42/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 ``update`` command.

Inserts the header into files that have none and refreshes the ``Updated:`` line
of files that already have one, preserving their ``Created:`` line.

The command is a dry run by default: it reports what would change and exits
with ``WOULD_CHANGE`` (2). Pass ``--write`` to apply the changes. With
``--refresh-only`` files without a header are left alone, which suits
pre-commit hooks that should only keep existing headers current.

Examples:
    header42 update src/                 # dry run
    header42 update --write src/ include/
    header42 update --write --refresh-only $(git diff --name-only --cached)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import (
    build_settings,
    collect_files,
    exit_code_for,
    get_console,
    parse_now_option,
    process_file,
)
from header42.cli.options import file_selection_options, settings_options
from header42.config.logging import get_logger
from header42.core.updater import UpdateMode, UpdateOutcome
from header42.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

    from header42.cli.cmd_common import FileReport
    from header42.cli.console import ClickConsole
    from header42.config import Settings
    from header42.config.logging import Header42Logger
    from header42.core.fields import FieldSources

logger: Header42Logger = get_logger(__name__)

_DONE: dict[UpdateOutcome, str] = {
    UpdateOutcome.INSERTED: "header inserted",
    UpdateOutcome.REPLACED: "header updated",
}
_PENDING: dict[UpdateOutcome, str] = {
    UpdateOutcome.INSERTED: "would insert header",
    UpdateOutcome.REPLACED: "would update header",
}


def _report(console: ClickConsole, report: FileReport, *, write: bool, show_diff: bool) -> None:
    """Print the outcome of one file."""
    if report.error is not None:
        console.error(f"{report.path}: {report.message}")
        return
    if report.result is None:
        console.detail(f"{report.path}: skipped ({report.message})")
        return

    outcome: UpdateOutcome = report.result.outcome
    if outcome is UpdateOutcome.SKIPPED:
        console.detail(f"{report.path}: skipped ({report.message})")
    elif outcome is UpdateOutcome.UNCHANGED:
        console.detail(f"{report.path}: up to date")
    else:
        label: str = _DONE[outcome] if write else _PENDING[outcome]
        console.info(f"{report.path}: {console.styled(label, fg='green' if write else 'yellow')}")

    if show_diff and report.changed:
        result = report.result
        diff: list[str] = unified_diff(result.original, result.updated, str(report.path))
        console.print(render_patch(diff) if console.enable_color else "".join(diff), nl=False)


@click.command(
    name="update",
    help="Insert or refresh the 42 header of PATHS (dry run unless --write).",
)
@file_selection_options
@settings_options
@click.option("--write", is_flag=True, help="Write changes back to the files.")
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of the changes.")
@click.option(
    "--refresh-only",
    is_flag=True,
    help="Only refresh existing headers; never insert a new one.",
)
@click.option(
    "--now",
    "now",
    callback=parse_now_option,
    default=None,
    help="Timestamp to write, as 'YYYY/MM/DD HH:MM:SS' (default: current local time).",
)
@click.pass_context
def update_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    language_override: str | None,
    config_path: str | None,
    username: str | None,
    email: str | None,
    scan_limit: int | None,
    write: bool,
    show_diff: bool,
    refresh_only: bool,
    now: datetime | None,
) -> None:
    """Insert or refresh headers."""
    console: ClickConsole = get_console(ctx)
    settings: Settings = build_settings(
        config_path=config_path,
        username=username,
        email=email,
        scan_limit=scan_limit,
        exclude_patterns=exclude_patterns,
    )
    files: list[Path] = collect_files(paths, settings)
    sources: FieldSources = settings.field_sources(now=now)
    mode = UpdateMode.REFRESH_ONLY if refresh_only else UpdateMode.INSERT_OR_REPLACE
    logger.info("Updating %d file(s) (mode=%s, write=%s)", len(files), mode.value, write)

    reports: list[FileReport] = []
    for path in files:
        report: FileReport = process_file(
            path,
            settings=settings,
            sources=sources,
            language_override=language_override,
            mode=mode,
            write=write,
        )
        _report(console, report, write=write, show_diff=show_diff)
        reports.append(report)

    changed: int = sum(1 for r in reports if r.changed)
    verb: str = "updated" if write else "would be updated"
    console.info(f"{changed} of {len(reports)} file(s) {verb}.")
    ctx.exit(exit_code_for(reports, dry_run=not write))
