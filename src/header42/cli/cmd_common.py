# topmark:header:start
#
#   project      : header42
#   file         : cmd_common.py
#   file_relpath : src/header42/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the file-processing commands.

Commands follow the same sequence: build effective settings, resolve the input
files, then run [`process_file`][header42.cli.cmd_common.process_file] for each
file and turn the per-file reports into console output and an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from header42.cli.errors import (
    Header42ConfigError,
    Header42FileNotFoundError,
    Header42UsageError,
)
from header42.cli.exit_codes import ExitCode
from header42.config import ConfigFileError, Settings, load_settings
from header42.config.logging import get_logger
from header42.core.delimiters import resolve
from header42.core.fields import parse_timestamp
from header42.core.updater import UpdateMode, update_header
from header42.file_resolver import resolve_file_list
from header42.filetypes import detect_language
from header42.utils.file import read_document, write_document

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from header42.cli.console import ClickConsole
    from header42.config.logging import Header42Logger
    from header42.core.fields import FieldSources
    from header42.core.updater import UpdateResult
    from header42.utils.file import LoadedFile

logger: Header42Logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context."""
    return ctx.find_root().obj["console"]


def parse_now_option(
    _ctx: click.Context,
    _param: click.Parameter,
    value: str | None,
) -> datetime | None:
    """Click callback converting ``--now`` into a datetime."""
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise click.BadParameter(f"expected 'YYYY/MM/DD HH:MM:SS', got {value!r}") from e


def build_settings(
    *,
    config_path: str | None,
    username: str | None,
    email: str | None,
    scan_limit: int | None = None,
    exclude_patterns: Sequence[str] = (),
) -> Settings:
    """Load configuration and apply command-line overrides.

    Raises:
        Header42ConfigError: If the configuration file cannot be loaded.
    """
    try:
        settings: Settings = load_settings(Path(config_path) if config_path else None)
    except ConfigFileError as e:
        raise Header42ConfigError(str(e)) from e
    logger.debug("Settings loaded from %s", settings.source or "built-in defaults")
    return settings.with_overrides(
        username=username,
        email=email,
        scan_limit=scan_limit,
        exclude=tuple(exclude_patterns),
    )


def collect_files(paths: Sequence[str], settings: Settings) -> list[Path]:
    """Resolve positional paths into files.

    Raises:
        Header42UsageError: If no paths were given.
        Header42FileNotFoundError: If a literal path does not exist.
    """
    if not paths:
        raise Header42UsageError("No paths given. Pass files, directories or glob patterns.")
    for raw in paths:
        if not any(ch in raw for ch in "*?[") and not Path(raw).exists():
            raise Header42FileNotFoundError(f"No such file or directory: {raw}")
    return resolve_file_list(paths, exclude_patterns=settings.exclude)


@dataclass
class FileReport:
    """Result of processing one file.

    Attributes:
        path (Path): The processed file.
        language (str | None): Language identifier used (``None``: unrecognized).
        result (UpdateResult | None): Updater result, when the file was processed.
        error (ExitCode | None): Failure category, when processing failed.
        message (str): Explanation for skipped or failed files.
        written (bool): Whether the updated content was written back.
    """

    path: Path
    language: str | None = None
    result: UpdateResult | None = None
    error: ExitCode | None = None
    message: str = ""
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.result is not None and self.result.changed


def load_file(path: Path) -> tuple[LoadedFile | None, FileReport | None]:
    """Read ``path``; on failure return a report describing the error."""
    try:
        return read_document(path), None
    except UnicodeDecodeError:
        return None, FileReport(
            path=path, error=ExitCode.ENCODING_ERROR, message="not a UTF-8 text file"
        )
    except OSError as e:
        return None, FileReport(path=path, error=ExitCode.IO_ERROR, message=str(e))


def open_file(
    path: Path,
    *,
    settings: Settings,
    language_override: str | None = None,
) -> tuple[LoadedFile | None, FileReport]:
    """Detect the language of ``path`` and read it.

    Unsupported files and files of an excluded language are not read.

    Returns:
        tuple[LoadedFile | None, FileReport]: The loaded file (``None`` when the
            file was skipped or could not be read) and its report.
    """
    language: str | None = language_override or detect_language(path)
    if language is None:
        logger.debug("Skipping %s: unsupported file type", path)
        return None, FileReport(path=path, message="unsupported file type")
    if resolve(language, settings.exclude_languages) is None:
        logger.debug("Skipping %s: language '%s' is excluded", path, language)
        return None, FileReport(
            path=path, language=language, message=f"language '{language}' is excluded"
        )

    loaded, failure = load_file(path)
    if loaded is None:
        assert failure is not None
        failure.language = language
        return None, failure
    return loaded, FileReport(path=path, language=language)


def process_file(
    path: Path,
    *,
    settings: Settings,
    sources: FieldSources,
    language_override: str | None = None,
    mode: UpdateMode = UpdateMode.INSERT_OR_REPLACE,
    write: bool = False,
) -> FileReport:
    """Insert or refresh the header of one file.

    Args:
        path (Path): File to process.
        settings (Settings): Effective settings.
        sources (FieldSources): Field derivation inputs (user, mail, clock).
        language_override (str | None): Language identifier forced by the user.
        mode (UpdateMode): Whether files without a header get one.
        write (bool): Write the updated content back to disk.

    Returns:
        FileReport: What happened to the file.
    """
    loaded: LoadedFile | None
    report: FileReport
    loaded, report = open_file(path, settings=settings, language_override=language_override)
    if loaded is None:
        return report

    assert report.language is not None
    result: UpdateResult = update_header(
        loaded.document,
        language_id=report.language,
        file_name=path.name,
        sources=sources,
        scan_limit=settings.scan_limit,
        excluded=settings.exclude_languages,
        mode=mode,
    )
    report.result = result
    report.message = result.reason

    if write and result.changed:
        try:
            write_document(loaded, result.updated)
        except OSError as e:
            report.error = ExitCode.IO_ERROR
            report.message = str(e)
            return report
        report.written = True
        logger.info("Wrote %s (%s)", path, result.outcome.value)
    return report


def exit_code_for(reports: Sequence[FileReport], *, dry_run: bool) -> ExitCode:
    """Return the exit code summarizing ``reports``.

    The first failure wins; otherwise ``WOULD_CHANGE`` when a dry run found
    files to change, else ``SUCCESS``.
    """
    for report in reports:
        if report.error is not None:
            return report.error
    if dry_run and any(report.changed for report in reports):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS
