# topmark:header:start
#
#   project      : header42
#   file         : errors.py
#   file_relpath : src/header42/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the header42 CLI.

Raise these in commands to abort with a standardized message and exit code.
Errors are printed through the project console when one is present in the Click
context, and with Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from header42.cli.exit_codes import ExitCode


class Header42Error(click.ClickException):
    """Base class for all header42 CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class Header42UsageError(Header42Error):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class Header42ConfigError(Header42Error):
    """Error for configuration errors (unreadable or malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class Header42FileNotFoundError(Header42Error):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
