# topmark:header:start
#
#   project      : header42
#   file         : options.py
#   file_relpath : src/header42/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, settings and file
selection) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from header42.cli.errors import Header42UsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity: ``verbose_count`` when verbose, ``-quiet_count`` when quiet,
        0 otherwise.

    Raises:
        Header42UsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise Header42UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify twice for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and defaults to enabling color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def identity_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration file and identity override options."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        default=None,
        help="Read settings from this file instead of discovering "
        "header42.toml / pyproject.toml.",
    )(f)
    f = click.option(
        "--username",
        default=None,
        help="Username written in headers (overrides configuration and $USER).",
    )(f)
    f = click.option(
        "--email",
        default=None,
        help="E-mail written in headers (default: <username>@<email_domain>).",
    )(f)
    return f


def settings_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options that override configuration settings (identity and header scanning)."""
    f = identity_options(f)
    f = click.option(
        "--scan-limit",
        type=click.IntRange(min=1),
        default=None,
        help="Number of leading lines searched for an existing header.",
    )(f)
    return f


def file_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add positional paths and file filtering options."""
    f = click.argument(
        "paths",
        nargs=-1,
        type=click.Path(path_type=str),
    )(f)
    f = click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        help="Skip files matching this gitignore-style pattern (repeatable).",
    )(f)
    f = click.option(
        "--language",
        "language_override",
        default=None,
        help="Treat every file as this language identifier (see 'header42 languages').",
    )(f)
    return f
