# topmark:header:start
#
#   project      : header42
#   file         : exit_codes.py
#   file_relpath : src/header42/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the header42 CLI.

header42 follows the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, which signals a dry run where
headers would be inserted or refreshed. Tests must assert that no Click
exception was raised (``result.exception is None``) to tell it apart from
Click's own usage errors, which also exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the header42 CLI.

    Attributes:
        SUCCESS: Successful execution; nothing left to change.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: files would change if ``--write`` were set.
        USAGE_ERROR: Invalid flags or arguments (``EX_USAGE``).
        ENCODING_ERROR: A file is not valid UTF-8 text (``EX_DATAERR``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        IO_ERROR: A file could not be read or written (``EX_IOERR``).
        CONFIG_ERROR: The configuration file is unreadable or invalid (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
