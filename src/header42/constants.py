# topmark:header:start
#
#   project      : header42
#   file         : constants.py
#   file_relpath : src/header42/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HEADER42_VERSION: str = get_version("header42")

# Fixed width of every rendered header line (line terminator excluded).
HEADER_WIDTH: Final[int] = 79

# Number of leading lines inspected when looking for an existing header.
DEFAULT_SCAN_LIMIT: Final[int] = 20

# Identity used when neither the configuration nor the environment name a user.
DEFAULT_IDENTITY: Final[str] = "marvin"
DEFAULT_DOMAIN_SUFFIX: Final[str] = "student.42.fr"

TIMESTAMP_FORMAT: Final[str] = "%Y/%m/%d %H:%M:%S"

# Keyword whose presence marks a line as part of an existing header.
UPDATED_MARKER: Final[str] = "Updated:"

ASCII_ART: Final[tuple[str, ...]] = (
    "                               :::       ::::::::",
    "                             :+:       :+:    :+:",
    "                           +:+ +:+           +:+",
    "                          +#+  +:+         +#+",
    "                         +#+#+#+#+#+     +#+",
    "                             #+#      ##########",
)

CONFIG_FILE_NAME: Final[str] = "header42.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "tool.header42"

LOG_LEVEL_ENV_VAR: Final[str] = "HEADER42_LOG_LEVEL"
