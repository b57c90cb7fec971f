# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for header42.

Settings are read from ``header42.toml`` or from the ``[tool.header42]`` table of
``pyproject.toml`` and can be overridden from the command line.
"""

from __future__ import annotations

from header42.config.io import ConfigFileError
from header42.config.model import Settings, load_settings, render_settings_toml

__all__ = [
    "ConfigFileError",
    "Settings",
    "load_settings",
    "render_settings_toml",
]
