# topmark:header:start
#
#   project      : header42
#   file         : keys.py
#   file_relpath : src/header42/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for header42 configuration.

The keys are the external configuration API, as they appear at the top level of
``header42.toml`` and in the ``[tool.header42]`` table of ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by header42 configuration."""

    KEY_USERNAME: Final[str] = "username"
    KEY_EMAIL: Final[str] = "email"
    KEY_EMAIL_DOMAIN: Final[str] = "email_domain"
    KEY_DEFAULT_IDENTITY: Final[str] = "default_identity"
    KEY_SCAN_LIMIT: Final[str] = "scan_limit"
    KEY_EXCLUDE_LANGUAGES: Final[str] = "exclude_languages"
    KEY_EXCLUDE: Final[str] = "exclude"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_USERNAME,
            KEY_EMAIL,
            KEY_EMAIL_DOMAIN,
            KEY_DEFAULT_IDENTITY,
            KEY_SCAN_LIMIT,
            KEY_EXCLUDE_LANGUAGES,
            KEY_EXCLUDE,
        }
    )
