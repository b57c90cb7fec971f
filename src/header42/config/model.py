# topmark:header:start
#
#   project      : header42
#   file         : model.py
#   file_relpath : src/header42/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model for header42.

[`Settings`][header42.config.model.Settings] is immutable. Build it from defaults
([`Settings.defaults`][header42.config.model.Settings.defaults]), from a parsed
TOML table ([`Settings.from_toml_dict`][header42.config.model.Settings.from_toml_dict])
or from disk ([`load_settings`][header42.config.model.load_settings]), then apply
command-line overrides with
[`Settings.with_overrides`][header42.config.model.Settings.with_overrides].
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from header42.config.io import (
    extract_settings_table,
    find_config_file,
    get_int_value,
    get_list_value,
    get_string_value,
    load_toml_dict,
    to_toml,
)
from header42.config.keys import Toml
from header42.config.logging import get_logger
from header42.constants import DEFAULT_DOMAIN_SUFFIX, DEFAULT_IDENTITY, DEFAULT_SCAN_LIMIT

if TYPE_CHECKING:
    from datetime import datetime

    from header42.config.io import TomlTable
    from header42.config.logging import Header42Logger
    from header42.core.fields import FieldSources

logger: Header42Logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Effective header42 settings.

    Attributes:
        username (str): Username written in headers (empty: use the environment).
        email (str): E-mail written in headers (empty: derived from the username).
        email_domain (str): Domain of derived e-mail addresses.
        default_identity (str): Username used when no other source provides one.
        scan_limit (int): Number of leading lines searched for an existing header.
        exclude_languages (tuple[str, ...]): Language identifiers never given a header.
        exclude (tuple[str, ...]): Gitignore-style patterns of paths to skip.
        source (Path | None): Configuration file the settings were read from.
    """

    username: str = ""
    email: str = ""
    email_domain: str = DEFAULT_DOMAIN_SUFFIX
    default_identity: str = DEFAULT_IDENTITY
    scan_limit: int = DEFAULT_SCAN_LIMIT
    exclude_languages: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def defaults(cls) -> Settings:
        """Return the built-in default settings."""
        return cls()

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: Path | None = None) -> Settings:
        """Build settings from a header42 settings table.

        Surrounding whitespace is stripped from ``username`` and ``email``.

        Unknown keys and values of the wrong type are logged and ignored.
        """
        for key in sorted(set(table) - Toml.ALL_KEYS):
            logger.warning("Ignoring unknown config key '%s' (source: %s)", key, source)

        return cls(
            username=get_string_value(table, Toml.KEY_USERNAME).strip(),
            email=get_string_value(table, Toml.KEY_EMAIL).strip(),
            email_domain=get_string_value(table, Toml.KEY_EMAIL_DOMAIN, DEFAULT_DOMAIN_SUFFIX)
            or DEFAULT_DOMAIN_SUFFIX,
            default_identity=get_string_value(table, Toml.KEY_DEFAULT_IDENTITY, DEFAULT_IDENTITY)
            or DEFAULT_IDENTITY,
            scan_limit=get_int_value(table, Toml.KEY_SCAN_LIMIT, DEFAULT_SCAN_LIMIT),
            exclude_languages=tuple(get_list_value(table, Toml.KEY_EXCLUDE_LANGUAGES)),
            exclude=tuple(get_list_value(table, Toml.KEY_EXCLUDE)),
            source=source,
        )

    def with_overrides(
        self,
        *,
        username: str | None = None,
        email: str | None = None,
        scan_limit: int | None = None,
        exclude: tuple[str, ...] = (),
    ) -> Settings:
        """Return a copy with command-line overrides applied.

        ``None`` leaves a setting untouched; ``exclude`` patterns are appended.
        ``username`` and ``email`` are stripped like configured values.
        """
        return replace(
            self,
            username=self.username if username is None else username.strip(),
            email=self.email if email is None else email.strip(),
            scan_limit=self.scan_limit if scan_limit is None else scan_limit,
            exclude=self.exclude + tuple(exclude),
        )

    def field_sources(
        self,
        *,
        now: datetime | None = None,
        environ: dict[str, str] | None = None,
    ) -> FieldSources:
        """Return the field derivation inputs for these settings."""
        from header42.core.fields import FieldSources

        return FieldSources.from_environment(
            self.username,
            self.email,
            default_identity=self.default_identity,
            default_domain_suffix=self.email_domain,
            now=now,
            environ=environ,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible dict."""
        return {
            Toml.KEY_USERNAME: self.username,
            Toml.KEY_EMAIL: self.email,
            Toml.KEY_EMAIL_DOMAIN: self.email_domain,
            Toml.KEY_DEFAULT_IDENTITY: self.default_identity,
            Toml.KEY_SCAN_LIMIT: self.scan_limit,
            Toml.KEY_EXCLUDE_LANGUAGES: list(self.exclude_languages),
            Toml.KEY_EXCLUDE: list(self.exclude),
        }


def load_settings(config_path: Path | None = None, *, cwd: Path | None = None) -> Settings:
    """Load settings from an explicit file or the closest discovered one.

    Args:
        config_path (Path | None): Explicit configuration file. When ``None``, the
            file is discovered from ``cwd`` upward.
        cwd (Path | None): Start directory for discovery (defaults to the current
            working directory).

    Returns:
        Settings: Loaded settings, or defaults when no configuration exists.

    Raises:
        ConfigFileError: If the configuration file cannot be read or parsed.
    """
    path: Path | None = config_path or find_config_file(cwd or Path.cwd())
    if path is None:
        return Settings.defaults()

    data: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_settings_table(path, data)
    if table is None:
        logger.info("No header42 settings in %s; using defaults", path)
        return Settings(source=path)

    settings = Settings.from_toml_dict(table, source=path)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def render_settings_toml(settings: Settings) -> str:
    """Render settings as ``header42.toml`` text."""
    return to_toml(settings.to_toml_dict())
