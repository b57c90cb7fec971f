# topmark:header:start
#
#   project      : header42
#   file         : fields.py
#   file_relpath : src/header42/core/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Derive header field values from configuration and environment.

All inputs are passed explicitly through [`FieldSources`][header42.core.fields.FieldSources]
so that derivation is pure. Precedence rules:

- user: configured username (when not blank), else the system username, else
  the default identity.
- mail: configured e-mail (when not blank), else ``<user>@<default domain>``.
- created: preserved creation info when available, else this update.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.constants import DEFAULT_DOMAIN_SUFFIX, DEFAULT_IDENTITY, TIMESTAMP_FORMAT
from header42.core.renderer import HeaderFields

if TYPE_CHECKING:
    from collections.abc import Mapping

    from header42.config.logging import Header42Logger
    from header42.core.locator import CreationInfo

logger: Header42Logger = get_logger(__name__)


def format_timestamp(now: datetime) -> str:
    """Format a timestamp as ``YYYY/MM/DD HH:MM:SS``."""
    return now.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY/MM/DD HH:MM:SS`` timestamp.

    Raises:
        ValueError: If ``text`` does not follow the header timestamp format.
    """
    return datetime.strptime(text.strip(), TIMESTAMP_FORMAT)


def system_username(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the login name from the environment (``USER``, then ``USERNAME``).

    Empty values are treated as unset.
    """
    env = os.environ if environ is None else environ
    for var in ("USER", "USERNAME"):
        value = env.get(var)
        if value:
            return value
    return None


@dataclass(frozen=True)
class FieldSources:
    """Explicit inputs for header field derivation.

    Attributes:
        config_username (str): Username from configuration (may be empty).
        config_email (str): E-mail from configuration (may be empty).
        system_username (str | None): Login name reported by the environment.
        default_identity (str): Username used when nothing else is available.
        default_domain_suffix (str): Domain for e-mails built from the username.
        now (datetime): Timestamp of the update.
    """

    config_username: str
    config_email: str
    system_username: str | None
    default_identity: str
    default_domain_suffix: str
    now: datetime

    @classmethod
    def from_environment(
        cls,
        config_username: str = "",
        config_email: str = "",
        *,
        default_identity: str = DEFAULT_IDENTITY,
        default_domain_suffix: str = DEFAULT_DOMAIN_SUFFIX,
        now: datetime | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> FieldSources:
        """Build sources from the process environment and the local clock."""
        return cls(
            config_username=config_username,
            config_email=config_email,
            system_username=system_username(environ),
            default_identity=default_identity,
            default_domain_suffix=default_domain_suffix,
            now=now if now is not None else datetime.now(),
        )


def resolve_user(sources: FieldSources) -> str:
    """Return the configured username, the system username or the default identity."""
    if sources.config_username.strip():
        return sources.config_username
    if sources.system_username:
        return sources.system_username
    return sources.default_identity


def resolve_mail(sources: FieldSources, user: str) -> str:
    """Return the configured e-mail or one built from ``user``."""
    if sources.config_email.strip():
        return sources.config_email
    return f"{user}@{sources.default_domain_suffix}"


def derive_fields(
    file_name: str,
    sources: FieldSources,
    creation: CreationInfo | None = None,
) -> HeaderFields:
    """Compute the header fields for one update.

    Args:
        file_name (str): Base name of the file.
        sources (FieldSources): Configuration, environment and clock.
        creation (CreationInfo | None): Creation info read from the existing
            header; ``None`` marks the file as created by this update.

    Returns:
        HeaderFields: The values to render.
    """
    user: str = resolve_user(sources)
    mail: str = resolve_mail(sources, user)
    updated_at: str = format_timestamp(sources.now)

    if creation is not None:
        created_at, created_by = creation.created_at, creation.created_by
    else:
        created_at, created_by = updated_at, user

    fields = HeaderFields(
        file_name=file_name,
        user=user,
        mail=mail,
        updated_at=updated_at,
        created_at=created_at,
        created_by=created_by,
    )
    logger.debug("Derived header fields: %s", fields)
    return fields
