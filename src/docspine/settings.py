"""Settings for docspine stores.

``DocStoreSettings`` reads ``DOCSTORE_*`` environment variables (and a
``.env`` file when present) and carries both the logging configuration and
the two behavioural policies of the store.

Examples:
    >>> from docspine.settings import DocStoreSettings
    >>> settings = DocStoreSettings(id_policy="overwrite")
    >>> settings.id_policy
    <IdPolicy.OVERWRITE: 'overwrite'>

Tags:
    settings, configuration, pydantic, environment, docspine

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import AuthorMatch, IdPolicy
from .errors import ConfigError
from .logging import LogLevel, configure_logging


class DocStoreSettings(BaseSettings):
    """docspine configuration.

    Fields
    ──────
    log_level    : DEBUG, INFO, WARNING, ERROR or CRITICAL (any case)
    json_logs    : JSON output; ``None`` auto-detects (JSON when not a tty)
    service_name : Value of ``service.name`` on every log record
    id_policy    : Handling of supplied ids that are already stored
    author_match : Field compared by the ``author_ids`` search predicate
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: LogLevel = "INFO"
    json_logs: bool | None = None
    service_name: str = "docspine"

    # ── Store behaviour ──────────────────────────────────────────
    id_policy: IdPolicy = Field(default=IdPolicy.REGENERATE)
    author_match: AuthorMatch = Field(default=AuthorMatch.AUTHOR_ID)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def load(cls, **overrides: Any) -> DocStoreSettings:
        """Build settings, raising :class:`ConfigError` on invalid values."""
        try:
            return cls(**overrides)
        except ValidationError as exc:
            raise ConfigError(f"Invalid docspine settings: {exc}", cause=exc) from exc

    def configure_logging(self) -> None:
        """Apply the logging fields of these settings."""
        configure_logging(
            level=self.log_level,
            json_format=self.json_logs,
            service=self.service_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> DocStoreSettings:
    """Return the cached process settings (call ``cache_clear()`` to reload)."""
    return DocStoreSettings.load()


__all__ = [
    "DocStoreSettings",
    "get_settings",
]
