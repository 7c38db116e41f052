"""
skill_audit Configuration Module.

Nested settings: each sub-module is an independent concern with its own
environment variable prefix.

Multi-Environment Support:
    Set `SA_ENV` to one of: development, testing, staging, production
    .env files are loaded in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from skill_audit.config import settings

    settings.audit.log_name  # "skills_audit"
    settings.logging.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .audit import AuditSettings, BackendKind
from .environment import EnvironmentSettings
from .logging import LoggingSettings


def _get_env_files() -> tuple[str, ...]:
    """Determine which .env files to load based on SA_ENV."""
    return EnvironmentSettings().env_files


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def audit(self) -> AuditSettings:
        return AuditSettings(_env_file=_get_env_files())

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=_get_env_files())

    @property
    def audit_log_name(self) -> str:
        return self.audit.log_name

    @property
    def audit_project(self) -> str | None:
        return self.audit.project

    @property
    def audit_backend(self) -> str:
        return self.audit.backend.value

    @property
    def audit_resource_type(self) -> str:
        return self.audit.resource_type


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "AuditSettings",
    "BackendKind",
    "EnvironmentSettings",
    "LoggingSettings",
]
