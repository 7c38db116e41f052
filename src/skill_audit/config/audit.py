"""
Audit Log Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendKind(str, Enum):
    GCLOUD = "gcloud"
    INMEMORY = "inmemory"


class AuditSettings(BaseSettings):
    """Defaults for audit loggers built by `create_logger`."""

    model_config = SettingsConfigDict(
        env_prefix="SA_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_name: str = Field(default="skills_audit", description="Target log stream name")
    project: Optional[str] = Field(
        default=None,
        description="GCP project ID (unset: resolved from Application Default Credentials)",
    )
    backend: BackendKind = Field(default=BackendKind.GCLOUD, description="Audit backend")
    resource_type: str = Field(default="global", description="Monitored resource type for audit entries")
