"""
Diagnostic Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Library diagnostics, read by `configure_logging` (not the audit stream)."""

    model_config = SettingsConfigDict(
        env_prefix="SA_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum diagnostics level")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="stderr rendering: console or json")
