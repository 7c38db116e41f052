"""
Environment selection for .env file loading.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["development", "testing", "staging", "production"]


class EnvironmentSettings(BaseSettings):
    """`SA_ENV` picks which .env files the other settings read."""

    model_config = SettingsConfigDict(
        env_prefix="SA_",
        extra="ignore",
    )

    env: Environment = Field(default="development", description="Current environment")

    @property
    def env_files(self) -> tuple[str, ...]:
        """Files to load, later entries overriding earlier ones."""
        return (
            ".env",
            ".env.local",
            f".env.{self.env}",
            f".env.{self.env}.local",
        )
