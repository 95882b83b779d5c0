"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthboard.domain.entities.configuration import (
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
)
from healthboard.infrastructure.gateways.health_http_client import DEFAULT_USER_AGENT
from healthboard.shared import EnumEnvironment, EnumLogLevel
from healthboard.shared.env import load_secret_file_variables  # noqa: F401


class ServerSettings(BaseSettings):
    """HTTP server configuration settings."""

    title: str = Field(default="Healthboard", description="API title")
    description: str = Field(
        default="Aggregated health dashboard for HTTP services",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class DashboardSettings(BaseSettings):
    """Health dashboard configuration settings."""

    settings_file: Optional[str] = Field(
        default="dashboard-settings.json",
        description="JSON file holding the monitored services",
        validation_alias=AliasChoices(
            "DASHBOARD_SETTINGS_FILE", "DASHBOARD_SETTINGS_PATH"
        ),
    )
    timeout_seconds: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Default probe timeout, used when the file omits it",
    )
    refresh_interval_seconds: int = Field(
        default=DEFAULT_REFRESH_INTERVAL_SECONDS,
        gt=0,
        description="Dashboard refresh interval, used when the file omits it",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent with probes"
    )

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
