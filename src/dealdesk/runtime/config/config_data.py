"""Pydantic models for parsing the configuration file.

The file mirrors the layout of an ``appsettings``-style JSON document::

    {
      "ConnectionStrings": {"DefaultConnection": "sqlite:///./dealdesk.db"},
      "logging": {"level": "WARNING"}
    }

Only ``ConnectionStrings`` is required in practice; every other section has
defaults.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONNECTION_NAME = "DefaultConnection"


class AppConfig(BaseModel):
    """Application-wide settings."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Deployment environment"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="WARNING", description="Minimum level for the console sink")
    file: str | None = Field(default=None, description="Optional log file path")
    format: Literal["plain", "json"] = Field(
        default="plain", description="Format of the log file"
    )
    max_size_mb: int = Field(default=10, description="Rotate the log file at this size")
    backup_count: int = Field(default=5, description="Number of rotated files to keep")


class DatabaseConfig(BaseModel):
    """Engine options applied to every connection string."""

    echo: bool = Field(default=False, description="Echo SQL statements to the log")
    sqlite_timeout: int = Field(default=20, description="SQLite lock timeout in seconds")


class ConfigData(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(populate_by_name=True)

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    connection_strings: dict[str, str] = Field(
        default_factory=dict, alias="ConnectionStrings"
    )

    def get_connection_string(self, name: str = DEFAULT_CONNECTION_NAME) -> str:
        """Return the named connection string.

        Raises:
            ValueError: If the entry is missing or empty.
        """
        value = self.connection_strings.get(name)
        if not value:
            raise ValueError(f"Connection string 'ConnectionStrings:{name}' is not configured")
        return value

    @property
    def connection_string(self) -> str:
        return self.get_connection_string()
