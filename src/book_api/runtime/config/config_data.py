"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field, field_validator


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "DELETE", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./books.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @computed_field
    @property
    def password(self) -> str | None:
        """
        Get the database password from the appropriate source.
        1. A mounted secrets file given by `password_file`
        2. The environment variable named by `password_env_var`
        3. Whatever is embedded in the URL (development)
        """
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e

        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if not password:
                raise ValueError(
                    f"Environment variable {self.password_env_var} not set"
                )
            return password

        from sqlalchemy.engine import make_url

        return make_url(self.url).password

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string with the resolved password."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        resolved_password = self.password

        if base_url.password and resolved_password != base_url.password:
            logger.warning(
                "Database password from secrets does not match the one in the URL. Using password from secrets."
            )

        if resolved_password:
            base_url = base_url.set(password=resolved_password)

        # Render manually to avoid SQLAlchemy's password masking
        return base_url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        """True for ``sqlite://`` and ``sqlite:///:memory:`` URLs."""
        from sqlalchemy.engine import make_url

        url = make_url(self.url)
        return self.is_sqlite and url.database in (None, "", ":memory:")


class StorageConfig(BaseModel):
    """Book store configuration model."""

    backend: Literal["table", "memory"] = Field(
        default="table", description="Book store backend"
    )
    partition_key: str = Field(
        default="", description="Constant partition key shared by every row"
    )
    seed_books: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Books loaded into the in-memory store at startup",
    )


class AuthConfig(BaseModel):
    """Function key authentication configuration model."""

    enabled: bool = Field(default=True, description="Require a function key")
    function_keys: list[str] = Field(
        default_factory=list, description="Accepted function keys"
    )

    @field_validator("function_keys", mode="before")
    @classmethod
    def _drop_blank_keys(cls, keys: Any) -> Any:
        # Unset ${VAR:-} placeholders render as null or empty entries
        if keys is None:
            return []
        if isinstance(keys, list):
            return [key for key in keys if key is not None and str(key).strip()]
        return keys


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(
        default="localhost", description="Host the dev server binds to"
    )
    port: int = Field(default=8000, description="Port the dev server binds to")
    route_prefix: str = Field(default="/api", description="Prefix for book routes")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Book store configuration"
    )
    auth: AuthConfig = Field(
        default_factory=AuthConfig, description="Function key configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
