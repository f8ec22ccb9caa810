# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

Settings are assembled from several sources, highest precedence first:

1. Command-line overrides (passed as keyword arguments by the runtime)
2. Environment variables, nested with ``__`` (e.g. ``SERVER__PORT=9000``)
3. The ``.env`` file in the working directory
4. The YAML files listed in ``config_files``, merged in order
5. Field defaults

Each application subclasses Settings to point ``config_files`` at its own
packaged defaults and optional external override file.

Example:
    >>> from mxy_ai.core.config.settings import Settings, load_settings
    >>> settings = load_settings(Settings, {"server": {"port": "9000"}})
    >>> print(settings.server.port)
    9000
"""

from pathlib import Path
from typing import Any, ClassVar, Literal, Self

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from mxy_ai.core.config.yaml_loader import YAMLConfigSettingsSource
from mxy_ai.core.exceptions import ConfigurationError


class ServerSettings(BaseModel):
    """HTTP server configuration.

    Attributes:
        enabled: Whether to open the HTTP listener at all.
        host: Host to bind to.
        port: Port to listen on.
        root_path: ASGI root path when served behind a path prefix.
        access_log: Whether uvicorn writes access log lines.
        graceful_timeout: Seconds to wait for in-flight requests on shutdown.
    """

    enabled: bool = True
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    root_path: str = ""
    access_log: bool = False
    graceful_timeout: int = Field(default=30, ge=0)


class CORSSettings(BaseModel):
    """CORS configuration for the HTTP API.

    Attributes:
        origins: Comma-separated list of allowed origins. Empty disables CORS.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    origins: str = ""
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class MetricsSettings(BaseModel):
    """Prometheus metrics configuration."""

    enabled: bool = True


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Attributes:
        application_name: Name the application reports in logs and endpoints.
        environment: Current environment.
        debug: Enable debug mode (interactive API docs, console logs).
        log_level: Logging level.
        log_format: Log renderer; ``auto`` picks console in development.
        server: HTTP server settings.
        cors: CORS settings.
        metrics: Metrics settings.
    """

    config_files: ClassVar[tuple[Path, ...]] = ()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    application_name: str = "application"
    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json", "auto"] = "auto"

    server: ServerSettings = Field(default_factory=ServerSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML config files below environment sources."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YAMLConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production with debug mode enabled.
        """
        if self.environment == "production" and self.debug:
            raise ValueError(
                "Debug mode must be disabled in production. "
                "Set DEBUG=false or pass --debug=false."
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def use_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON."""
        if self.log_format == "auto":
            return not (self.is_development or self.debug)
        return self.log_format == "json"


def load_settings(
    settings_class: type[Settings],
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings for an application, applying command-line overrides.

    Args:
        settings_class: The application's Settings subclass.
        overrides: Nested mapping of values that take precedence over
            every other source.

    Returns:
        Validated settings instance.

    Raises:
        ConfigurationError: If the merged configuration fails validation.
    """
    try:
        return settings_class(**(overrides or {}))
    except ValidationError as e:
        raise ConfigurationError(settings_class.__name__, e.errors()) from e
