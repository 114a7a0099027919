"""Root settings model for Chronicle configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from chronicle.config.models import AuditConfig, IngestionConfig, ObservabilityConfig


def get_config_dir() -> Path:
    """Get the configuration directory path.

    The config directory can be overridden with CHRONICLE_CONFIG_DIR env var.
    Otherwise the nearest 'config/' at or above the working directory is used.
    """
    config_dir_env = os.environ.get("CHRONICLE_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    current = Path.cwd()
    for directory in (current, *current.parents[:4]):
        if (directory / "config").is_dir():
            return directory / "config"

    return Path("config")


def get_environment() -> str:
    """Get the current environment from CHRONICLE_ENV, 'development' if unset."""
    return os.environ.get("CHRONICLE_ENV", "development")


class Settings(BaseSettings):
    """Root configuration object containing all nested configuration sections.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{CHRONICLE_ENV}.toml (environment overrides)
    4. CHRONICLE_* environment variables (runtime overrides)

    Either TOML file may be absent. Nested tables are merged key by key,
    so an environment file only needs the values it changes.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONICLE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chronicle", description="Application name bound into every log line")

    audit: AuditConfig = Field(
        default_factory=AuditConfig,
        description="Audit store configuration",
    )
    ingestion: IngestionConfig = Field(
        default_factory=IngestionConfig,
        description="Log ingestion configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (CHRONICLE_* environment variables)
        3. config/{CHRONICLE_ENV}.toml
        4. config/default.toml
        5. (defaults from model)
        """
        config_dir = get_config_dir()
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=config_dir / f"{get_environment()}.toml"),
            TomlConfigSettingsSource(settings_cls, toml_file=config_dir / "default.toml"),
        )
