import os
from pathlib import Path
import tomllib
from typing import Any
from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from brand_admin.settings.client import ClientConfig
from brand_admin.settings.sentry import SentryConfig
from brand_admin.settings.server import ServerConfig
from brand_admin.settings.upstream import UpstreamConfig

CONFIG_FILE_ENV = "BRAND_ADMIN_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "config.toml"


def _upper_keys(data: dict[str, Any]) -> dict[str, Any]:
    """``[upstream] base_url`` in TOML maps onto ``UPSTREAM.BASE_URL``."""
    return {
        key.upper(): _upper_keys(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source reading a TOML file, ``config.toml`` in the working
    directory unless BRAND_ADMIN_CONFIG_FILE points elsewhere. A missing
    file contributes nothing.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_file: Path | None = None):
        super().__init__(settings_cls)
        self.toml_file = toml_file or Path(
            os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        )
        self.data: dict[str, Any] = {}
        if self.toml_file.is_file():
            with open(self.toml_file, "rb") as f:
                self.data = _upper_keys(tomllib.load(f))

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return self.data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self.data)


class Settings(BaseSettings):
    APP_NAME: str = Field(default="Brand Admin", description="Application name")
    APP_VERSION: str = Field(default="0.1.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode")
    ENVIRONMENT: str = Field(
        default="DEV", description="Environment of the application"
    )
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    SERVER: ServerConfig = Field(
        default_factory=ServerConfig, description="Server configuration settings"
    )
    UPSTREAM: UpstreamConfig = Field(
        default_factory=UpstreamConfig, description="Brand backend settings"
    )
    CLIENT: ClientConfig = Field(
        default_factory=ClientConfig, description="Client API wrapper settings"
    )
    SENTRY: SentryConfig = Field(
        default_factory=SentryConfig, description="Sentry error reporting settings"
    )

    model_config = SettingsConfigDict(
        env_prefix="BRAND_ADMIN_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """
        Customize settings sources priority.
        Priority (highest to lowest):
        1. Explicit keyword arguments
        2. Environment variables
        3. .env file
        4. TOML file
        5. Default values
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance.
    Creates a new instance if one doesn't exist.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild the global settings instance from its sources."""
    global _settings
    _settings = Settings()
    return _settings
