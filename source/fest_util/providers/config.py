"""This module defines the configuration management for the library.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files, so the default
timezone and log level can be changed without touching calling code.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """A Pydantic model for managing library settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    TIMEZONE: str | None = None

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, value: str | None) -> str | None:
        """Ensures the configured timezone is a known IANA zone name.

        Args:
            value: The raw TIMEZONE value, or None to use the system zone.

        Returns:
            The validated zone name, or None.

        Raises:
            ValueError: If the zone name cannot be found.
        """
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value.strip()


class ConfigProvider:
    """A provider class that acts as a factory for the library's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables.

        Returns:
            A new, validated Config object.
        """
        return Config()
