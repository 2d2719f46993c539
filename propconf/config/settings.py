"""
Settings Model

Pydantic-based settings for propconf itself, read from environment variables
with the PROPCONF_ prefix.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class Settings(BaseSettings):
    """
    Main settings class.

    Loads configuration from:
    1. Default values
    2. Environment variables (PROPCONF_ prefix)

    Example:
        ```python
        # PROPCONF_LOGGING__LEVEL=DEBUG
        settings = get_settings()
        print(settings.logging.level)
        ```
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_prefix": "PROPCONF_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the settings singleton.

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
