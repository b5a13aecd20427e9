"""
Configuration settings for geowkt.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from geowkt.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        max_nesting_depth: Deepest geometry nesting accepted by the parser
            and the formatter before failing with NestingTooDeepError
        log_level: Default level used by setup_logging
        environment: Deployment environment, selects the console log format
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOWKT_",
        extra="ignore",
    )

    # Recursion guard
    max_nesting_depth: int = Field(default=64, ge=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"


def load_settings(**overrides: Any) -> Settings:
    """
    Build Settings from the environment and optional overrides.

    Raises:
        ConfigurationError: If a GEOWKT_* variable or override is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(
            f"Invalid geowkt configuration: {first['msg']}",
            config_key=config_key,
            details={"errors": e.errors(include_url=False)},
        ) from e


# Global settings instance
settings = load_settings()
