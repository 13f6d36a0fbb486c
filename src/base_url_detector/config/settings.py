"""Library settings"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "base_url_detector"


class Settings(BaseSettings):
    """Library settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="BASE_URL_DETECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scoring Configuration
    check_url_valid: bool = True  # used when options leave check_url_valid unset

    # Application Configuration
    environment: Literal["development", "staging", "production", "test"] = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The root logger is left alone. Calling this again only updates the level.

    Args:
        level: Log level name (default from settings)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel((level or get_settings().log_level).upper())

    if not any(getattr(h, "_base_url_detector", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._base_url_detector = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
        logger.debug("Attached stream handler to package logger")

    return package_logger
