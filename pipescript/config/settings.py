"""
Configuration settings for pipescript.
"""

import logging
import os

from dotenv import load_dotenv

from pipescript.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Settings loaded from environment variables."""

    def __init__(self):
        self.chunk_size: int = self._get_positive_int("PIPESCRIPT_CHUNK_SIZE", 65536)
        self.log_level: str = self._get_log_level("PIPESCRIPT_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get an environment variable as a strictly positive integer."""
        raw = self._get_env(key, str(default)).strip()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

    def _get_log_level(self, key: str, default: str) -> str:
        """Get an environment variable naming a logging level."""
        level = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"{key} is not a valid log level: {level!r}")
        return level


# Global settings instance
settings = Settings()
