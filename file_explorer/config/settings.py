"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_PROMPT = "Enter command (type 'help' for all commands): "


def parse_log_level(value: str) -> int:
    """
    Translate a level name such as 'info' into a logging constant.

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level: {value}")
    return level


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.prompt: str = self._get_env("FILE_EXPLORER_PROMPT", DEFAULT_PROMPT)
        self.log_level: int = parse_log_level(
            self._get_env("FILE_EXPLORER_LOG_LEVEL", "WARNING")
        )
        self.log_file: Optional[str] = os.getenv("FILE_EXPLORER_LOG_FILE") or None
        self.color: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)


# Global settings instance
settings = Settings()
