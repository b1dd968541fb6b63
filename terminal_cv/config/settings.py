"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from terminal_cv.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_IDENTITY = "visitor - Guest User"
DEFAULT_OWNER = "Samuel Lefcourt"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.host: str = self._get_env("TERMINAL_CV_HOST", "127.0.0.1")
        self.port: int = self._get_int_env("TERMINAL_CV_PORT", 8000)
        self.reload: bool = self._get_env("TERMINAL_CV_RELOAD", "0") in {
            "1",
            "true",
            "True",
        }
        self.log_level: str = self._get_log_level_env("TERMINAL_CV_LOG_LEVEL", "INFO")
        self.whoami: str = self._get_env("TERMINAL_CV_WHOAMI", DEFAULT_IDENTITY)
        self.owner: str = self._get_env("TERMINAL_CV_OWNER", DEFAULT_OWNER)
        self.max_sessions: int = self._get_int_env("TERMINAL_CV_MAX_SESSIONS", 1000)
        if self.max_sessions < 1:
            raise ConfigurationError("TERMINAL_CV_MAX_SESSIONS must be at least 1")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it is not a number."""
        value = os.getenv(key)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got '{value}'"
            )

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        value = self._get_env(key, default).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Unknown log level in {key}: '{value}'")
        return value


# Global settings instance
settings = Settings()
