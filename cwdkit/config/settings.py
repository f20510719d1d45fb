"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from cwdkit.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()
        self.workspace_root: str = self._get_path_env(
            "CWDKIT_WORKSPACE_ROOT", os.getcwd()
        )
        self.workspace_enforce: bool = self._get_bool_env(
            "CWDKIT_WORKSPACE_ENFORCE", False
        )
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 8000)
        self.reload: bool = self._get_bool_env("RELOAD", False)

        if self.workspace_enforce and not os.path.isdir(self.workspace_root):
            raise ConfigurationError(
                f"Workspace root is not a directory: {self.workspace_root}"
            )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() in _TRUE_VALUES

    def _get_int_env(self, key: str, default: int) -> int:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {value!r}")

    def _get_path_env(self, key: str, default: str) -> str:
        """Get a path variable, expanded and made absolute."""
        value = os.getenv(key) or default
        return os.path.abspath(os.path.expanduser(value))


# Global settings instance
settings = Settings()
