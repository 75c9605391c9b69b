"""Runtime configuration for the ClickUp MCP server."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

CLICKUP_API_BASE = "https://api.clickup.com/api/v2"
API_KEY_ENV = "CLICKUP_API_KEY"


class ConfigError(Exception):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup."""

    api_key: str
    base_url: str = CLICKUP_API_BASE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings with the ClickUp API key

        Raises:
            ConfigError: If CLICKUP_API_KEY is unset or empty
        """
        env = os.environ if environ is None else environ
        api_key = env.get(API_KEY_ENV)
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} environment variable is required")
        return cls(api_key=api_key)
