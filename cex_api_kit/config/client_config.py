"""
Client configuration loaded from the environment or a .env file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..utilities.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

ENV_USERNAME = "CEX_USERNAME"
ENV_API_KEY = "CEX_API_KEY"
ENV_API_SECRET = "CEX_API_SECRET"
ENV_BASE_URL = "CEX_BASE_URL"
ENV_VERIFY_SSL = "CEX_VERIFY_SSL"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for a CexAPIClient."""

    username: str = ""
    api_key: str = ""
    api_secret: str = ""
    base_url: str = DEFAULT_BASE_URL
    verify_ssl: bool = True
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.api_key and self.api_secret)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Values missing from the environment are looked up in ``env_file``
        (default: ``.env`` in the working directory) when it exists.

        Raises:
            ConfigurationError: If any credential is missing
        """
        values = {
            name: os.getenv(name)
            for name in (ENV_USERNAME, ENV_API_KEY, ENV_API_SECRET, ENV_BASE_URL, ENV_VERIFY_SSL)
        }

        path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
        if not all(values[name] for name in (ENV_USERNAME, ENV_API_KEY, ENV_API_SECRET)):
            for key, value in read_env_file(path).items():
                if key in values and not values[key]:
                    values[key] = value

        missing = [
            name for name in (ENV_USERNAME, ENV_API_KEY, ENV_API_SECRET) if not values[name]
        ]
        if missing:
            raise ConfigurationError(f"Missing required API credentials: {', '.join(missing)}")

        verify_ssl = values[ENV_VERIFY_SSL]
        return cls(
            username=values[ENV_USERNAME],
            api_key=values[ENV_API_KEY],
            api_secret=values[ENV_API_SECRET],
            base_url=values[ENV_BASE_URL] or DEFAULT_BASE_URL,
            verify_ssl=verify_ssl is None or verify_ssl.strip().lower() not in _FALSE_VALUES,
        )


def read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines from a .env file; a missing file yields no values."""
    if not path.exists():
        return {}

    values: dict[str, str] = {}
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                values[key.strip()] = value.strip().strip('"').strip("'")

    logger.debug(f"Loaded {len(values)} values from {path}")
    return values
