"""
Authentication and API client management.
"""

import logging
from pathlib import Path

from ..config import ClientConfig
from ..core.api_client import CexAPIClient, create_api_client
from .constants import CexAPIError

logger = logging.getLogger(__name__)


def get_credentials(env_file: str | Path | None = None) -> ClientConfig:
    """
    Get API credentials from environment variables or a .env file.

    Raises:
        ConfigurationError: If credentials are missing
    """
    config = ClientConfig.from_env(env_file)
    logger.debug(f"Loaded credentials for user {config.username}")
    return config


def create_client(env_file: str | Path | None = None) -> CexAPIClient:
    """Create an authenticated API client from the environment."""
    return create_api_client(get_credentials(env_file))


def check_api_connection(client: CexAPIClient) -> bool:
    """Check API connectivity and credentials by calling the balance endpoint."""
    try:
        result = client.balance()
    except CexAPIError as e:
        logger.error(f"API connection failed: {e}")
        return False

    if isinstance(result, dict) and result.get("error"):
        logger.error(f"API connection failed: {result['error']}")
        return False

    logger.info("API connection successful")
    return True
