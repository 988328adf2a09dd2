"""
Configuration management for cex-api-kit.
"""

from .client_config import ClientConfig, read_env_file

__all__ = ["ClientConfig", "read_env_file"]
