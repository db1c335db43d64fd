"""
Configuration management for the Cumulocity core client.

Handles loading and validation of configuration files.
"""

from cumulocity.config.settings import (
    ConnectionConfig,
    CumulocityConfig,
    LoggingConfig,
    MultipartConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ConnectionConfig",
    "CumulocityConfig",
    "LoggingConfig",
    "MultipartConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
