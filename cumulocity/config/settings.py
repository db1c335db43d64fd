"""
Configuration management for the Cumulocity core client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from cumulocity.exceptions import ConfigurationLoadError, InvalidConfigurationError
from cumulocity.logging_config import get_logger

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${C8Y_BASEURL}" -> value of C8Y_BASEURL env var
        "${C8Y_TENANT:t100}" -> value of C8Y_TENANT or "t100" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ConnectionConfig:
    """Platform endpoint and credentials."""

    base_url: str = ""
    tenant: str = ""
    username: str = ""
    password: str = ""
    token: str = ""
    application_key: str = ""
    timeout: int = 30
    verify_ssl: bool = True


@dataclass
class MultipartConfig:
    """Multipart upload settings.

    ``boundary`` pins the form-data boundary. Leave empty to generate a
    fresh one per upload.
    """

    boundary: str = ""


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class CumulocityConfig:
    """Main client configuration."""

    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    multipart: MultipartConfig = field(default_factory=MultipartConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.cumulocity/config.yaml")


def get_default_config() -> CumulocityConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        CumulocityConfig: Default configuration object
    """
    return CumulocityConfig()


def load_config(config_path: Optional[str] = None) -> CumulocityConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.
    If the file exists but cannot be read, raises ConfigurationLoadError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        CumulocityConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
        ConfigurationLoadError: If the file cannot be opened or read
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise ConfigurationLoadError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (InvalidConfigurationError, TypeError, ValueError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        )
    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _to_bool(value: Any) -> bool:
    """Interpret YAML or env-expanded values as booleans."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off", ""):
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a top-level section, treating an empty (null) section as absent."""
    section = config_data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(
            f"'{name}' section must be a mapping, got {type(section).__name__}"
        )
    return section


def _value(section: Dict[str, Any], key: str, default: Any) -> Any:
    """Look up a key, falling back to the default when missing or null."""
    value = section.get(key)
    return default if value is None else value


def _build_config_from_dict(config_data: Dict[str, Any]) -> CumulocityConfig:
    """
    Build CumulocityConfig from dictionary loaded from YAML.

    Merges user configuration with defaults. Keys left empty in YAML (null)
    take their default. Values substituted from the environment arrive as
    strings and are coerced to the field types.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        CumulocityConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a section is not a mapping
    """
    defaults = get_default_config()

    connection_data = _section(config_data, "connection")
    connection = ConnectionConfig(
        base_url=str(_value(connection_data, "base_url", defaults.connection.base_url)),
        tenant=str(_value(connection_data, "tenant", defaults.connection.tenant)),
        username=str(_value(connection_data, "username", defaults.connection.username)),
        password=str(_value(connection_data, "password", defaults.connection.password)),
        token=str(_value(connection_data, "token", defaults.connection.token)),
        application_key=str(
            _value(connection_data, "application_key", defaults.connection.application_key)
        ),
        timeout=int(_value(connection_data, "timeout", defaults.connection.timeout)),
        verify_ssl=_to_bool(_value(connection_data, "verify_ssl", defaults.connection.verify_ssl)),
    )

    multipart_data = _section(config_data, "multipart")
    multipart = MultipartConfig(
        boundary=str(_value(multipart_data, "boundary", defaults.multipart.boundary)),
    )

    logging_data = _section(config_data, "logging")
    logging = LoggingConfig(
        level=str(_value(logging_data, "level", defaults.logging.level)),
        file=str(_value(logging_data, "file", defaults.logging.file)),
        json_format=_to_bool(_value(logging_data, "json_format", defaults.logging.json_format)),
    )

    return CumulocityConfig(
        connection=connection,
        multipart=multipart,
        logging=logging,
    )


def _validate_config(config: CumulocityConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    connection = config.connection

    if connection.base_url:
        parsed = urlparse(connection.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidConfigurationError(
                f"base_url must be an http(s) URL, got '{connection.base_url}'"
            )

    if connection.timeout <= 0:
        raise InvalidConfigurationError(
            f"timeout must be positive, got {connection.timeout}"
        )

    if bool(connection.username) != bool(connection.password):
        raise InvalidConfigurationError(
            "username and password must be configured together"
        )

    if connection.token and connection.username:
        raise InvalidConfigurationError(
            "token and username/password are mutually exclusive"
        )

    if len(config.multipart.boundary) > 70:
        raise InvalidConfigurationError(
            f"multipart boundary must be at most 70 characters, "
            f"got {len(config.multipart.boundary)}"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
