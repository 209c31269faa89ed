"""
Configuration management for the EdgeWorkers SDK.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.

Example::

    edgerc:
      path: ~/.edgerc
      section: ${EDGERC_SECTION:default}
      env: false
    http:
      timeout: 30
      max_retries: 3
    logging:
      level: INFO
      format: json
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from edgeworkers.exceptions import InvalidConfigurationError
from edgeworkers.logging_config import get_logger

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
        "${EDGERC_SECTION}" -> value of EDGERC_SECTION env var
        "${EDGERC_SECTION:default}" -> value of EDGERC_SECTION or "default" if not set
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
class EdgercConfig:
    """Where to find EdgeGrid credentials."""

    path: str = "~/.edgerc"
    section: str = "default"
    env: bool = False


@dataclass
class HttpConfig:
    """HTTP transport configuration."""

    timeout: float = 30.0
    max_retries: int = 3
    user_agent: str = ""


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "json"


@dataclass
class SDKConfig:
    """Main EdgeWorkers SDK configuration."""

    edgerc: EdgercConfig = field(default_factory=EdgercConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.edgeworkers/config.yaml")


def get_default_config() -> SDKConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        SDKConfig: Default configuration object
    """
    return SDKConfig()


def load_config(config_path: Optional[str] = None) -> SDKConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        SDKConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
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
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        )

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
    except (TypeError, ValueError, InvalidConfigurationError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        )

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _build_config_from_dict(config_data: Dict[str, Any]) -> SDKConfig:
    """
    Build SDKConfig from dictionary loaded from YAML.

    Missing sections and keys fall back to defaults. Values arrive as strings
    after env expansion, so numeric and boolean fields are coerced here.
    """
    defaults = get_default_config()

    edgerc_data = config_data.get('edgerc') or {}
    edgerc = EdgercConfig(
        path=str(edgerc_data.get('path', defaults.edgerc.path)),
        section=str(edgerc_data.get('section', defaults.edgerc.section)),
        env=_as_bool(edgerc_data.get('env', defaults.edgerc.env)),
    )

    http_data = config_data.get('http') or {}
    http = HttpConfig(
        timeout=float(http_data.get('timeout', defaults.http.timeout)),
        max_retries=int(http_data.get('max_retries', defaults.http.max_retries)),
        user_agent=str(http_data.get('user_agent', defaults.http.user_agent) or ""),
    )

    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', defaults.logging.level)),
        file=str(logging_data.get('file', defaults.logging.file) or ""),
        format=str(logging_data.get('format', defaults.logging.format)),
    )

    return SDKConfig(edgerc=edgerc, http=http, logging=logging)


def _validate_config(config: SDKConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.edgerc.path:
        raise InvalidConfigurationError("edgerc path cannot be empty")
    if not config.edgerc.section:
        raise InvalidConfigurationError("edgerc section cannot be empty")

    if config.http.timeout <= 0:
        raise InvalidConfigurationError(
            f"http timeout must be positive, got {config.http.timeout}"
        )
    if config.http.max_retries < 0:
        raise InvalidConfigurationError(
            f"max_retries cannot be negative, got {config.http.max_retries}"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["json", "console"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, "
            f"got '{config.logging.format}'"
        )
