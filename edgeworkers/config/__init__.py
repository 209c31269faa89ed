"""
Configuration management for the EdgeWorkers SDK.

Handles SDK settings files and EdgeGrid credentials.
"""

from edgeworkers.config.edgerc import (
    EdgeGridCredentials,
    load_edgerc,
    load_from_env,
    load_from_file,
)
from edgeworkers.config.settings import (
    EdgercConfig,
    HttpConfig,
    LoggingConfig,
    SDKConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "EdgeGridCredentials",
    "EdgercConfig",
    "HttpConfig",
    "LoggingConfig",
    "SDKConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
    "load_edgerc",
    "load_from_env",
    "load_from_file",
]
