"""
EdgeGrid credential loading.

Credentials come from an INI-style ``.edgerc`` file or, when requested, from
``AKAMAI_*`` environment variables. Each ``.edgerc`` section holds one set of
credentials::

    [default]
    host = akab-xxxx.luna.akamaiapis.net
    client_token = akab-client-token
    client_secret = secret
    access_token = akab-access-token
    account_key = 1-ABCDE        ; optional
    max_body = 131072            ; optional
"""

import configparser
import os
from dataclasses import dataclass, field
from typing import List, Optional

from edgeworkers.exceptions import (
    ConfigurationLoadError,
    CredentialsNotFoundError,
    InvalidConfigurationError,
)
from edgeworkers.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EDGERC_PATH = "~/.edgerc"
DEFAULT_SECTION = "default"
MAX_BODY_SIZE = 131072

REQUIRED_OPTIONS = ("host", "client_token", "client_secret", "access_token")


@dataclass
class EdgeGridCredentials:
    """One set of EdgeGrid API client credentials."""

    host: str
    client_token: str
    client_secret: str
    access_token: str
    account_key: str = ""
    headers_to_sign: List[str] = field(default_factory=list)
    max_body: int = MAX_BODY_SIZE

    def __post_init__(self) -> None:
        self.host = _normalize_host(self.host)
        if self.max_body <= 0:
            self.max_body = MAX_BODY_SIZE

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return (
            f"EdgeGridCredentials(host={self.host!r}, "
            f"client_token={self.client_token[:8]!r}..., account_key={self.account_key!r})"
        )


def _normalize_host(host: str) -> str:
    host = host.strip()
    for scheme in ("https://", "http://"):
        if host.startswith(scheme):
            host = host[len(scheme):]
    return host.rstrip("/")


def _parse_max_body(raw: Optional[str], source: str) -> int:
    if raw is None or raw.strip() == "":
        return MAX_BODY_SIZE
    try:
        value = int(raw)
    except ValueError:
        raise InvalidConfigurationError(f"max_body in {source} must be an integer, got {raw!r}")
    return value if value > 0 else MAX_BODY_SIZE


def load_from_file(path: str = DEFAULT_EDGERC_PATH, section: str = DEFAULT_SECTION) -> EdgeGridCredentials:
    """
    Load credentials from a section of an ``.edgerc`` file.

    Args:
        path: Path to the ``.edgerc`` file. ``~`` is expanded.
        section: Section name to read.

    Returns:
        EdgeGridCredentials: The loaded credentials

    Raises:
        ConfigurationLoadError: If the file cannot be read or a required option is missing
        CredentialsNotFoundError: If the section does not exist
    """
    path = os.path.expanduser(path)
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, "r") as f:
            parser.read_file(f)
    except OSError as e:
        raise ConfigurationLoadError(f"could not load config file: {e}")
    except configparser.Error as e:
        raise ConfigurationLoadError(f"could not parse config file '{path}': {e}")

    if not parser.has_section(section):
        raise CredentialsNotFoundError(f"section {section!r} does not exist in '{path}'")

    values = parser[section]
    for option in REQUIRED_OPTIONS:
        if option not in values:
            raise ConfigurationLoadError(f'required option "{option}" is missing from edgerc')

    headers_to_sign = [
        h.strip() for h in values.get("headers_to_sign", "").split(",") if h.strip()
    ]

    logger.debug(f"Loaded EdgeGrid credentials from {path} [{section}]")
    return EdgeGridCredentials(
        host=values["host"],
        client_token=values["client_token"],
        client_secret=values["client_secret"],
        access_token=values["access_token"],
        account_key=values.get("account_key", ""),
        headers_to_sign=headers_to_sign,
        max_body=_parse_max_body(values.get("max_body"), path),
    )


def env_prefix(section: str = DEFAULT_SECTION) -> str:
    """Return the environment variable prefix used for a section."""
    if section.lower() == DEFAULT_SECTION:
        return "AKAMAI"
    return f"AKAMAI_{section.upper()}"


def load_from_env(section: str = DEFAULT_SECTION) -> EdgeGridCredentials:
    """
    Load credentials from ``AKAMAI_*`` environment variables.

    The default section reads ``AKAMAI_HOST``, ``AKAMAI_CLIENT_TOKEN`` and so
    on; any other section reads ``AKAMAI_<SECTION>_HOST`` and friends.

    Raises:
        CredentialsNotFoundError: If a required variable is not set
    """
    prefix = env_prefix(section)
    values = {}
    for option in REQUIRED_OPTIONS:
        key = f"{prefix}_{option.upper()}"
        if key not in os.environ:
            raise CredentialsNotFoundError(f'required option "{key}" is missing from env')
        values[option] = os.environ[key]

    return EdgeGridCredentials(
        account_key=os.environ.get(f"{prefix}_ACCOUNT_KEY", ""),
        max_body=_parse_max_body(os.environ.get(f"{prefix}_MAX_BODY"), "environment"),
        **values,
    )


def load_edgerc(
    path: Optional[str] = None,
    section: Optional[str] = None,
    env: bool = False,
) -> EdgeGridCredentials:
    """
    Load EdgeGrid credentials.

    With ``env=True`` the environment is tried first and the file is only read
    when the environment does not hold a complete set of credentials.

    Args:
        path: Path to the ``.edgerc`` file. Defaults to ``~/.edgerc``.
        section: Section name. Defaults to ``default``.
        env: Whether to consult ``AKAMAI_*`` environment variables first.

    Returns:
        EdgeGridCredentials: The loaded credentials
    """
    path = path or DEFAULT_EDGERC_PATH
    section = section or DEFAULT_SECTION

    if env:
        try:
            credentials = load_from_env(section)
            logger.debug(f"Loaded EdgeGrid credentials from environment ({env_prefix(section)}_*)")
            return credentials
        except CredentialsNotFoundError as e:
            logger.debug(f"Environment credentials incomplete, falling back to {path}: {e}")

    try:
        return load_from_file(path, section)
    except ConfigurationLoadError as e:
        raise ConfigurationLoadError(
            f"Unable to load config from environment or .edgerc file: {e}"
        ) from e
