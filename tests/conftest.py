"""
Pytest configuration and shared fixtures for EdgeWorkers SDK tests.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from edgeworkers.config.edgerc import EdgeGridCredentials
from edgeworkers.sdk.adapters.mock import MockAdapter
from edgeworkers.sdk.hooks import HookRegistry


EDGERC_CONTENT = """
[default]
host = akab-default.luna.akamaiapis.net/
client_token = akab-client-token-xxx
client_secret = SOME/SECRET/VALUE=
access_token = akab-access-token-xxx
max_body = 2048

[edgeworkers]
host = https://akab-ew.luna.akamaiapis.net
client_token = akab-ew-client-token
client_secret = ew-secret
access_token = akab-ew-access-token
account_key = 1-ABCDE
headers_to_sign = X-Test1, X-Test2

[broken]
host = akab-broken.luna.akamaiapis.net
client_token = akab-client-token
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, removed after the test.
    """
    temp_path = Path(tempfile.mkdtemp(prefix="edgeworkers_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def edgerc_file(temp_dir: Path) -> Path:
    """An ``.edgerc`` file with a default, a named and an incomplete section."""
    path = temp_dir / ".edgerc"
    path.write_text(EDGERC_CONTENT)
    return path


@pytest.fixture
def credentials() -> EdgeGridCredentials:
    return EdgeGridCredentials(
        host="akab-test.luna.akamaiapis.net",
        client_token="akab-client-token",
        client_secret="client-secret",
        access_token="akab-access-token",
    )


@pytest.fixture
def clean_akamai_env(monkeypatch) -> None:
    """Remove AKAMAI_* variables the developer machine may export."""
    for key in list(os.environ):
        if key.startswith("AKAMAI"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()
