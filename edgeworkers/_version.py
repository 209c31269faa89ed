"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Version information for the EdgeWorkers SDK.

Reads the version from the VERSION file at the repository root and falls back
to the installed distribution metadata.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "edgeworkers-sdk"


def get_version() -> str:
    """
    Read version from VERSION file.

    Returns:
        str: The version string (e.g., "0.1.0")
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
