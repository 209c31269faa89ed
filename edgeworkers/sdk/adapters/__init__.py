"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Transport Adapters.
"""

from edgeworkers.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from edgeworkers.sdk.adapters.http import HttpAdapter
from edgeworkers.sdk.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "SDKRequest",
    "SDKResponse",
    "HttpAdapter",
    "MockAdapter",
]
