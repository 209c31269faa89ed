"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

EdgeWorkers SDK - Python client for the EdgeWorkers and EdgeKV APIs

Typed, validated, EdgeGrid-signed access to EdgeWorker IDs, versions,
activations, reports and the EdgeKV key-value store.
"""

from edgeworkers._version import __version__

__all__ = ["__version__"]
