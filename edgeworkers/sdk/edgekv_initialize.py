"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeKV Initialization Operations.

EdgeKV must be initialized once per account before namespaces can be created.
"""

from __future__ import annotations

from dataclasses import dataclass

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations

INITIALIZE_EDGEKV = "initialize EdgeKV"
GET_INITIALIZATION_STATUS = "get EdgeKV initialization status"


@dataclass
class EdgeKVInitializationStatus(WireModel):
    account_status: str = wire("accountStatus", "")
    cpcode: str = wire("cpcode", "")
    production_status: str = wire("productionStatus", "")
    staging_status: str = wire("stagingStatus", "")


class EdgeKVInitializeOperations(ResourceOperations):
    async def initialize_edgekv(self) -> EdgeKVInitializationStatus:
        """Initialize the EdgeKV database for the account."""
        req = SDKRequest(method="PUT", path="/edgekv/v1/initialize")
        resp = await self._execute(INITIALIZE_EDGEKV, req, expected_status=201)
        return self._decode(INITIALIZE_EDGEKV, resp, EdgeKVInitializationStatus)

    async def get_edgekv_initialization_status(self) -> EdgeKVInitializationStatus:
        """Check the current EdgeKV initialization status."""
        req = SDKRequest(method="GET", path="/edgekv/v1/initialize")
        resp = await self._execute(GET_INITIALIZATION_STATUS, req, expected_status=200)
        return self._decode(GET_INITIALIZATION_STATUS, resp, EdgeKVInitializationStatus)
