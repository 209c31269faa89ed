"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Resource Tier Operations.

A resource tier fixes the CPU, memory and size limits an EdgeWorker runs
with. Tiers are offered per contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, required

LIST_RESOURCE_TIERS = "list resource tiers"
GET_RESOURCE_TIER = "get a resource tier"


@dataclass
class EdgeWorkerLimit(WireModel):
    limit_name: str = wire("limitName", "")
    limit_value: int = wire("limitValue", 0)
    limit_unit: str = wire("limitUnit", "")


@dataclass
class ResourceTier(WireModel):
    id: int = wire("resourceTierId", 0)
    name: str = wire("resourceTierName", "")
    edgeworker_limits: List[EdgeWorkerLimit] = wire("edgeWorkerLimits", default_factory=list)


@dataclass
class ListResourceTiersResponse(WireModel):
    resource_tiers: List[ResourceTier] = wire("resourceTiers", default_factory=list)


@dataclass
class ListResourceTiersRequest:
    contract_id: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("contract_id", required(self.contract_id))
        return errors


@dataclass
class GetResourceTierRequest:
    edgeworker_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


class ResourceTierOperations(ResourceOperations):
    """Resource tiers available to a contract or used by an EdgeWorker."""

    async def list_resource_tiers(self, request: ListResourceTiersRequest) -> ListResourceTiersResponse:
        self._validate(LIST_RESOURCE_TIERS, request)
        req = SDKRequest(
            method="GET",
            path="/edgeworkers/v1/resource-tiers",
            params={"contractId": request.contract_id},
        )
        resp = await self._execute(LIST_RESOURCE_TIERS, req, expected_status=200)
        return self._decode(LIST_RESOURCE_TIERS, resp, ListResourceTiersResponse)

    async def get_resource_tier(self, request: GetResourceTierRequest) -> ResourceTier:
        """Get the resource tier an EdgeWorker ID is bound to."""
        self._validate(GET_RESOURCE_TIER, request)
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/resource-tier",
        )
        resp = await self._execute(GET_RESOURCE_TIER, req, expected_status=200)
        return self._decode(GET_RESOURCE_TIER, resp, ResourceTier)
