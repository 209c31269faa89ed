"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Contract Operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations

LIST_CONTRACTS = "list contracts"


@dataclass
class ListContractsResponse(WireModel):
    contract_ids: List[str] = wire("contractIds", default_factory=list)


class ContractOperations(ResourceOperations):
    async def list_contracts(self) -> ListContractsResponse:
        """List contract IDs that can be used to list resource tiers."""
        req = SDKRequest(method="GET", path="/edgeworkers/v1/contracts")
        resp = await self._execute(LIST_CONTRACTS, req, expected_status=200)
        return self._decode(LIST_CONTRACTS, resp, ListContractsResponse)
