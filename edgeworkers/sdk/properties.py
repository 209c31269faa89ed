"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Property Operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, required

LIST_PROPERTIES = "list properties"


@dataclass
class Property(WireModel):
    id: int = wire("propertyId", 0)
    name: str = wire("propertyName", "")
    staging_version: Optional[int] = wire("stagingVersion")
    production_version: Optional[int] = wire("productionVersion")
    latest_version: int = wire("latestVersion", 0)


@dataclass
class ListPropertiesResponse(WireModel):
    properties: List[Property] = wire("properties", default_factory=list)
    limited_access_to_properties: bool = wire("limitedAccessToProperties", False)


@dataclass
class ListPropertiesRequest:
    edgeworker_id: int = 0
    active_only: bool = False

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


class PropertyOperations(ResourceOperations):
    async def list_properties(self, request: ListPropertiesRequest) -> ListPropertiesResponse:
        """List properties that use an EdgeWorker.

        ``activeOnly`` is always sent so the API never falls back to its own
        default.
        """
        self._validate(LIST_PROPERTIES, request)
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/properties",
            params={"activeOnly": "true" if request.active_only else "false"},
        )
        resp = await self._execute(LIST_PROPERTIES, req, expected_status=200)
        return self._decode(LIST_PROPERTIES, resp, ListPropertiesResponse)
