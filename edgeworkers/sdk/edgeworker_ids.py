"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeWorker ID Operations.

An EdgeWorker ID is the registration of one EdgeWorker within a group and
resource tier. Versions, activations and reports all hang off it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, required

GET_EDGEWORKER_ID = "get an EdgeWorker ID"
LIST_EDGEWORKERS_ID = "list EdgeWorkers IDs"
CREATE_EDGEWORKER_ID = "create an EdgeWorker ID"
UPDATE_EDGEWORKER_ID = "update an EdgeWorker ID"
CLONE_EDGEWORKER_ID = "clone an EdgeWorker ID"
DELETE_EDGEWORKER_ID = "delete an EdgeWorker ID"


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class EdgeWorkerID(WireModel):
    edgeworker_id: int = wire("edgeWorkerId", 0)
    name: str = wire("name", "")
    account_id: str = wire("accountId", "")
    group_id: int = wire("groupId", 0)
    resource_tier_id: int = wire("resourceTierId", 0)
    source_edgeworker_id: int = wire("sourceEdgeWorkerId", 0, omitempty=True)
    created_by: str = wire("createdBy", "")
    created_time: str = wire("createdTime", "")
    last_modified_by: str = wire("lastModifiedBy", "")
    last_modified_time: str = wire("lastModifiedTime", "")


@dataclass
class ListEdgeWorkersIDResponse(WireModel):
    edgeworkers: List[EdgeWorkerID] = wire("edgeWorkerIds", default_factory=list)


@dataclass
class EdgeWorkerIDBody(WireModel):
    """Body shared by create, update and clone."""

    name: str = wire("name", "")
    group_id: int = wire("groupId", 0)
    resource_tier_id: int = wire("resourceTierId", 0)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("name", required(self.name))
        errors.add("group_id", required(self.group_id))
        errors.add("resource_tier_id", required(self.resource_tier_id))
        return errors


@dataclass
class CloneEdgeWorkerIDBody(WireModel):
    """Clone body. Name and group are sent only when set; the source EdgeWorker supplies them otherwise."""

    name: str = wire("name", "", omitempty=True)
    group_id: int = wire("groupId", 0, omitempty=True)
    resource_tier_id: int = wire("resourceTierId", 0)


CreateEdgeWorkerIDRequest = EdgeWorkerIDBody


@dataclass
class GetEdgeWorkerIDRequest:
    edgeworker_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


DeleteEdgeWorkerIDRequest = GetEdgeWorkerIDRequest


@dataclass
class ListEdgeWorkersIDRequest:
    group_id: int = 0
    resource_tier_id: int = 0

    def validate(self) -> ValidationErrors:
        return ValidationErrors()

    def query(self) -> Optional[Dict[str, str]]:
        params = {}
        if self.group_id:
            params["groupId"] = str(self.group_id)
        if self.resource_tier_id:
            params["resourceTierId"] = str(self.resource_tier_id)
        return params or None


@dataclass
class UpdateEdgeWorkerIDRequest:
    edgeworker_id: int = 0
    body: EdgeWorkerIDBody = field(default_factory=EdgeWorkerIDBody)

    def validate(self) -> ValidationErrors:
        errors = self.body.validate()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


@dataclass
class CloneEdgeWorkerIDRequest:
    edgeworker_id: int = 0
    body: CloneEdgeWorkerIDBody = field(default_factory=CloneEdgeWorkerIDBody)

    def validate(self) -> ValidationErrors:
        """Only the target resource tier is mandatory when cloning."""
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.add("resource_tier_id", required(self.body.resource_tier_id))
        return errors


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class EdgeWorkerIDOperations(ResourceOperations):
    """EdgeWorker ID registrations."""

    async def get_edgeworker_id(self, request: GetEdgeWorkerIDRequest) -> EdgeWorkerID:
        self._validate(GET_EDGEWORKER_ID, request)
        req = SDKRequest(method="GET", path=f"/edgeworkers/v1/ids/{request.edgeworker_id}")
        resp = await self._execute(GET_EDGEWORKER_ID, req, expected_status=200)
        return self._decode(GET_EDGEWORKER_ID, resp, EdgeWorkerID)

    async def list_edgeworkers_id(
        self, request: Optional[ListEdgeWorkersIDRequest] = None
    ) -> ListEdgeWorkersIDResponse:
        """List EdgeWorker IDs, optionally filtered by group and resource tier.

        Args:
            request: Filters. Zero values are not sent.

        Returns:
            ListEdgeWorkersIDResponse
        """
        request = request or ListEdgeWorkersIDRequest()
        self._validate(LIST_EDGEWORKERS_ID, request)
        req = SDKRequest(method="GET", path="/edgeworkers/v1/ids", params=request.query())
        resp = await self._execute(LIST_EDGEWORKERS_ID, req, expected_status=200)
        return self._decode(LIST_EDGEWORKERS_ID, resp, ListEdgeWorkersIDResponse)

    async def create_edgeworker_id(self, request: CreateEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Register a new EdgeWorker ID."""
        self._validate(CREATE_EDGEWORKER_ID, request)
        req = SDKRequest(method="POST", path="/edgeworkers/v1/ids", body=request.to_dict())
        resp = await self._execute(CREATE_EDGEWORKER_ID, req, expected_status=201)
        return self._decode(CREATE_EDGEWORKER_ID, resp, EdgeWorkerID)

    async def update_edgeworker_id(self, request: UpdateEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Rename an EdgeWorker ID or move it to another group."""
        self._validate(UPDATE_EDGEWORKER_ID, request)
        req = SDKRequest(
            method="PUT",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}",
            body=request.body.to_dict(),
        )
        resp = await self._execute(UPDATE_EDGEWORKER_ID, req, expected_status=200)
        return self._decode(UPDATE_EDGEWORKER_ID, resp, EdgeWorkerID)

    async def clone_edgeworker_id(self, request: CloneEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Clone an EdgeWorker ID into a different resource tier."""
        self._validate(CLONE_EDGEWORKER_ID, request)
        req = SDKRequest(
            method="POST",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/clone",
            body=request.body.to_dict(),
        )
        resp = await self._execute(CLONE_EDGEWORKER_ID, req, expected_status=200)
        return self._decode(CLONE_EDGEWORKER_ID, resp, EdgeWorkerID)

    async def delete_edgeworker_id(self, request: DeleteEdgeWorkerIDRequest) -> None:
        self._validate(DELETE_EDGEWORKER_ID, request)
        req = SDKRequest(method="DELETE", path=f"/edgeworkers/v1/ids/{request.edgeworker_id}")
        await self._execute(DELETE_EDGEWORKER_ID, req, expected_status=204)
