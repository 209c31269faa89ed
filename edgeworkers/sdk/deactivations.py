"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Deactivation Operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from edgeworkers.sdk.activations import ActivationNetwork, validate_activation_network
from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, required

LIST_DEACTIVATIONS = "list deactivations"
GET_DEACTIVATION = "get deactivation"
DEACTIVATE_VERSION = "deactivate version"


@dataclass
class Deactivation(WireModel):
    edgeworker_id: int = wire("edgeWorkerId", 0)
    version: str = wire("version", "")
    deactivation_id: int = wire("deactivationId", 0)
    account_id: str = wire("accountId", "")
    status: str = wire("status", "")
    network: ActivationNetwork = wire("network", "")
    note: str = wire("note", "", omitempty=True)
    created_by: str = wire("createdBy", "")
    created_time: str = wire("createdTime", "")
    last_modified_time: str = wire("lastModifiedTime", "")


@dataclass
class ListDeactivationsResponse(WireModel):
    deactivations: List[Deactivation] = wire("deactivations", default_factory=list)


@dataclass
class ListDeactivationsRequest:
    edgeworker_id: int = 0
    version: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


@dataclass
class GetDeactivationRequest:
    edgeworker_id: int = 0
    deactivation_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.add("deactivation_id", required(self.deactivation_id))
        return errors


@dataclass
class DeactivateVersion(WireModel):
    network: ActivationNetwork = wire("network", "")
    note: str = wire("note", "", omitempty=True)
    version: str = wire("version", "")

    def validate(self) -> ValidationErrors:
        errors = validate_activation_network(self.network)
        errors.add("version", required(self.version))
        return errors


@dataclass
class DeactivateVersionRequest:
    edgeworker_id: int = 0
    deactivate_version: DeactivateVersion = field(default_factory=DeactivateVersion)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.nest("deactivate_version", self.deactivate_version.validate())
        return errors


class DeactivationOperations(ResourceOperations):
    """EdgeWorker deactivations."""

    async def list_deactivations(self, request: ListDeactivationsRequest) -> ListDeactivationsResponse:
        self._validate(LIST_DEACTIVATIONS, request)
        params = {"version": request.version} if request.version else None
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/deactivations",
            params=params,
        )
        resp = await self._execute(LIST_DEACTIVATIONS, req, expected_status=200)
        return self._decode(LIST_DEACTIVATIONS, resp, ListDeactivationsResponse)

    async def get_deactivation(self, request: GetDeactivationRequest) -> Deactivation:
        self._validate(GET_DEACTIVATION, request)
        req = SDKRequest(
            method="GET",
            path=(
                f"/edgeworkers/v1/ids/{request.edgeworker_id}"
                f"/deactivations/{segment(request.deactivation_id)}"
            ),
        )
        resp = await self._execute(GET_DEACTIVATION, req, expected_status=200)
        return self._decode(GET_DEACTIVATION, resp, Deactivation)

    async def deactivate_version(self, request: DeactivateVersionRequest) -> Deactivation:
        """Deactivate an existing EdgeWorker version on the given network."""
        self._validate(DEACTIVATE_VERSION, request)
        req = SDKRequest(
            method="POST",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/deactivations",
            body=request.deactivate_version.to_dict(),
        )
        resp = await self._execute(DEACTIVATE_VERSION, req, expected_status=201)
        return self._decode(DEACTIVATE_VERSION, resp, Deactivation)
