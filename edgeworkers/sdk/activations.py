"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Activation Operations.

Activate EdgeWorker versions on the staging or production network, inspect
activations and cancel pending ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, one_of, required

LIST_ACTIVATIONS = "listing activations"
GET_ACTIVATION = "getting activation"
ACTIVATE_VERSION = "creating activation"
CANCEL_ACTIVATION = "canceling activation"


class ActivationNetwork(str, Enum):
    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"


def validate_activation_network(value: object) -> ValidationErrors:
    errors = ValidationErrors()
    errors.first("network", required(value), one_of(value, list(ActivationNetwork)))
    return errors


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Activation(WireModel):
    account_id: str = wire("accountId", "")
    activation_id: int = wire("activationId", 0)
    created_by: str = wire("createdBy", "")
    created_time: str = wire("createdTime", "")
    edgeworker_id: int = wire("edgeWorkerId", 0)
    last_modified_time: str = wire("lastModifiedTime", "")
    network: str = wire("network", "")
    status: str = wire("status", "")
    version: str = wire("version", "")
    note: str = wire("note", "", omitempty=True)


@dataclass
class ListActivationsResponse(WireModel):
    activations: List[Activation] = wire("activations", default_factory=list)


@dataclass
class ListActivationsRequest:
    edgeworker_id: int = 0
    version: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


@dataclass
class GetActivationRequest:
    edgeworker_id: int = 0
    activation_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.add("activation_id", required(self.activation_id))
        return errors


CancelActivationRequest = GetActivationRequest


@dataclass
class ActivateVersion(WireModel):
    """Body of an activation request."""

    network: ActivationNetwork = wire("network", "")
    version: str = wire("version", "")
    note: str = wire("note", "", omitempty=True)

    def validate(self) -> ValidationErrors:
        errors = validate_activation_network(self.network)
        errors.add("version", required(self.version))
        return errors


@dataclass
class ActivateVersionRequest:
    edgeworker_id: int = 0
    activate_version: ActivateVersion = field(default_factory=ActivateVersion)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.nest("activate_version", self.activate_version.validate())
        return errors


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class ActivationOperations(ResourceOperations):
    """EdgeWorker activations."""

    async def list_activations(self, request: ListActivationsRequest) -> ListActivationsResponse:
        """List all activations for an EdgeWorker, optionally for one version."""
        self._validate(LIST_ACTIVATIONS, request)
        params = {"version": request.version} if request.version else None
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/activations",
            params=params,
        )
        resp = await self._execute(LIST_ACTIVATIONS, req, expected_status=200)
        return self._decode(LIST_ACTIVATIONS, resp, ListActivationsResponse)

    async def get_activation(self, request: GetActivationRequest) -> Activation:
        """Fetch one activation by id."""
        self._validate(GET_ACTIVATION, request)
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/activations/{segment(request.activation_id)}",
        )
        resp = await self._execute(GET_ACTIVATION, req, expected_status=200)
        return self._decode(GET_ACTIVATION, resp, Activation)

    async def activate_version(self, request: ActivateVersionRequest) -> Activation:
        """Activate an EdgeWorker version on a network."""
        self._validate(ACTIVATE_VERSION, request)
        req = SDKRequest(
            method="POST",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/activations",
            body=request.activate_version.to_dict(),
        )
        resp = await self._execute(ACTIVATE_VERSION, req, expected_status=201)
        return self._decode(ACTIVATE_VERSION, resp, Activation)

    async def cancel_pending_activation(self, request: CancelActivationRequest) -> Activation:
        """Cancel a pending activation."""
        self._validate(CANCEL_ACTIVATION, request)
        req = SDKRequest(
            method="DELETE",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/activations/{segment(request.activation_id)}",
        )
        resp = await self._execute(CANCEL_ACTIVATION, req, expected_status=200)
        return self._decode(CANCEL_ACTIVATION, resp, Activation)
