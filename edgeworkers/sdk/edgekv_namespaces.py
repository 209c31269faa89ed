"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeKV Namespace Operations.

Namespaces are the top-level EdgeKV containers. Deleting a namespace is
asynchronous by default: the API schedules the delete and answers 202 with the
scheduled time, which can then be inspected, moved or cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import (
    BLANK,
    ValidationErrors,
    length_between,
    one_of,
    required,
)

LIST_NAMESPACES = "list EdgeKV namespaces"
GET_NAMESPACE = "get an EdgeKV namespace"
CREATE_NAMESPACE = "create an EdgeKV namespace"
UPDATE_NAMESPACE = "update an EdgeKV namespace"
DELETE_NAMESPACE = "delete an EdgeKV namespace"
GET_SCHEDULED_DELETE_TIME = "get scheduled delete time for an EdgeKV namespace"
RESCHEDULE_NAMESPACE_DELETE = "change the scheduled time of an EdgeKV namespace delete"
CANCEL_SCHEDULED_NAMESPACE_DELETE = "cancel the scheduled namespace delete"

MIN_RETENTION_SECONDS = 86400
MAX_RETENTION_SECONDS = 315360000


class NamespaceNetwork(str, Enum):
    STAGING = "staging"
    PRODUCTION = "production"


# -- Rules -------------------------------------------------------------------

def validate_network(network: object) -> Optional[str]:
    return required(network) or one_of(network, list(NamespaceNetwork))


def validate_name(name: str) -> Optional[str]:
    return required(name) or length_between(name, 1, 32)


def validate_retention(retention: Optional[int]) -> Optional[str]:
    """Zero disables expiry; anything else must fall inside the allowed window."""
    if retention is None:
        return BLANK
    if (retention < MIN_RETENTION_SECONDS and retention != 0) or retention > MAX_RETENTION_SECONDS:
        return (
            "a non zero value specified for retention period cannot be less than "
            f"{MIN_RETENTION_SECONDS} or more than {MAX_RETENTION_SECONDS}"
        )
    return None


def validate_group_id(group_id: Optional[int]) -> Optional[str]:
    if group_id is None:
        return BLANK
    if group_id < 0:
        return "cannot be less than 0"
    return None


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Namespace(WireModel):
    name: str = wire("namespace", "")
    geo_location: str = wire("geoLocation", "", omitempty=True)
    retention: Optional[int] = wire("retentionInSeconds", omitempty=True)
    group_id: Optional[int] = wire("groupId", omitempty=True)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("name", validate_name(self.name))
        errors.add("retention", validate_retention(self.retention))
        errors.add("group_id", validate_group_id(self.group_id))
        return errors


@dataclass
class UpdateNamespace(WireModel):
    """Update body. Retention and group are always sent, even when null."""

    name: str = wire("namespace", "")
    retention: Optional[int] = wire("retentionInSeconds")
    group_id: Optional[int] = wire("groupId")

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("name", validate_name(self.name))
        errors.add("retention", validate_retention(self.retention))
        errors.add("group_id", validate_group_id(self.group_id))
        return errors


@dataclass
class ListEdgeKVNamespacesResponse(WireModel):
    namespaces: List[Namespace] = wire("namespaces", default_factory=list)


@dataclass
class DeleteEdgeKVNamespacesResponse(WireModel):
    scheduled_delete_time: Optional[datetime] = wire("scheduledDeleteTime")


@dataclass
class ScheduledDeleteTimeRequest(WireModel):
    scheduled_delete_time: Optional[datetime] = wire("scheduledDeleteTime")


@dataclass
class ScheduledDeleteTimeResponse(WireModel):
    scheduled_delete_time: Optional[datetime] = wire("scheduledDeleteTime")
    retry_after_header: str = ""


RescheduleNamespaceDeleteResponse = ScheduledDeleteTimeResponse


@dataclass
class ListEdgeKVNamespacesRequest:
    network: NamespaceNetwork = ""  # type: ignore[assignment]
    details: bool = False

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("network", validate_network(self.network))
        return errors


@dataclass
class GetEdgeKVNamespaceRequest:
    network: NamespaceNetwork = ""  # type: ignore[assignment]
    name: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("network", validate_network(self.network))
        errors.add("name", validate_name(self.name))
        return errors

    @property
    def path(self) -> str:
        return f"/edgekv/v1/networks/{segment(self.network)}/namespaces/{segment(self.name)}"


GetScheduledDeleteTimeRequest = GetEdgeKVNamespaceRequest
CancelScheduledNamespaceDeleteRequest = GetEdgeKVNamespaceRequest


@dataclass
class DeleteEdgeKVNamespaceRequest(GetEdgeKVNamespaceRequest):
    sync: bool = False


@dataclass
class RescheduleNamespaceDeleteRequest(GetEdgeKVNamespaceRequest):
    body: Optional[ScheduledDeleteTimeRequest] = None

    def validate(self) -> ValidationErrors:
        errors = super().validate()
        if self.body is None:
            errors.add("body", BLANK)
        else:
            errors.add("body", required(self.body.scheduled_delete_time))
        return errors


@dataclass
class CreateEdgeKVNamespaceRequest:
    network: NamespaceNetwork = ""  # type: ignore[assignment]
    namespace: Namespace = field(default_factory=Namespace)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("network", validate_network(self.network))
        errors.update(self.namespace.validate())
        return errors


@dataclass
class UpdateEdgeKVNamespaceRequest:
    network: NamespaceNetwork = ""  # type: ignore[assignment]
    namespace: UpdateNamespace = field(default_factory=UpdateNamespace)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("network", validate_network(self.network))
        errors.update(self.namespace.validate())
        return errors


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def _namespaces_path(network: object) -> str:
    return f"/edgekv/v1/networks/{segment(network)}/namespaces"


class EdgeKVNamespaceOperations(ResourceOperations):
    """EdgeKV namespaces and their scheduled deletes."""

    async def list_edgekv_namespaces(
        self, request: ListEdgeKVNamespacesRequest
    ) -> ListEdgeKVNamespacesResponse:
        """List namespaces on a network.

        Args:
            request: Network to list; set ``details`` to include retention and
                group for each namespace.

        Returns:
            ListEdgeKVNamespacesResponse
        """
        self._validate(LIST_NAMESPACES, request)
        params = {"details": "on"} if request.details else None
        req = SDKRequest(method="GET", path=_namespaces_path(request.network), params=params)
        resp = await self._execute(LIST_NAMESPACES, req, expected_status=200)
        return self._decode(LIST_NAMESPACES, resp, ListEdgeKVNamespacesResponse)

    async def get_edgekv_namespace(self, request: GetEdgeKVNamespaceRequest) -> Namespace:
        self._validate(GET_NAMESPACE, request)
        req = SDKRequest(method="GET", path=request.path)
        resp = await self._execute(GET_NAMESPACE, req, expected_status=200)
        return self._decode(GET_NAMESPACE, resp, Namespace)

    async def create_edgekv_namespace(self, request: CreateEdgeKVNamespaceRequest) -> Namespace:
        """Create a namespace on a network."""
        self._validate(CREATE_NAMESPACE, request)
        req = SDKRequest(
            method="POST",
            path=_namespaces_path(request.network),
            body=request.namespace.to_dict(),
        )
        resp = await self._execute(CREATE_NAMESPACE, req, expected_status=200)
        return self._decode(CREATE_NAMESPACE, resp, Namespace)

    async def update_edgekv_namespace(self, request: UpdateEdgeKVNamespaceRequest) -> Namespace:
        """Update retention or group of an existing namespace."""
        self._validate(UPDATE_NAMESPACE, request)
        req = SDKRequest(
            method="PUT",
            path=f"{_namespaces_path(request.network)}/{segment(request.namespace.name)}",
            body=request.namespace.to_dict(),
        )
        resp = await self._execute(UPDATE_NAMESPACE, req, expected_status=200)
        return self._decode(UPDATE_NAMESPACE, resp, Namespace)

    async def delete_edgekv_namespace(
        self, request: DeleteEdgeKVNamespaceRequest
    ) -> DeleteEdgeKVNamespacesResponse:
        """Delete a namespace.

        With ``sync`` set the delete happens immediately and the API answers
        200; otherwise the delete is scheduled and the API answers 202 with the
        scheduled time.
        """
        self._validate(DELETE_NAMESPACE, request)
        params = {"sync": "true"} if request.sync else None
        req = SDKRequest(method="DELETE", path=request.path, params=params)
        expected = 200 if request.sync else 202
        resp = await self._execute(DELETE_NAMESPACE, req, expected_status=expected)
        if not resp.content.strip():
            return DeleteEdgeKVNamespacesResponse()
        return self._decode(DELETE_NAMESPACE, resp, DeleteEdgeKVNamespacesResponse)

    async def get_namespace_scheduled_delete_time(
        self, request: GetScheduledDeleteTimeRequest
    ) -> ScheduledDeleteTimeResponse:
        """Get the time a namespace is scheduled to be deleted at."""
        self._validate(GET_SCHEDULED_DELETE_TIME, request)
        req = SDKRequest(method="GET", path=f"{request.path}/status/scheduled-delete")
        resp = await self._execute(GET_SCHEDULED_DELETE_TIME, req, expected_status=200)
        result = self._decode(GET_SCHEDULED_DELETE_TIME, resp, ScheduledDeleteTimeResponse)
        result.retry_after_header = resp.header("Retry-After")
        return result

    async def reschedule_namespace_delete(
        self, request: RescheduleNamespaceDeleteRequest
    ) -> RescheduleNamespaceDeleteResponse:
        """Move a scheduled namespace delete to a different time."""
        self._validate(RESCHEDULE_NAMESPACE_DELETE, request)
        req = SDKRequest(
            method="PUT",
            path=f"{request.path}/status/scheduled-delete",
            body=request.body.to_dict(),
        )
        resp = await self._execute(RESCHEDULE_NAMESPACE_DELETE, req, expected_status=200)
        result = self._decode(RESCHEDULE_NAMESPACE_DELETE, resp, RescheduleNamespaceDeleteResponse)
        result.retry_after_header = resp.header("Retry-After")
        return result

    async def cancel_scheduled_namespace_delete(
        self, request: CancelScheduledNamespaceDeleteRequest
    ) -> None:
        """Cancel a scheduled namespace delete."""
        self._validate(CANCEL_SCHEDULED_NAMESPACE_DELETE, request)
        req = SDKRequest(method="DELETE", path=f"{request.path}/status/scheduled-delete")
        await self._execute(CANCEL_SCHEDULED_NAMESPACE_DELETE, req, expected_status=204)
