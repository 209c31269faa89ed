"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeWorker Version Operations.

A version is an immutable code bundle uploaded for an EdgeWorker ID. Bundles
travel as raw ``application/gzip`` bodies in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import Bundle, WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, not_none, required

GET_VERSION = "get an EdgeWorker Version"
LIST_VERSIONS = "list EdgeWorkers Versions"
GET_VERSION_CONTENT = "get an EdgeWorker Version Content Bundle"
CREATE_VERSION = "create an EdgeWorker Version"
DELETE_VERSION = "delete an EdgeWorker Version"

GZIP = "application/gzip"


@dataclass
class EdgeWorkerVersion(WireModel):
    edgeworker_id: int = wire("edgeWorkerId", 0)
    version: str = wire("version", "")
    account_id: str = wire("accountId", "")
    checksum: str = wire("checksum", "")
    sequence_number: int = wire("sequenceNumber", 0)
    created_by: str = wire("createdBy", "")
    created_time: str = wire("createdTime", "")


@dataclass
class ListEdgeWorkerVersionsResponse(WireModel):
    edgeworker_versions: List[EdgeWorkerVersion] = wire("versions", default_factory=list)


@dataclass
class EdgeWorkerVersionRequest:
    """Identifies one version of an EdgeWorker."""

    edgeworker_id: int = 0
    version: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.add("version", required(self.version))
        return errors

    @property
    def path(self) -> str:
        return f"/edgeworkers/v1/ids/{self.edgeworker_id}/versions/{segment(self.version)}"


GetEdgeWorkerVersionRequest = EdgeWorkerVersionRequest
GetEdgeWorkerVersionContentRequest = EdgeWorkerVersionRequest
DeleteEdgeWorkerVersionRequest = EdgeWorkerVersionRequest


@dataclass
class ListEdgeWorkerVersionsRequest:
    edgeworker_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        return errors


@dataclass
class CreateEdgeWorkerVersionRequest:
    edgeworker_id: int = 0
    content_bundle: Optional[Bundle] = None

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("edgeworker_id", required(self.edgeworker_id))
        errors.add("content_bundle", not_none(self.content_bundle))
        return errors


class EdgeWorkerVersionOperations(ResourceOperations):
    """EdgeWorker versions and their code bundles."""

    async def get_edgeworker_version(self, request: GetEdgeWorkerVersionRequest) -> EdgeWorkerVersion:
        self._validate(GET_VERSION, request)
        req = SDKRequest(method="GET", path=request.path)
        resp = await self._execute(GET_VERSION, req, expected_status=200)
        return self._decode(GET_VERSION, resp, EdgeWorkerVersion)

    async def list_edgeworker_versions(
        self, request: ListEdgeWorkerVersionsRequest
    ) -> ListEdgeWorkerVersionsResponse:
        self._validate(LIST_VERSIONS, request)
        req = SDKRequest(method="GET", path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/versions")
        resp = await self._execute(LIST_VERSIONS, req, expected_status=200)
        return self._decode(LIST_VERSIONS, resp, ListEdgeWorkerVersionsResponse)

    async def get_edgeworker_version_content(
        self, request: GetEdgeWorkerVersionContentRequest
    ) -> Bundle:
        """Download the gzip code bundle of a version.

        Returns:
            Bundle wrapping the raw response bytes.
        """
        self._validate(GET_VERSION_CONTENT, request)
        req = SDKRequest(method="GET", path=f"{request.path}/content", headers={"Accept": GZIP})
        resp = await self._execute(GET_VERSION_CONTENT, req, expected_status=200)
        return Bundle(resp.content)

    async def create_edgeworker_version(
        self, request: CreateEdgeWorkerVersionRequest
    ) -> EdgeWorkerVersion:
        """Upload a code bundle as a new version."""
        self._validate(CREATE_VERSION, request)
        req = SDKRequest(
            method="POST",
            path=f"/edgeworkers/v1/ids/{request.edgeworker_id}/versions",
            headers={"Content-Type": GZIP},
            content=request.content_bundle.read(),
        )
        resp = await self._execute(CREATE_VERSION, req, expected_status=201)
        return self._decode(CREATE_VERSION, resp, EdgeWorkerVersion)

    async def delete_edgeworker_version(self, request: DeleteEdgeWorkerVersionRequest) -> None:
        self._validate(DELETE_VERSION, request)
        req = SDKRequest(method="DELETE", path=request.path)
        await self._execute(DELETE_VERSION, req, expected_status=204)
