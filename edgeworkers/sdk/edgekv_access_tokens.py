"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeKV Access Token Operations.

Access tokens grant EdgeWorker code read, write or delete permissions on
specific EdgeKV namespaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

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

CREATE_ACCESS_TOKEN = "create an EdgeKV access token"
GET_ACCESS_TOKEN = "get an EdgeKV access token"
LIST_ACCESS_TOKENS = "list EdgeKV access tokens"
DELETE_ACCESS_TOKEN = "delete an EdgeKV access token"

ALLOW_FLAG_MESSAGE = "at least one of allow_on_production or allow_on_staging has to be provided"


class Permission(str, Enum):
    READ = "r"
    WRITE = "w"
    DELETE = "d"


NamespacePermissions = Dict[str, List[Permission]]


def validate_token_name(name: str) -> Optional[str]:
    return required(name) or length_between(name, 1, 32)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class CreateEdgeKVAccessTokenRequest(WireModel):
    allow_on_production: bool = wire("allowOnProduction", False)
    allow_on_staging: bool = wire("allowOnStaging", False)
    name: str = wire("name", "")
    namespace_permissions: NamespacePermissions = wire("namespacePermissions", default_factory=dict)
    restrict_to_edgeworker_ids: List[str] = wire("restrictToEdgeWorkerIds", default_factory=list)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        if not self.allow_on_production and not self.allow_on_staging:
            errors.add("allow_on_production", ALLOW_FLAG_MESSAGE)
            errors.add("allow_on_staging", ALLOW_FLAG_MESSAGE)
        errors.add("name", validate_token_name(self.name))

        if not self.namespace_permissions:
            errors.add("namespace_permissions", BLANK)
            return errors
        for namespace, permissions in self.namespace_permissions.items():
            if not namespace:
                errors.add("namespace_permissions.names", "namespace name cannot be blank")
                continue
            key = f"namespace_permissions.{namespace}"
            if not permissions:
                errors.add(key, BLANK)
                continue
            for permission in permissions:
                message = required(permission) or one_of(permission, list(Permission))
                if message:
                    errors.add(key, message)
                    break
        return errors


@dataclass
class CreateEdgeKVAccessTokenResponse(WireModel):
    allow_on_production: bool = wire("allowOnProduction", False)
    allow_on_staging: bool = wire("allowOnStaging", False)
    cpcode: str = wire("cpcode", "")
    expiry: str = wire("expiry", "")
    issue_date: str = wire("issueDate", "")
    latest_refresh_date: Optional[str] = wire("latestRefreshDate")
    name: str = wire("name", "")
    namespace_permissions: NamespacePermissions = wire("namespacePermissions", default_factory=dict)
    next_scheduled_refresh_date: str = wire("nextScheduledRefreshDate", "")
    restrict_to_edgeworker_ids: List[str] = wire("restrictToEdgeWorkerIds", default_factory=list)
    token_activation_status: str = wire("tokenActivationStatus", "")
    uuid: str = wire("uuid", "")


GetEdgeKVAccessTokenResponse = CreateEdgeKVAccessTokenResponse


@dataclass
class EdgeKVAccessToken(WireModel):
    expiry: str = wire("expiry", "")
    name: str = wire("name", "")
    uuid: str = wire("uuid", "")
    token_activation_status: Optional[str] = wire("tokenActivationStatus")
    issue_date: Optional[str] = wire("issueDate")
    latest_refresh_date: Optional[str] = wire("latestRefreshDate")
    next_scheduled_refresh_date: Optional[str] = wire("nextScheduledRefreshDate")


@dataclass
class ListEdgeKVAccessTokensResponse(WireModel):
    tokens: List[EdgeKVAccessToken] = wire("tokens", default_factory=list)


@dataclass
class DeleteEdgeKVAccessTokenResponse(WireModel):
    name: str = wire("name", "")
    uuid: str = wire("uuid", "")


@dataclass
class GetEdgeKVAccessTokenRequest:
    token_name: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("token_name", validate_token_name(self.token_name))
        return errors


DeleteEdgeKVAccessTokenRequest = GetEdgeKVAccessTokenRequest


@dataclass
class ListEdgeKVAccessTokensRequest:
    include_expired: bool = False

    def validate(self) -> ValidationErrors:
        return ValidationErrors()


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class EdgeKVAccessTokenOperations(ResourceOperations):
    """EdgeKV access tokens."""

    async def create_edgekv_access_token(
        self, request: CreateEdgeKVAccessTokenRequest
    ) -> CreateEdgeKVAccessTokenResponse:
        """Generate an EdgeKV access token."""
        self._validate(CREATE_ACCESS_TOKEN, request)
        req = SDKRequest(method="POST", path="/edgekv/v1/tokens", body=request.to_dict())
        resp = await self._execute(CREATE_ACCESS_TOKEN, req, expected_status=200)
        return self._decode(CREATE_ACCESS_TOKEN, resp, CreateEdgeKVAccessTokenResponse)

    async def get_edgekv_access_token(
        self, request: GetEdgeKVAccessTokenRequest
    ) -> GetEdgeKVAccessTokenResponse:
        self._validate(GET_ACCESS_TOKEN, request)
        req = SDKRequest(method="GET", path=f"/edgekv/v1/tokens/{segment(request.token_name)}")
        resp = await self._execute(GET_ACCESS_TOKEN, req, expected_status=200)
        return self._decode(GET_ACCESS_TOKEN, resp, GetEdgeKVAccessTokenResponse)

    async def list_edgekv_access_tokens(
        self, request: Optional[ListEdgeKVAccessTokensRequest] = None
    ) -> ListEdgeKVAccessTokensResponse:
        """List access tokens; expired ones only when ``include_expired`` is set."""
        request = request or ListEdgeKVAccessTokensRequest()
        self._validate(LIST_ACCESS_TOKENS, request)
        params = {"includeExpired": "true"} if request.include_expired else None
        req = SDKRequest(method="GET", path="/edgekv/v1/tokens", params=params)
        resp = await self._execute(LIST_ACCESS_TOKENS, req, expected_status=200)
        return self._decode(LIST_ACCESS_TOKENS, resp, ListEdgeKVAccessTokensResponse)

    async def delete_edgekv_access_token(
        self, request: DeleteEdgeKVAccessTokenRequest
    ) -> DeleteEdgeKVAccessTokenResponse:
        """Revoke an access token."""
        self._validate(DELETE_ACCESS_TOKEN, request)
        req = SDKRequest(method="DELETE", path=f"/edgekv/v1/tokens/{segment(request.token_name)}")
        resp = await self._execute(DELETE_ACCESS_TOKEN, req, expected_status=200)
        return self._decode(DELETE_ACCESS_TOKEN, resp, DeleteEdgeKVAccessTokenResponse)
