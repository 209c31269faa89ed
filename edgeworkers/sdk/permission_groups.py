"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Permission Group Operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, required

GET_PERMISSION_GROUP = "get a permission group"
LIST_PERMISSION_GROUPS = "list permission groups"


@dataclass
class PermissionGroup(WireModel):
    id: int = wire("groupId", 0)
    name: str = wire("groupName", "")
    capabilities: List[str] = wire("capabilities", default_factory=list)


@dataclass
class ListPermissionGroupsResponse(WireModel):
    permission_groups: List[PermissionGroup] = wire("groups", default_factory=list)


@dataclass
class GetPermissionGroupRequest:
    group_id: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("group_id", required(self.group_id))
        return errors


class PermissionGroupOperations(ResourceOperations):
    async def get_permission_group(self, request: GetPermissionGroupRequest) -> PermissionGroup:
        """Get the capabilities enabled within a group."""
        self._validate(GET_PERMISSION_GROUP, request)
        req = SDKRequest(method="GET", path=f"/edgeworkers/v1/groups/{segment(request.group_id)}")
        resp = await self._execute(GET_PERMISSION_GROUP, req, expected_status=200)
        return self._decode(GET_PERMISSION_GROUP, resp, PermissionGroup)

    async def list_permission_groups(self) -> ListPermissionGroupsResponse:
        """List groups and their permission capabilities."""
        req = SDKRequest(method="GET", path="/edgeworkers/v1/groups")
        resp = await self._execute(LIST_PERMISSION_GROUPS, req, expected_status=200)
        return self._decode(LIST_PERMISSION_GROUPS, resp, ListPermissionGroupsResponse)
