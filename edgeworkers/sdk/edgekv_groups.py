"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeKV Group Operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.edgekv_namespaces import NamespaceNetwork, validate_network
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, required

LIST_GROUPS = "list groups within namespace"


@dataclass
class ListGroupsWithinNamespaceRequest:
    network: NamespaceNetwork = ""  # type: ignore[assignment]
    namespace_id: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("network", validate_network(self.network))
        errors.add("namespace_id", required(self.namespace_id))
        return errors


class EdgeKVGroupOperations(ResourceOperations):
    async def list_groups_within_namespace(
        self, request: ListGroupsWithinNamespaceRequest
    ) -> List[str]:
        """List group ids created when items were written to a namespace."""
        self._validate(LIST_GROUPS, request)
        req = SDKRequest(
            method="GET",
            path=(
                f"/edgekv/v1/networks/{segment(request.network)}"
                f"/namespaces/{segment(request.namespace_id)}/groups"
            ),
        )
        resp = await self._execute(LIST_GROUPS, req, expected_status=200)
        return self._decode(LIST_GROUPS, resp, List[str])
