"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Mock EdgeWorkers client for testing code that uses the SDK.

Every resource property is an autospec of the real operations class, so
method names and signatures are checked and every coroutine is an
``AsyncMock``::

    client = MockEdgeWorkersClient()
    client.activations.get_activation.return_value = Activation(activation_id=1)
    await code_under_test(client)
    client.activations.get_activation.assert_awaited_once()
"""

from __future__ import annotations

from typing import Any, Dict
from unittest.mock import create_autospec

from edgeworkers.sdk.activations import ActivationOperations
from edgeworkers.sdk.contracts import ContractOperations
from edgeworkers.sdk.deactivations import DeactivationOperations
from edgeworkers.sdk.edgekv_access_tokens import EdgeKVAccessTokenOperations
from edgeworkers.sdk.edgekv_groups import EdgeKVGroupOperations
from edgeworkers.sdk.edgekv_initialize import EdgeKVInitializeOperations
from edgeworkers.sdk.edgekv_items import EdgeKVItemOperations
from edgeworkers.sdk.edgekv_namespaces import EdgeKVNamespaceOperations
from edgeworkers.sdk.edgeworker_ids import EdgeWorkerIDOperations
from edgeworkers.sdk.edgeworker_versions import EdgeWorkerVersionOperations
from edgeworkers.sdk.hooks import HookRegistry
from edgeworkers.sdk.permission_groups import PermissionGroupOperations
from edgeworkers.sdk.properties import PropertyOperations
from edgeworkers.sdk.reports import ReportOperations
from edgeworkers.sdk.resource_tiers import ResourceTierOperations
from edgeworkers.sdk.secure_tokens import SecureTokenOperations
from edgeworkers.sdk.validations import ValidationOperations

RESOURCE_OPERATIONS: Dict[str, type] = {
    "activations": ActivationOperations,
    "contracts": ContractOperations,
    "deactivations": DeactivationOperations,
    "edgekv_access_tokens": EdgeKVAccessTokenOperations,
    "edgekv_initialize": EdgeKVInitializeOperations,
    "edgekv_items": EdgeKVItemOperations,
    "edgekv_namespaces": EdgeKVNamespaceOperations,
    "edgekv_groups": EdgeKVGroupOperations,
    "edgeworker_ids": EdgeWorkerIDOperations,
    "edgeworker_versions": EdgeWorkerVersionOperations,
    "permission_groups": PermissionGroupOperations,
    "properties": PropertyOperations,
    "reports": ReportOperations,
    "resource_tiers": ResourceTierOperations,
    "secure_tokens": SecureTokenOperations,
    "validations": ValidationOperations,
}


class MockEdgeWorkersClient:
    """Drop-in stand-in for ``EdgeWorkersClient`` with no transport."""

    def __init__(self) -> None:
        self.hooks = HookRegistry()
        self.closed = False
        for name, ops_cls in RESOURCE_OPERATIONS.items():
            setattr(self, name, create_autospec(ops_cls, instance=True))

    def reset_mock(self) -> None:
        """Clear recorded calls and configured return values on every resource."""
        for name in RESOURCE_OPERATIONS:
            getattr(self, name).reset_mock(return_value=True, side_effect=True)

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> MockEdgeWorkersClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
