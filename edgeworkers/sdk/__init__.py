"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

EdgeWorkers SDK: public API surface.

Quick start::

    from edgeworkers.sdk import EdgeWorkersClient
    async with EdgeWorkersClient.from_edgerc() as client:
        tiers = await client.resource_tiers.list_resource_tiers(
            ListResourceTiersRequest(contract_id="1-ABC")
        )

Advanced::

    from edgeworkers.sdk import EdgeWorkersBuilder
    client = EdgeWorkersBuilder().set_edgerc(section="ew").set_timeout(10).build()
"""

# -- Client ---------------------------------------------------------------

from edgeworkers.sdk.client import EdgeWorkersBuilder, EdgeWorkersClient
from edgeworkers.sdk.mocks import MockEdgeWorkersClient
from edgeworkers.sdk.hooks import HookRegistry
from edgeworkers.sdk.edgegrid import EdgeGridAuth
from edgeworkers.sdk.errors import APIError, ProblemDetail
from edgeworkers.sdk.models import Bundle
from edgeworkers.sdk.validation import ValidationErrors
from edgeworkers.sdk.adapters import (
    BaseAdapter,
    HttpAdapter,
    MockAdapter,
    SDKRequest,
    SDKResponse,
)
from edgeworkers.exceptions import (
    OperationError,
    RequestFailedError,
    ResponseDecodeError,
    SDKConfigurationError,
    StructValidationError,
)

# -- Operations -----------------------------------------------------------

from edgeworkers.sdk.activations import (
    ActivateVersion,
    ActivateVersionRequest,
    Activation,
    ActivationNetwork,
    ActivationOperations,
    CancelActivationRequest,
    GetActivationRequest,
    ListActivationsRequest,
    ListActivationsResponse,
)
from edgeworkers.sdk.contracts import ContractOperations, ListContractsResponse
from edgeworkers.sdk.deactivations import (
    DeactivateVersion,
    DeactivateVersionRequest,
    Deactivation,
    DeactivationOperations,
    GetDeactivationRequest,
    ListDeactivationsRequest,
    ListDeactivationsResponse,
)
from edgeworkers.sdk.edgekv_access_tokens import (
    CreateEdgeKVAccessTokenRequest,
    CreateEdgeKVAccessTokenResponse,
    DeleteEdgeKVAccessTokenRequest,
    DeleteEdgeKVAccessTokenResponse,
    EdgeKVAccessToken,
    EdgeKVAccessTokenOperations,
    GetEdgeKVAccessTokenRequest,
    ListEdgeKVAccessTokensRequest,
    ListEdgeKVAccessTokensResponse,
    Permission,
)
from edgeworkers.sdk.edgekv_groups import EdgeKVGroupOperations, ListGroupsWithinNamespaceRequest
from edgeworkers.sdk.edgekv_initialize import EdgeKVInitializationStatus, EdgeKVInitializeOperations
from edgeworkers.sdk.edgekv_items import (
    DeleteItemRequest,
    EdgeKVItemOperations,
    GetItemRequest,
    ItemNetwork,
    ListItemsRequest,
    UpsertItemRequest,
)
from edgeworkers.sdk.edgekv_namespaces import (
    CancelScheduledNamespaceDeleteRequest,
    CreateEdgeKVNamespaceRequest,
    DeleteEdgeKVNamespaceRequest,
    DeleteEdgeKVNamespacesResponse,
    EdgeKVNamespaceOperations,
    GetEdgeKVNamespaceRequest,
    GetScheduledDeleteTimeRequest,
    ListEdgeKVNamespacesRequest,
    ListEdgeKVNamespacesResponse,
    Namespace,
    NamespaceNetwork,
    RescheduleNamespaceDeleteRequest,
    RescheduleNamespaceDeleteResponse,
    ScheduledDeleteTimeRequest,
    ScheduledDeleteTimeResponse,
    UpdateEdgeKVNamespaceRequest,
    UpdateNamespace,
)
from edgeworkers.sdk.edgeworker_ids import (
    CloneEdgeWorkerIDBody,
    CloneEdgeWorkerIDRequest,
    CreateEdgeWorkerIDRequest,
    DeleteEdgeWorkerIDRequest,
    EdgeWorkerID,
    EdgeWorkerIDBody,
    EdgeWorkerIDOperations,
    GetEdgeWorkerIDRequest,
    ListEdgeWorkersIDRequest,
    ListEdgeWorkersIDResponse,
    UpdateEdgeWorkerIDRequest,
)
from edgeworkers.sdk.edgeworker_versions import (
    CreateEdgeWorkerVersionRequest,
    DeleteEdgeWorkerVersionRequest,
    EdgeWorkerVersion,
    EdgeWorkerVersionOperations,
    GetEdgeWorkerVersionContentRequest,
    GetEdgeWorkerVersionRequest,
    ListEdgeWorkerVersionsRequest,
    ListEdgeWorkerVersionsResponse,
)
from edgeworkers.sdk.permission_groups import (
    GetPermissionGroupRequest,
    ListPermissionGroupsResponse,
    PermissionGroup,
    PermissionGroupOperations,
)
from edgeworkers.sdk.properties import (
    ListPropertiesRequest,
    ListPropertiesResponse,
    Property,
    PropertyOperations,
)
from edgeworkers.sdk.reports import (
    EventHandler,
    GetReportRequest,
    GetReportResponse,
    GetSummaryReportRequest,
    GetSummaryReportResponse,
    ListReportsResponse,
    ReportOperations,
    ReportStatus,
)
from edgeworkers.sdk.resource_tiers import (
    GetResourceTierRequest,
    ListResourceTiersRequest,
    ListResourceTiersResponse,
    ResourceTier,
    ResourceTierOperations,
)
from edgeworkers.sdk.secure_tokens import (
    CreateSecureTokenRequest,
    CreateSecureTokenResponse,
    SecureTokenOperations,
)
from edgeworkers.sdk.validations import (
    ValidateBundleRequest,
    ValidateBundleResponse,
    ValidationOperations,
)

__all__ = [
    # client
    "EdgeWorkersClient",
    "EdgeWorkersBuilder",
    "MockEdgeWorkersClient",
    # infra
    "HookRegistry",
    "EdgeGridAuth",
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "SDKRequest",
    "SDKResponse",
    "Bundle",
    "ValidationErrors",
    # errors
    "APIError",
    "ProblemDetail",
    "OperationError",
    "RequestFailedError",
    "ResponseDecodeError",
    "SDKConfigurationError",
    "StructValidationError",
    # activations
    "ActivateVersion",
    "ActivateVersionRequest",
    "Activation",
    "ActivationNetwork",
    "ActivationOperations",
    "CancelActivationRequest",
    "GetActivationRequest",
    "ListActivationsRequest",
    "ListActivationsResponse",
    # contracts
    "ContractOperations",
    "ListContractsResponse",
    # deactivations
    "DeactivateVersion",
    "DeactivateVersionRequest",
    "Deactivation",
    "DeactivationOperations",
    "GetDeactivationRequest",
    "ListDeactivationsRequest",
    "ListDeactivationsResponse",
    # edgekv access tokens
    "CreateEdgeKVAccessTokenRequest",
    "CreateEdgeKVAccessTokenResponse",
    "DeleteEdgeKVAccessTokenRequest",
    "DeleteEdgeKVAccessTokenResponse",
    "EdgeKVAccessToken",
    "EdgeKVAccessTokenOperations",
    "GetEdgeKVAccessTokenRequest",
    "ListEdgeKVAccessTokensRequest",
    "ListEdgeKVAccessTokensResponse",
    "Permission",
    # edgekv groups / initialize / items
    "EdgeKVGroupOperations",
    "ListGroupsWithinNamespaceRequest",
    "EdgeKVInitializationStatus",
    "EdgeKVInitializeOperations",
    "DeleteItemRequest",
    "EdgeKVItemOperations",
    "GetItemRequest",
    "ItemNetwork",
    "ListItemsRequest",
    "UpsertItemRequest",
    # edgekv namespaces
    "CancelScheduledNamespaceDeleteRequest",
    "CreateEdgeKVNamespaceRequest",
    "DeleteEdgeKVNamespaceRequest",
    "DeleteEdgeKVNamespacesResponse",
    "EdgeKVNamespaceOperations",
    "GetEdgeKVNamespaceRequest",
    "GetScheduledDeleteTimeRequest",
    "ListEdgeKVNamespacesRequest",
    "ListEdgeKVNamespacesResponse",
    "Namespace",
    "NamespaceNetwork",
    "RescheduleNamespaceDeleteRequest",
    "RescheduleNamespaceDeleteResponse",
    "ScheduledDeleteTimeRequest",
    "ScheduledDeleteTimeResponse",
    "UpdateEdgeKVNamespaceRequest",
    "UpdateNamespace",
    # edgeworker ids
    "CloneEdgeWorkerIDBody",
    "CloneEdgeWorkerIDRequest",
    "CreateEdgeWorkerIDRequest",
    "DeleteEdgeWorkerIDRequest",
    "EdgeWorkerID",
    "EdgeWorkerIDBody",
    "EdgeWorkerIDOperations",
    "GetEdgeWorkerIDRequest",
    "ListEdgeWorkersIDRequest",
    "ListEdgeWorkersIDResponse",
    "UpdateEdgeWorkerIDRequest",
    # edgeworker versions
    "CreateEdgeWorkerVersionRequest",
    "DeleteEdgeWorkerVersionRequest",
    "EdgeWorkerVersion",
    "EdgeWorkerVersionOperations",
    "GetEdgeWorkerVersionContentRequest",
    "GetEdgeWorkerVersionRequest",
    "ListEdgeWorkerVersionsRequest",
    "ListEdgeWorkerVersionsResponse",
    # permission groups
    "GetPermissionGroupRequest",
    "ListPermissionGroupsResponse",
    "PermissionGroup",
    "PermissionGroupOperations",
    # properties
    "ListPropertiesRequest",
    "ListPropertiesResponse",
    "Property",
    "PropertyOperations",
    # reports
    "EventHandler",
    "GetReportRequest",
    "GetReportResponse",
    "GetSummaryReportRequest",
    "GetSummaryReportResponse",
    "ListReportsResponse",
    "ReportOperations",
    "ReportStatus",
    # resource tiers
    "GetResourceTierRequest",
    "ListResourceTiersRequest",
    "ListResourceTiersResponse",
    "ResourceTier",
    "ResourceTierOperations",
    # secure tokens
    "CreateSecureTokenRequest",
    "CreateSecureTokenResponse",
    "SecureTokenOperations",
    # validations
    "ValidateBundleRequest",
    "ValidateBundleResponse",
    "ValidationOperations",
]
