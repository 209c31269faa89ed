"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Tests for EdgeWorker ID, version, property, resource tier, contract and
permission group operations.
"""

import pytest

from edgeworkers.exceptions import StructValidationError
from edgeworkers.sdk.adapters.base import SDKResponse
from edgeworkers.sdk.contracts import ContractOperations
from edgeworkers.sdk.edgeworker_ids import (
    CloneEdgeWorkerIDBody,
    CloneEdgeWorkerIDRequest,
    CreateEdgeWorkerIDRequest,
    DeleteEdgeWorkerIDRequest,
    EdgeWorkerIDBody,
    EdgeWorkerIDOperations,
    GetEdgeWorkerIDRequest,
    ListEdgeWorkersIDRequest,
    UpdateEdgeWorkerIDRequest,
)
from edgeworkers.sdk.edgeworker_versions import (
    CreateEdgeWorkerVersionRequest,
    DeleteEdgeWorkerVersionRequest,
    EdgeWorkerVersionOperations,
    GetEdgeWorkerVersionContentRequest,
    GetEdgeWorkerVersionRequest,
    ListEdgeWorkerVersionsRequest,
)
from edgeworkers.sdk.errors import APIError
from edgeworkers.sdk.models import Bundle
from edgeworkers.sdk.permission_groups import (
    GetPermissionGroupRequest,
    PermissionGroupOperations,
)
from edgeworkers.sdk.properties import ListPropertiesRequest, PropertyOperations
from edgeworkers.sdk.resource_tiers import (
    GetResourceTierRequest,
    ListResourceTiersRequest,
    ResourceTierOperations,
)

EDGEWORKER = {
    "edgeWorkerId": 42,
    "name": "Edgeworker",
    "accountId": "B-M-1KQK3WU",
    "groupId": 72297,
    "resourceTierId": 100,
    "createdBy": "jdoe",
    "createdTime": "2020-04-17T15:04:19Z",
    "lastModifiedBy": "jdoe",
    "lastModifiedTime": "2020-04-17T15:04:19Z",
}

VERSION = {
    "edgeWorkerId": 42,
    "version": "1.23",
    "accountId": "B-M-1KQK3WU",
    "checksum": "36b2b56dd6efb3bd06d3ed5d9b3a2b7a4bc2b5d0",
    "sequenceNumber": 3,
    "createdBy": "jdoe",
    "createdTime": "2020-04-17T15:04:19Z",
}


class TestEdgeWorkerIDs:
    @pytest.mark.asyncio
    async def test_get_edgeworker_id(self, mock_adapter):
        mock_adapter.add_response("GET", "/edgeworkers/v1/ids/42", SDKResponse(status_code=200, body=EDGEWORKER))
        result = await EdgeWorkerIDOperations(mock_adapter).get_edgeworker_id(GetEdgeWorkerIDRequest(edgeworker_id=42))
        assert result.group_id == 72297
        assert result.source_edgeworker_id == 0

    @pytest.mark.asyncio
    async def test_list_without_filters(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids",
            SDKResponse(status_code=200, body={"edgeWorkerIds": [EDGEWORKER]}),
        )
        result = await EdgeWorkerIDOperations(mock_adapter).list_edgeworkers_id()
        assert result.edgeworkers[0].name == "Edgeworker"
        assert mock_adapter.sent_requests[0].params is None

    @pytest.mark.asyncio
    async def test_list_with_filters(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids",
            SDKResponse(status_code=200, body={"edgeWorkerIds": []}),
        )
        await EdgeWorkerIDOperations(mock_adapter).list_edgeworkers_id(
            ListEdgeWorkersIDRequest(group_id=72297, resource_tier_id=100)
        )
        assert mock_adapter.sent_requests[0].params == {"groupId": "72297", "resourceTierId": "100"}

    @pytest.mark.asyncio
    async def test_create(self, mock_adapter):
        mock_adapter.add_response("POST", "/edgeworkers/v1/ids", SDKResponse(status_code=201, body=EDGEWORKER))

        await EdgeWorkerIDOperations(mock_adapter).create_edgeworker_id(
            CreateEdgeWorkerIDRequest(name="Edgeworker", group_id=72297, resource_tier_id=100)
        )

        assert mock_adapter.sent_requests[0].body == {
            "name": "Edgeworker", "groupId": 72297, "resourceTierId": 100,
        }

    @pytest.mark.asyncio
    async def test_create_validation(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await EdgeWorkerIDOperations(mock_adapter).create_edgeworker_id(CreateEdgeWorkerIDRequest())
        assert set(exc_info.value.errors) == {"name", "group_id", "resource_tier_id"}

    @pytest.mark.asyncio
    async def test_update(self, mock_adapter):
        mock_adapter.add_response(
            "PUT", "/edgeworkers/v1/ids/42",
            SDKResponse(status_code=200, body={**EDGEWORKER, "name": "Renamed"}),
        )
        result = await EdgeWorkerIDOperations(mock_adapter).update_edgeworker_id(UpdateEdgeWorkerIDRequest(
            edgeworker_id=42,
            body=EdgeWorkerIDBody(name="Renamed", group_id=72297, resource_tier_id=100),
        ))
        assert result.name == "Renamed"

    @pytest.mark.asyncio
    async def test_update_requires_id_and_body(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await EdgeWorkerIDOperations(mock_adapter).update_edgeworker_id(UpdateEdgeWorkerIDRequest())
        assert set(exc_info.value.errors) == {"edgeworker_id", "name", "group_id", "resource_tier_id"}

    @pytest.mark.asyncio
    async def test_clone(self, mock_adapter):
        mock_adapter.add_response(
            "POST", "/edgeworkers/v1/ids/42/clone",
            SDKResponse(status_code=200, body={**EDGEWORKER, "edgeWorkerId": 43, "sourceEdgeWorkerId": 42}),
        )

        result = await EdgeWorkerIDOperations(mock_adapter).clone_edgeworker_id(CloneEdgeWorkerIDRequest(
            edgeworker_id=42, body=CloneEdgeWorkerIDBody(resource_tier_id=200),
        ))

        assert result.source_edgeworker_id == 42
        assert mock_adapter.sent_requests[0].body == {"resourceTierId": 200}

    @pytest.mark.asyncio
    async def test_clone_with_name_and_group(self, mock_adapter):
        mock_adapter.add_response(
            "POST", "/edgeworkers/v1/ids/42/clone",
            SDKResponse(status_code=200, body={**EDGEWORKER, "edgeWorkerId": 43}),
        )

        await EdgeWorkerIDOperations(mock_adapter).clone_edgeworker_id(CloneEdgeWorkerIDRequest(
            edgeworker_id=42, body=CloneEdgeWorkerIDBody(name="copy", group_id=7, resource_tier_id=200),
        ))

        assert mock_adapter.sent_requests[0].body == {"name": "copy", "groupId": 7, "resourceTierId": 200}

    @pytest.mark.asyncio
    async def test_clone_requires_resource_tier(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await EdgeWorkerIDOperations(mock_adapter).clone_edgeworker_id(
                CloneEdgeWorkerIDRequest(edgeworker_id=42)
            )
        assert exc_info.value.errors == {"resource_tier_id": "cannot be blank"}

    @pytest.mark.asyncio
    async def test_delete(self, mock_adapter):
        mock_adapter.add_response("DELETE", "/edgeworkers/v1/ids/42", SDKResponse(status_code=204))
        result = await EdgeWorkerIDOperations(mock_adapter).delete_edgeworker_id(
            DeleteEdgeWorkerIDRequest(edgeworker_id=42)
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_delete_unexpected_status(self, mock_adapter):
        mock_adapter.add_response(
            "DELETE", "/edgeworkers/v1/ids/42",
            SDKResponse(status_code=403, body={"title": "Forbidden", "status": 403}),
        )
        with pytest.raises(APIError) as exc_info:
            await EdgeWorkerIDOperations(mock_adapter).delete_edgeworker_id(
                DeleteEdgeWorkerIDRequest(edgeworker_id=42)
            )
        assert exc_info.value.title == "Forbidden"


class TestEdgeWorkerVersions:
    @pytest.mark.asyncio
    async def test_get_version(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/versions/1.23",
            SDKResponse(status_code=200, body=VERSION),
        )
        result = await EdgeWorkerVersionOperations(mock_adapter).get_edgeworker_version(
            GetEdgeWorkerVersionRequest(edgeworker_id=42, version="1.23")
        )
        assert result.sequence_number == 3

    def test_version_escaped_in_path(self):
        request = GetEdgeWorkerVersionRequest(edgeworker_id=42, version="1/2")
        assert request.path == "/edgeworkers/v1/ids/42/versions/1%2F2"

    @pytest.mark.asyncio
    async def test_list_versions(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/versions",
            SDKResponse(status_code=200, body={"versions": [VERSION]}),
        )
        result = await EdgeWorkerVersionOperations(mock_adapter).list_edgeworker_versions(
            ListEdgeWorkerVersionsRequest(edgeworker_id=42)
        )
        assert result.edgeworker_versions[0].version == "1.23"

    @pytest.mark.asyncio
    async def test_get_content_returns_bundle(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/versions/1.23/content",
            SDKResponse(status_code=200, body=b"\x1f\x8b\x08\x00gzip"),
        )

        bundle = await EdgeWorkerVersionOperations(mock_adapter).get_edgeworker_version_content(
            GetEdgeWorkerVersionContentRequest(edgeworker_id=42, version="1.23")
        )

        assert isinstance(bundle, Bundle)
        assert bundle.read() == b"\x1f\x8b\x08\x00gzip"
        assert mock_adapter.sent_requests[0].headers == {"Accept": "application/gzip"}

    @pytest.mark.asyncio
    async def test_create_version_uploads_raw_bundle(self, mock_adapter):
        mock_adapter.add_response(
            "POST", "/edgeworkers/v1/ids/42/versions",
            SDKResponse(status_code=201, body=VERSION),
        )

        await EdgeWorkerVersionOperations(mock_adapter).create_edgeworker_version(
            CreateEdgeWorkerVersionRequest(edgeworker_id=42, content_bundle=Bundle(b"tgz-bytes"))
        )

        sent = mock_adapter.sent_requests[0]
        assert sent.content == b"tgz-bytes"
        assert sent.body is None
        assert sent.headers == {"Content-Type": "application/gzip"}

    @pytest.mark.asyncio
    async def test_create_version_requires_bundle(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await EdgeWorkerVersionOperations(mock_adapter).create_edgeworker_version(
                CreateEdgeWorkerVersionRequest(edgeworker_id=42)
            )
        assert exc_info.value.errors == {"content_bundle": "cannot be blank"}

    @pytest.mark.asyncio
    async def test_delete_version(self, mock_adapter):
        mock_adapter.add_response(
            "DELETE", "/edgeworkers/v1/ids/42/versions/1.23", SDKResponse(status_code=204),
        )
        await EdgeWorkerVersionOperations(mock_adapter).delete_edgeworker_version(
            DeleteEdgeWorkerVersionRequest(edgeworker_id=42, version="1.23")
        )
        assert mock_adapter.sent_requests[0].method == "DELETE"


class TestProperties:
    @pytest.mark.asyncio
    async def test_list_properties(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/properties",
            SDKResponse(status_code=200, body={
                "properties": [
                    {"propertyId": 1, "propertyName": "www", "stagingVersion": 3,
                     "productionVersion": None, "latestVersion": 4},
                ],
                "limitedAccessToProperties": True,
            }),
        )

        result = await PropertyOperations(mock_adapter).list_properties(
            ListPropertiesRequest(edgeworker_id=42)
        )

        assert result.properties[0].staging_version == 3
        assert result.properties[0].production_version is None
        assert result.limited_access_to_properties is True
        assert mock_adapter.sent_requests[0].params == {"activeOnly": "false"}

    @pytest.mark.asyncio
    async def test_active_only(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/properties",
            SDKResponse(status_code=200, body={"properties": []}),
        )
        await PropertyOperations(mock_adapter).list_properties(
            ListPropertiesRequest(edgeworker_id=42, active_only=True)
        )
        assert mock_adapter.sent_requests[0].params == {"activeOnly": "true"}


class TestResourceTiers:
    @pytest.mark.asyncio
    async def test_list_resource_tiers(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/resource-tiers",
            SDKResponse(status_code=200, body={"resourceTiers": [{
                "resourceTierId": 100,
                "resourceTierName": "Basic Compute",
                "edgeWorkerLimits": [
                    {"limitName": "Maximum CPU time", "limitValue": 10, "limitUnit": "MILLISECOND"},
                ],
            }]}),
        )

        result = await ResourceTierOperations(mock_adapter).list_resource_tiers(
            ListResourceTiersRequest(contract_id="1-ABC")
        )

        tier = result.resource_tiers[0]
        assert tier.name == "Basic Compute"
        assert tier.edgeworker_limits[0].limit_unit == "MILLISECOND"
        assert mock_adapter.sent_requests[0].params == {"contractId": "1-ABC"}

    @pytest.mark.asyncio
    async def test_list_requires_contract(self, mock_adapter):
        with pytest.raises(StructValidationError):
            await ResourceTierOperations(mock_adapter).list_resource_tiers(ListResourceTiersRequest())

    @pytest.mark.asyncio
    async def test_get_resource_tier(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/ids/42/resource-tier",
            SDKResponse(status_code=200, body={"resourceTierId": 200, "resourceTierName": "Dynamic"}),
        )
        tier = await ResourceTierOperations(mock_adapter).get_resource_tier(
            GetResourceTierRequest(edgeworker_id=42)
        )
        assert tier.id == 200
        assert tier.edgeworker_limits == []


class TestContractsAndGroups:
    @pytest.mark.asyncio
    async def test_list_contracts(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/contracts",
            SDKResponse(status_code=200, body={"contractIds": ["1-ABC", "1-DEF"]}),
        )
        result = await ContractOperations(mock_adapter).list_contracts()
        assert result.contract_ids == ["1-ABC", "1-DEF"]

    @pytest.mark.asyncio
    async def test_list_permission_groups(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/groups",
            SDKResponse(status_code=200, body={"groups": [
                {"groupId": 1, "groupName": "Top", "capabilities": ["VIEW", "EDIT"]},
            ]}),
        )
        result = await PermissionGroupOperations(mock_adapter).list_permission_groups()
        assert result.permission_groups[0].capabilities == ["VIEW", "EDIT"]

    @pytest.mark.asyncio
    async def test_get_permission_group(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/groups/grp_1",
            SDKResponse(status_code=200, body={"groupId": 1, "groupName": "Top", "capabilities": []}),
        )
        group = await PermissionGroupOperations(mock_adapter).get_permission_group(
            GetPermissionGroupRequest(group_id="grp_1")
        )
        assert group.name == "Top"
