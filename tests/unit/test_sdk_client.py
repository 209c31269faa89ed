"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Tests for EdgeWorkersClient and EdgeWorkersBuilder.
"""

import httpx
import pytest
import yaml

from edgeworkers.exceptions import CredentialsNotFoundError, SDKConfigurationError
from edgeworkers.sdk.activations import ActivationOperations
from edgeworkers.sdk.adapters.base import SDKResponse
from edgeworkers.sdk.adapters.http import HttpAdapter
from edgeworkers.sdk.client import EdgeWorkersBuilder, EdgeWorkersClient
from edgeworkers.sdk.contracts import ContractOperations
from edgeworkers.sdk.hooks import HookRegistry
from edgeworkers.sdk.mocks import RESOURCE_OPERATIONS


class TestEdgeWorkersClient:
    def test_requires_credentials_or_adapter(self):
        with pytest.raises(SDKConfigurationError):
            EdgeWorkersClient()

    def test_credentials_build_http_adapter(self, credentials):
        client = EdgeWorkersClient(credentials=credentials)
        assert isinstance(client.adapter, HttpAdapter)
        assert isinstance(client.hooks, HookRegistry)

    def test_custom_adapter(self, mock_adapter, hooks):
        client = EdgeWorkersClient(adapter=mock_adapter, hooks=hooks)
        assert client.adapter is mock_adapter
        assert client.hooks is hooks

    @pytest.mark.parametrize("name, ops_cls", sorted(RESOURCE_OPERATIONS.items()))
    def test_resource_properties(self, mock_adapter, name, ops_cls):
        client = EdgeWorkersClient(adapter=mock_adapter)
        ops = getattr(client, name)
        assert isinstance(ops, ops_cls)
        assert getattr(client, name) is ops

    def test_operations_share_adapter_and_hooks(self, mock_adapter, hooks):
        client = EdgeWorkersClient(adapter=mock_adapter, hooks=hooks)
        assert client.activations._adapter is client.contracts._adapter is mock_adapter
        assert client.activations._hooks is hooks

    def test_from_edgerc(self, clean_akamai_env, edgerc_file):
        client = EdgeWorkersClient.from_edgerc(str(edgerc_file), section="edgeworkers", timeout=5.0)
        assert client.adapter._base_url == "https://akab-ew.luna.akamaiapis.net"
        assert client.adapter._account_key == "1-ABCDE"
        assert client.adapter._timeout == 5.0

    def test_from_edgerc_missing_section(self, clean_akamai_env, edgerc_file):
        with pytest.raises(CredentialsNotFoundError):
            EdgeWorkersClient.from_edgerc(str(edgerc_file), section="missing")

    def test_from_config(self, clean_akamai_env, temp_dir, edgerc_file):
        config_path = temp_dir / "config.yaml"
        config_path.write_text(yaml.dump({
            "edgerc": {"path": str(edgerc_file), "section": "edgeworkers"},
            "http": {"timeout": 7, "max_retries": 1, "user_agent": "ci/1.0"},
        }))

        client = EdgeWorkersClient.from_config(str(config_path), configure_logging=False)

        assert client.adapter._timeout == 7.0
        assert client.adapter._max_retries == 1
        assert client.adapter._user_agent == "ci/1.0"

    @pytest.mark.asyncio
    async def test_end_to_end_over_httpx(self, credentials):
        def handler(request):
            assert request.headers["Authorization"].startswith("EG1-HMAC-SHA256 ")
            return httpx.Response(200, json={"contractIds": ["1-ABC"]})

        adapter = HttpAdapter.from_credentials(credentials, transport=httpx.MockTransport(handler))
        async with EdgeWorkersClient(adapter=adapter) as client:
            result = await client.contracts.list_contracts()

        assert result.contract_ids == ["1-ABC"]
        assert not adapter.is_connected

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self, mock_adapter):
        mock_adapter.add_response("GET", "/edgeworkers/v1/contracts", SDKResponse(status_code=200, body={}))
        async with EdgeWorkersClient(adapter=mock_adapter) as client:
            await client.contracts.list_contracts()
            assert len(mock_adapter.sent_requests) == 1
        assert mock_adapter.sent_requests == []


class TestEdgeWorkersBuilder:
    def test_build_requires_configuration(self):
        with pytest.raises(SDKConfigurationError):
            EdgeWorkersBuilder().build()

    def test_build_with_transport(self, mock_adapter):
        client = EdgeWorkersBuilder().set_transport(mock_adapter).build()
        assert client.adapter is mock_adapter

    def test_build_with_credentials(self, credentials):
        client = (
            EdgeWorkersBuilder()
            .set_credentials(credentials)
            .set_timeout(12.5)
            .set_max_retries(0)
            .set_user_agent("builder/1.0")
            .build()
        )
        assert client.adapter._timeout == 12.5
        assert client.adapter._max_retries == 0
        assert client.adapter._user_agent == "builder/1.0"

    def test_set_edgerc(self, clean_akamai_env, edgerc_file):
        client = EdgeWorkersBuilder().set_edgerc(str(edgerc_file)).build()
        assert client.adapter._base_url == "https://akab-default.luna.akamaiapis.net"

    def test_initialize_hook_receives_client(self, mock_adapter):
        seen = []
        client = (
            EdgeWorkersBuilder()
            .set_transport(mock_adapter)
            .on_initialize(lambda **kw: seen.append(kw["client"]))
            .build()
        )
        assert seen == [client]

    @pytest.mark.asyncio
    async def test_builder_hooks_wired_to_operations(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/contracts",
            SDKResponse(status_code=200, body={"contractIds": []}),
        )
        before, after, errors = [], [], []
        client = (
            EdgeWorkersBuilder()
            .set_transport(mock_adapter)
            .on_before_request(lambda req: before.append(req.path) or req)
            .on_after_response(lambda req, resp: after.append(resp.status_code))
            .on_error(errors.append)
            .build()
        )

        await client.contracts.list_contracts()

        assert before == ["/edgeworkers/v1/contracts"]
        assert after == [200]
        assert errors == []
        assert isinstance(client.contracts, ContractOperations)
        assert isinstance(client.activations, ActivationOperations)
