"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Tests for SDK Lifecycle Hook Registry.
"""

import pytest

from edgeworkers.exceptions import RequestFailedError, StructValidationError
from edgeworkers.sdk.activations import ActivationOperations, ListActivationsRequest
from edgeworkers.sdk.adapters.base import SDKRequest, SDKResponse
from edgeworkers.sdk.adapters.mock import MockAdapter
from edgeworkers.sdk.errors import APIError

ACTIVATIONS_PATH = "/edgeworkers/v1/ids/42/activations"


class _FailingAdapter(MockAdapter):
    async def send(self, request):
        raise ConnectionError("connection refused")


class TestHookRegistry:
    def test_initialize_receives_kwargs(self, hooks):
        seen = []
        hooks.on_initialize(lambda **kw: seen.append(kw))
        hooks.fire_initialize(client="c")
        assert seen == [{"client": "c"}]

    def test_before_request_pipeline(self, hooks):
        def add_header(name):
            def cb(req):
                req.headers[name] = "1"
                return req
            return cb

        hooks.on_before_request(add_header("X-A"))
        hooks.on_before_request(add_header("X-B"))
        result = hooks.fire_before_request(SDKRequest(method="GET", path="/"))
        assert result.headers == {"X-A": "1", "X-B": "1"}

    def test_before_request_replacement(self, hooks):
        hooks.on_before_request(lambda req: SDKRequest(method=req.method, path="/replaced"))
        assert hooks.fire_before_request(SDKRequest(method="GET", path="/")).path == "/replaced"

    def test_before_request_non_request_ignored(self, hooks):
        hooks.on_before_request(lambda req: None)
        original = SDKRequest(method="GET", path="/")
        assert hooks.fire_before_request(original) is original

    def test_failing_hook_reported_not_raised(self, hooks):
        errors = []
        hooks.on_error(errors.append)

        def boom(req, resp):
            raise RuntimeError("boom")

        hooks.on_after_response(boom)
        hooks.fire_after_response(SDKRequest(method="GET", path="/"), SDKResponse(status_code=200))
        assert len(errors) == 1
        assert str(errors[0]) == "boom"

    def test_failing_error_hook_does_not_recurse(self, hooks):
        def bad(exc):
            raise RuntimeError("worse")

        hooks.on_error(bad)
        hooks.fire_error(ValueError("x"))


class TestHooksAroundOperations:
    @pytest.mark.asyncio
    async def test_request_and_response_hooks_fire(self, hooks):
        adapter = MockAdapter({
            ("GET", ACTIVATIONS_PATH): SDKResponse(status_code=200, body={"activations": []}),
        })
        seen = []
        hooks.on_before_request(lambda req: seen.append(("before", req.path)) or req)
        hooks.on_after_response(lambda req, resp: seen.append(("after", resp.status_code)))

        ops = ActivationOperations(adapter, hooks)
        await ops.list_activations(ListActivationsRequest(edgeworker_id=42))

        assert seen == [("before", ACTIVATIONS_PATH), ("after", 200)]

    @pytest.mark.asyncio
    async def test_error_hook_on_validation_failure(self, hooks, mock_adapter):
        errors = []
        hooks.on_error(errors.append)

        with pytest.raises(StructValidationError):
            await ActivationOperations(mock_adapter, hooks).list_activations(ListActivationsRequest())

        assert isinstance(errors[0], StructValidationError)
        assert mock_adapter.sent_requests == []

    @pytest.mark.asyncio
    async def test_error_hook_on_api_error(self, hooks, mock_adapter):
        errors = []
        hooks.on_error(errors.append)

        with pytest.raises(APIError):
            await ActivationOperations(mock_adapter, hooks).list_activations(
                ListActivationsRequest(edgeworker_id=42)
            )

        assert isinstance(errors[0], APIError)
        assert errors[0].status == 404

    @pytest.mark.asyncio
    async def test_error_hook_on_transport_failure(self, hooks):
        errors = []
        hooks.on_error(errors.append)

        with pytest.raises(RequestFailedError) as exc_info:
            await ActivationOperations(_FailingAdapter(), hooks).list_activations(
                ListActivationsRequest(edgeworker_id=42)
            )

        assert isinstance(exc_info.value.cause, ConnectionError)
        assert errors == [exc_info.value]
