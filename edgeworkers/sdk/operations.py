"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Shared request execution for resource operation groups.

Every API operation goes through the same steps: validate the request object,
build an ``SDKRequest``, send it through the adapter with hooks around it,
check the single expected status code, then decode the body.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

from edgeworkers.exceptions import (
    RequestFailedError,
    ResponseDecodeError,
    StructValidationError,
)
from edgeworkers.logging_config import (
    get_logger,
    log_api_request,
    log_api_response,
    log_validation_failure,
)
from edgeworkers.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from edgeworkers.sdk.errors import normalize_error
from edgeworkers.sdk.hooks import HookRegistry
from edgeworkers.sdk.models import decode_value

logger = get_logger(__name__)


def segment(value: Any) -> str:
    """Escape ``value`` for use as a single URL path segment."""
    return quote(str(getattr(value, "value", value)), safe="")


class ResourceOperations:
    """Base class for one group of API operations (activations, namespaces, ...).

    Subclasses add one coroutine per operation and call ``_validate``,
    ``_execute`` and ``_decode`` in that order.
    """

    def __init__(self, adapter: BaseAdapter, hooks: Optional[HookRegistry] = None) -> None:
        self._adapter = adapter
        self._hooks = hooks or HookRegistry()

    def _validate(self, operation: str, request: Any) -> None:
        logger.debug(f"{operation}: validating request")
        errors = request.validate()
        if errors:
            log_validation_failure(logger, operation, errors)
            exc = StructValidationError(operation, errors)
            self._hooks.fire_error(exc)
            raise exc

    async def _execute(
        self, operation: str, request: SDKRequest, expected_status: int
    ) -> SDKResponse:
        request = self._hooks.fire_before_request(request)
        log_api_request(logger, operation, request.method, request.path)

        try:
            response = await self._adapter.send(request)
        except Exception as exc:
            error = RequestFailedError(operation, exc)
            self._hooks.fire_error(error)
            raise error from exc

        self._hooks.fire_after_response(request, response)
        log_api_response(
            logger,
            operation,
            status_code=response.status_code,
            expected_status=expected_status,
            duration_ms=response.elapsed_ms,
        )

        if response.status_code != expected_status:
            api_error = normalize_error(operation, response)
            self._hooks.fire_error(api_error)
            raise api_error
        return response

    def _decode(self, operation: str, response: SDKResponse, tp: Any) -> Any:
        """Decode the JSON body of ``response`` into ``tp``."""
        try:
            return decode_value(tp, response.json())
        except (ValueError, TypeError) as exc:
            error = ResponseDecodeError(operation, f"failed to decode response body: {exc}")
            self._hooks.fire_error(error)
            raise error from exc
