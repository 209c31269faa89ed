"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Lifecycle Hook Registry.

Lets callers observe and adjust every API call without subclassing the
client: add headers, record timings, forward errors to their own reporting.

Available hooks:
- on_initialize: Fired once when the client finishes setup
- on_before_request: Fired before every outbound request, may replace it
- on_after_response: Fired after every response, whatever its status
- on_error: Fired on any error raised by an operation
"""

from __future__ import annotations

from typing import Any, Callable, List

from edgeworkers.logging_config import get_logger
from edgeworkers.sdk.adapters.base import SDKRequest, SDKResponse

logger = get_logger(__name__)


InitializeCallback = Callable[..., None]
BeforeRequestCallback = Callable[[SDKRequest], SDKRequest]
AfterResponseCallback = Callable[[SDKRequest, SDKResponse], None]
ErrorCallback = Callable[[Exception], None]


class HookRegistry:
    """
    Manages lifecycle hooks for the EdgeWorkers SDK.

    Multiple callbacks per hook are supported and executed in registration
    order. A callback that raises is logged and reported through ``on_error``;
    it never aborts the API call it observes.
    """

    def __init__(self) -> None:
        self._initialize_callbacks: List[InitializeCallback] = []
        self._before_request_callbacks: List[BeforeRequestCallback] = []
        self._after_response_callbacks: List[AfterResponseCallback] = []
        self._error_callbacks: List[ErrorCallback] = []

    # -- Registration methods ------------------------------------------------

    def on_initialize(self, callback: InitializeCallback) -> None:
        """Register a callback fired once when the client finishes setup."""
        self._initialize_callbacks.append(callback)
        logger.debug("Registered on_initialize hook")

    def on_before_request(self, callback: BeforeRequestCallback) -> None:
        """Register a callback fired before every outbound request.

        The callback receives the request and **must** return an
        ``SDKRequest`` (possibly modified).
        """
        self._before_request_callbacks.append(callback)
        logger.debug("Registered on_before_request hook")

    def on_after_response(self, callback: AfterResponseCallback) -> None:
        """Register a callback fired with ``(request, response)`` after every response."""
        self._after_response_callbacks.append(callback)
        logger.debug("Registered on_after_response hook")

    def on_error(self, callback: ErrorCallback) -> None:
        """Register a callback fired on any SDK error."""
        self._error_callbacks.append(callback)
        logger.debug("Registered on_error hook")

    # -- Firing methods (called by the operations) ---------------------------

    def fire_initialize(self, **kwargs: Any) -> None:
        for cb in self._initialize_callbacks:
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error(f"on_initialize hook error: {exc}", exc_info=True)
                self.fire_error(exc)

    def fire_before_request(self, request: SDKRequest) -> SDKRequest:
        """Fire all on_before_request callbacks in order.

        Each callback receives the (possibly replaced) request from the
        previous callback, forming a pipeline.
        """
        current = request
        for cb in self._before_request_callbacks:
            try:
                result = cb(current)
            except Exception as exc:
                logger.error(f"on_before_request hook error: {exc}", exc_info=True)
                self.fire_error(exc)
                continue
            if isinstance(result, SDKRequest):
                current = result
            else:
                logger.warning("on_before_request hook did not return an SDKRequest, ignoring result")
        return current

    def fire_after_response(self, request: SDKRequest, response: SDKResponse) -> None:
        for cb in self._after_response_callbacks:
            try:
                cb(request, response)
            except Exception as exc:
                logger.error(f"on_after_response hook error: {exc}", exc_info=True)
                self.fire_error(exc)

    def fire_error(self, error: Exception) -> None:
        for cb in self._error_callbacks:
            try:
                cb(error)
            except Exception:
                # An error hook failing must not recurse into fire_error
                logger.error("on_error hook itself raised an exception", exc_info=True)
