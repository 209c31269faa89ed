"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

HTTP/REST transport adapter (default).
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from edgeworkers._version import __version__
from edgeworkers.config.edgerc import EdgeGridCredentials
from edgeworkers.logging_config import get_correlation_id, get_logger
from edgeworkers.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse
from edgeworkers.sdk.edgegrid import EdgeGridAuth

logger = get_logger(__name__)

DEFAULT_USER_AGENT = f"edgeworkers-python/{__version__}"


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    Signing, connection pooling and connection-level retries all live here;
    operations only hand over an ``SDKRequest``.

    Args:
        base_url: Root URL of the API (e.g. ``https://akab-xxx.luna.akamaiapis.net``).
        auth: ``httpx.Auth`` applied to every request, normally ``EdgeGridAuth``.
        account_key: Optional account switch key added to every request.
        timeout: Request timeout in seconds.
        max_retries: Connection retry attempts, handed to the httpx transport.
        user_agent: Value of the ``User-Agent`` header.
        transport: Optional custom transport (overrides ``max_retries``).
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[httpx.Auth] = None,
        account_key: str = "",
        timeout: float = 30.0,
        max_retries: int = 3,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._account_key = account_key
        self._timeout = timeout
        self._max_retries = max_retries
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @classmethod
    def from_credentials(cls, credentials: EdgeGridCredentials, **kwargs: Any) -> HttpAdapter:
        """Build a signed adapter for the host named in ``credentials``."""
        return cls(
            base_url=credentials.base_url,
            auth=EdgeGridAuth.from_credentials(credentials),
            account_key=credentials.account_key,
            **kwargs,
        )

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            transport = self._transport or httpx.AsyncHTTPTransport(retries=self._max_retries)
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                auth=self._auth,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                transport=transport,
            )
            self._connected = True
        return self._client

    async def send(self, request: SDKRequest) -> SDKResponse:
        client = self._ensure_client()

        params: Dict[str, Any] = dict(request.params or {})
        if self._account_key:
            params["accountSwitchKey"] = self._account_key

        headers = dict(request.headers)
        correlation_id = get_correlation_id()
        if correlation_id:
            headers.setdefault("X-Correlation-ID", correlation_id)

        payload: Dict[str, Any] = {}
        if request.content is not None:
            payload["content"] = request.content
        elif request.body is not None:
            payload["json"] = request.body

        start = time.monotonic()
        resp = await client.request(
            method=request.method,
            url=request.path,
            headers=headers,
            params=params or None,
            **payload,
        )
        elapsed = (time.monotonic() - start) * 1000

        return SDKResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            elapsed_ms=round(elapsed, 2),
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
