"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

EdgeGrid request signing.

Implements the ``EG1-HMAC-SHA256`` scheme as an ``httpx.Auth`` so that every
request leaving ``HttpAdapter`` carries a fresh Authorization header::

    EG1-HMAC-SHA256 client_token=...;access_token=...;timestamp=...;nonce=...;signature=...
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import uuid
from datetime import datetime, timezone
from typing import Generator, Iterable, List, Optional

import httpx

from edgeworkers.config.edgerc import MAX_BODY_SIZE, EdgeGridCredentials
from edgeworkers.logging_config import get_logger

logger = get_logger(__name__)

ALGORITHM = "EG1-HMAC-SHA256"


def make_timestamp(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: current UTC time) as ``YYYYMMDDTHH:MM:SS+0000``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y%m%dT%H:%M:%S+0000")


def make_nonce() -> str:
    return str(uuid.uuid4())


def _hmac_b64(key: str, message: str) -> str:
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class EdgeGridAuth(httpx.Auth):
    """EdgeGrid signer for ``httpx`` clients.

    Args:
        client_token: Client token from the API client credentials.
        client_secret: Client secret used to derive the signing key.
        access_token: Access token from the API client credentials.
        headers_to_sign: Header names included in the signature.
        max_body: Maximum number of POST body bytes included in the content hash.
    """

    requires_request_body = True

    def __init__(
        self,
        client_token: str,
        client_secret: str,
        access_token: str,
        headers_to_sign: Iterable[str] = (),
        max_body: int = MAX_BODY_SIZE,
    ) -> None:
        self._client_token = client_token
        self._client_secret = client_secret
        self._access_token = access_token
        self._headers_to_sign: List[str] = sorted(h.lower() for h in headers_to_sign)
        self._max_body = max_body if max_body > 0 else MAX_BODY_SIZE

    @classmethod
    def from_credentials(cls, credentials: EdgeGridCredentials) -> EdgeGridAuth:
        return cls(
            client_token=credentials.client_token,
            client_secret=credentials.client_secret,
            access_token=credentials.access_token,
            headers_to_sign=credentials.headers_to_sign,
            max_body=credentials.max_body,
        )

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.make_auth_header(
            request, make_timestamp(), make_nonce()
        )
        yield request

    # -- Signing steps -------------------------------------------------------

    def make_auth_header(self, request: httpx.Request, timestamp: str, nonce: str) -> str:
        auth_header = (
            f"{ALGORITHM} client_token={self._client_token};"
            f"access_token={self._access_token};"
            f"timestamp={timestamp};nonce={nonce};"
        )
        signing_key = _hmac_b64(self._client_secret, timestamp)
        signature = _hmac_b64(signing_key, self.signing_data(request, auth_header))
        logger.debug(f"Signed {request.method} {request.url.path}")
        return f"{auth_header}signature={signature}"

    def signing_data(self, request: httpx.Request, auth_header: str) -> str:
        url = request.url
        return "\t".join([
            request.method.upper(),
            url.scheme,
            url.netloc.decode("ascii"),
            url.raw_path.decode("ascii"),
            self.canonicalize_headers(request),
            self.content_hash(request),
            auth_header,
        ])

    def canonicalize_headers(self, request: httpx.Request) -> str:
        canonical = []
        for name in self._headers_to_sign:
            if name in request.headers:
                value = " ".join(request.headers[name].split())
                canonical.append(f"{name}:{value.lower()}")
        return "\t".join(canonical)

    def content_hash(self, request: httpx.Request) -> str:
        if request.method.upper() != "POST":
            return ""
        body = request.content
        if not body:
            return ""
        if len(body) > self._max_body:
            logger.debug(f"Body length {len(body)} exceeds max_body {self._max_body}, truncating for hash")
            body = body[:self._max_body]
        return base64.b64encode(hashlib.sha256(body).digest()).decode("ascii")
